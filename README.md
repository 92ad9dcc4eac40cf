# bytepipe

A bounded, in-memory byte stream. One side writes bytes into it and the
other side reads them out, in order. The stream holds no more than a
fixed capacity of unread bytes at once. Whatever does not fit is
dropped, so the writer has to watch how much room is left.

## Install

```
pip install bytepipe
```

## Use

```python
from bytepipe.byte_stream import ByteStream, read

stream = ByteStream(capacity=8)
writer = stream.writer()
reader = stream.reader()

writer.push(b"hello, world")      # only b"hello, w" fits
writer.available_capacity()       # 0
reader.peek()                     # b"hello, w", without removing it
reader.pop(5)                     # discard b"hello"

writer.close()
read(reader, 100)                 # b", w"
reader.is_finished()              # True: closed and fully drained
```

### ByteStream

- `ByteStream(capacity)`: a new, empty, open stream. A negative capacity
  raises `ValueError`. The capacity is available as the `capacity`
  attribute.
- `writer()` and `reader()` return the stream's writing and reading
  views; each call returns the same view object.

### Writer

- `push(data)`: appends as much of `data` (bytes, bytearray or
  memoryview) as the remaining capacity allows; the rest is dropped.
  Data pushed after `close()` is discarded.
- `close()`: marks the end of the stream.
- `is_closed()`: whether `close()` has been called.
- `available_capacity()`: capacity minus the bytes currently buffered.
- `bytes_pushed()`: total number of bytes ever accepted.

### Reader

- `peek()`: returns buffered bytes without removing them. The result is
  non-empty whenever anything is buffered, but it may be only the front
  part of the buffer (the bytes of the oldest pending push).
- `pop(length)`: removes up to `length` bytes from the front; popping
  more than is buffered removes everything. A negative length raises
  `ValueError`.
- `is_finished()`: true once the stream is closed and every byte has been
  popped.
- `bytes_buffered()`: bytes pushed but not yet popped.
- `bytes_popped()`: total number of bytes ever popped.

### Errors

`set_error()` and `has_error()` are available on the stream and on both
views. They share a single error flag; setting it does not otherwise
change how the stream behaves.

### Helper

`read(reader, max_len)` repeatedly peeks and pops until `max_len` bytes
have been collected or the buffer is empty, and returns the collected
bytes. It raises `RuntimeError` if `peek()` returns nothing while bytes
are reported as buffered.

## What it does not do

The stream lives in one process's memory. It does not block, wait or
notify: a writer facing a full stream and a reader facing an empty one
both simply get nothing done, and must check the counters and try again.
Nothing is stored on disk or sent anywhere.

## Tests

```
pip install "bytepipe[test]"
pytest
```