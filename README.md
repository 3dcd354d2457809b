# weservio

Input sources and output targets that carry image data into, and results
out of, an image processing pipeline. It has no dependencies beyond the
standard library.

## Installation

```
pip install weservio
```

## Sources

`weservio.source.Source` holds the complete bytes of an input image. Its
`buffer` property returns those bytes, and `len(source)` gives their count.
A `str` given to a source is stored UTF-8 encoded.

```python
from weservio.source import Source

src = Source.new_from_buffer(b"\x89PNG...")
src = Source.new_from_file("photo.jpg")
```

`Source.new_from_file` reads the whole file. A file that cannot be opened
does not raise; it gives a source with no data.

A custom producer subclasses `SourceInterface` and implements
`read(size)` and `seek(offset, whence)`. `read` returns up to `size` bytes;
an empty result means end of data. `Source.new_from_pointer` drains the
producer in 4096-byte chunks:

```python
from weservio.source import Source, SourceInterface


class Chunks(SourceInterface):
    def __init__(self, data):
        self._data = data

    def read(self, size):
        chunk, self._data = self._data[:size], self._data[size:]
        return chunk

    def seek(self, offset, whence):
        raise OSError("not seekable")


src = Source.new_from_pointer(Chunks(b"..."))
print(len(src.buffer))
```

If `read` raises `OSError` or returns `None`, `new_from_pointer` raises
`UnreadableImageError` with the message
`"read error while buffering image"`. `seek` is never called while
buffering.

## Targets

`weservio.target.Target` wraps a `TargetInterface` and forwards its three
steps: `setup(extension)`, `write(data)` (returning the number of bytes
accepted) and `finish()`.

```python
from weservio.target import Target

out = bytearray()
target = Target.new_to_memory(out)
target.setup(".png")
target.write(b"abc")
target.finish()
assert bytes(out) == b"abc"

target = Target.new_to_file("result.jpg")
target.setup(".jpg")
target.write(b"...")
target.finish()
```

The built-in implementations are:

- `MemoryTarget(out_memory)` appends to a caller-supplied `bytearray`. With
  `None` it discards the data and `write` returns `0`.
- `FileTarget(filename)` opens the file for binary writing on `setup` and
  closes it on `finish`. Calling `write` or `finish` before `setup` raises
  `RuntimeError`.

A custom destination subclasses `TargetInterface` and is wrapped with
`Target.new_to_pointer`.

## What this package does not do

It only moves bytes. It does not decode, transform or encode images, and it
does not parse processing queries. Sources are always buffered whole in
memory, so a source is never read on demand or seeked.