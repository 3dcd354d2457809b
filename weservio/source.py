"""Image input sources that buffer their whole content in memory."""

from __future__ import annotations

import abc
import os

__all__ = ["UnreadableImageError", "SourceInterface", "Source"]

SOURCE_BUFFER_SIZE = 4096


class UnreadableImageError(Exception):
    """Raised when the data of an image cannot be read."""


class SourceInterface(abc.ABC):
    """A readable, possibly seekable, stream of image data."""

    @abc.abstractmethod
    def read(self, size: int) -> bytes:
        """Return up to ``size`` bytes; an empty result means end of data.

        Raise ``OSError`` when the data cannot be read.
        """

    @abc.abstractmethod
    def seek(self, offset: int, whence: int) -> int:
        """Move the read position and return the new one.

        Raise ``OSError`` when the stream cannot seek.
        """


class Source:
    """Image data held in memory, ready to be loaded."""

    def __init__(self, buffer: bytes | bytearray | memoryview | str) -> None:
        if isinstance(buffer, str):
            buffer = buffer.encode("utf-8")
        self._buffer = bytes(buffer)

    @classmethod
    def new_from_pointer(cls, source: SourceInterface) -> Source:
        """Drain ``source`` in page-sized chunks into a new source."""
        chunks = []
        while True:
            try:
                chunk = source.read(SOURCE_BUFFER_SIZE)
            except OSError as exc:
                raise UnreadableImageError(
                    "read error while buffering image"
                ) from exc
            if chunk is None:
                raise UnreadableImageError("read error while buffering image")
            if not chunk:
                break
            chunks.append(bytes(chunk))
        return cls(b"".join(chunks))

    @classmethod
    def new_from_file(cls, filename: str | os.PathLike) -> Source:
        """Read a whole file; a file that cannot be opened yields no data."""
        try:
            with open(filename, "rb") as handle:
                data = handle.read()
        except OSError:
            data = b""
        return cls(data)

    @classmethod
    def new_from_buffer(cls, buffer: bytes | bytearray | memoryview | str) -> Source:
        """Create a source over a copy of an area of memory."""
        return cls(buffer)

    @property
    def buffer(self) -> bytes:
        """The bytes held by this source."""
        return self._buffer

    def __len__(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<{len(self._buffer)} bytes>)"