"""Image output targets: files, memory areas or custom writers."""

from __future__ import annotations

import abc
import os
from typing import BinaryIO

__all__ = ["TargetInterface", "FileTarget", "MemoryTarget", "Target"]


class TargetInterface(abc.ABC):
    """Something that receives encoded image data."""

    @abc.abstractmethod
    def setup(self, extension: str) -> None:
        """Prepare for output of an image with the given file extension."""

    @abc.abstractmethod
    def write(self, data: bytes) -> int:
        """Write ``data`` and return the number of bytes accepted."""

    @abc.abstractmethod
    def finish(self) -> None:
        """Signal that all data has been written."""


class FileTarget(TargetInterface):
    """Writes output to a file, opened on setup and closed on finish."""

    def __init__(self, filename: str | os.PathLike) -> None:
        self.filename = filename
        self._file: BinaryIO | None = None

    def setup(self, extension: str) -> None:
        self._file = open(self.filename, "wb")

    def write(self, data: bytes) -> int:
        if self._file is None:
            raise RuntimeError("file target is not set up")
        return self._file.write(data)

    def finish(self) -> None:
        if self._file is None:
            raise RuntimeError("file target is not set up")
        self._file.close()
        self._file = None


class MemoryTarget(TargetInterface):
    """Appends output to a caller-supplied bytearray, or discards it."""

    def __init__(self, out_memory: bytearray | None) -> None:
        self.memory = out_memory

    def setup(self, extension: str) -> None:
        pass

    def write(self, data: bytes) -> int:
        if self.memory is None:
            return 0
        self.memory.extend(data)
        return len(data)

    def finish(self) -> None:
        pass


class Target:
    """An output target that forwards to a ``TargetInterface``."""

    def __init__(self, target: TargetInterface) -> None:
        self._target = target

    @classmethod
    def new_to_pointer(cls, target: TargetInterface) -> Target:
        """Create a target that writes to ``target``."""
        return cls(target)

    @classmethod
    def new_to_file(cls, filename: str | os.PathLike) -> Target:
        """Create a target that writes to a file."""
        return cls(FileTarget(filename))

    @classmethod
    def new_to_memory(cls, out_memory: bytearray | None) -> Target:
        """Create a target that appends to ``out_memory``."""
        return cls(MemoryTarget(out_memory))

    def setup(self, extension: str) -> None:
        self._target.setup(extension)

    def write(self, data: bytes) -> int:
        return self._target.write(data)

    def finish(self) -> None:
        self._target.finish()