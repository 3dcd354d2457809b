import io

import pytest

from weservio.source import Source, SourceInterface, UnreadableImageError


class BytesSource(SourceInterface):
    def __init__(self, data):
        self._stream = io.BytesIO(data)
        self.read_sizes = []

    def read(self, size):
        self.read_sizes.append(size)
        return self._stream.read(size)

    def seek(self, offset, whence):
        raise OSError("not seekable")


class UnreadableSource(SourceInterface):
    def read(self, size):
        raise OSError("broken")

    def seek(self, offset, whence):
        raise OSError("not seekable")


class NoneSource(SourceInterface):
    def read(self, size):
        return None

    def seek(self, offset, whence):
        return -1


def test_new_from_buffer_keeps_bytes():
    assert Source.new_from_buffer(b"GIF89a").buffer == b"GIF89a"


def test_new_from_buffer_accepts_text():
    assert Source.new_from_buffer("<!DOCTYPE html>").buffer == b"<!DOCTYPE html>"


def test_new_from_buffer_copies_mutable_input():
    data = bytearray(b"abc")
    source = Source.new_from_buffer(data)
    data[0] = ord("z")
    assert source.buffer == b"abc"


def test_new_from_pointer_reads_everything():
    payload = bytes(range(256)) * 50
    reader = BytesSource(payload)
    source = Source.new_from_pointer(reader)
    assert source.buffer == payload
    assert len(source) == len(payload)


def test_new_from_pointer_reads_in_page_chunks():
    reader = BytesSource(b"x" * 10000)
    Source.new_from_pointer(reader)
    assert set(reader.read_sizes) == {4096}


def test_new_from_pointer_empty_stream():
    assert Source.new_from_pointer(BytesSource(b"")).buffer == b""


def test_new_from_pointer_read_error():
    with pytest.raises(UnreadableImageError, match="read error while buffering image"):
        Source.new_from_pointer(UnreadableSource())


def test_new_from_pointer_none_is_an_error():
    with pytest.raises(UnreadableImageError):
        Source.new_from_pointer(NoneSource())


def test_new_from_file_round_trip(tmp_path):
    path = tmp_path / "image.bin"
    payload = b"\x89PNG\r\n\x1a\n" + b"\x00" * 100
    path.write_bytes(payload)
    assert Source.new_from_file(path).buffer == payload
    assert Source.new_from_file(str(path)).buffer == payload


def test_new_from_file_missing_gives_empty(tmp_path):
    assert Source.new_from_file(tmp_path / "doesnotexist.jpg").buffer == b""


def test_interface_is_abstract():
    with pytest.raises(TypeError):
        SourceInterface()