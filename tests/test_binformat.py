"""Test the binary format helpers."""
from typing import IO
from io import BytesIO, RawIOBase

import pytest

from ktxtools import binformat
from ktxtools.errors import DecodeError, IoFailure


class BrokenFile(RawIOBase):
    """A file which fails to read."""
    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        raise OSError('Disk on fire')


class Unseekable(RawIOBase):
    """A file which cannot seek."""
    def __init__(self, data: bytes) -> None:
        super().__init__()
        self.data = data

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        if size < 0:
            size = len(self.data)
        chunk, self.data = self.data[:size], self.data[size:]
        return chunk


def test_read_exact() -> None:
    """Test reading an exact number of bytes."""
    file = BytesIO(b'abcdefgh')
    assert binformat.read_exact(file, 3) == b'abc'
    assert binformat.read_exact(file, 5) == b'defgh'
    with pytest.raises(IoFailure, match='expected 2 bytes, got 0'):
        binformat.read_exact(file, 2)


def test_read_exact_short() -> None:
    """Running out of data partway is also a failure."""
    with pytest.raises(IoFailure, match='expected 8 bytes, got 3'):
        binformat.read_exact(BytesIO(b'123'), 8)


def test_read_oserror() -> None:
    """Errors from the file itself are wrapped."""
    file: IO[bytes] = BrokenFile()  # type: ignore[assignment]
    with pytest.raises(IoFailure) as exc_info:
        binformat.read_exact(file, 4)
    assert isinstance(exc_info.value.__cause__, OSError)
    assert str(exc_info.value.__cause__) == 'Disk on fire'
    # This is both kinds of exception.
    assert isinstance(exc_info.value, OSError)
    assert isinstance(exc_info.value, DecodeError)

    with pytest.raises(IoFailure):
        binformat.read_upto(file, 4)


def test_read_upto() -> None:
    """Reading up to a size may return less."""
    file = BytesIO(b'abcd')
    assert binformat.read_upto(file, 3) == b'abc'
    assert binformat.read_upto(file, 3) == b'd'
    assert binformat.read_upto(file, 3) == b''


def test_struct_read() -> None:
    """Test reading structures."""
    file = BytesIO(bytes([1, 0, 0, 0, 2, 0, 0xff, 0xff]))
    assert binformat.struct_read('<Ih', file) == (1, 2)
    assert binformat.struct_read('<h', file) == (-1, )
    with pytest.raises(IoFailure):
        binformat.struct_read('<I', file)


def test_skip() -> None:
    """Skipping works on files which are not seekable."""
    file: IO[bytes] = Unseekable(bytes(range(200)))  # type: ignore[assignment]
    binformat.skip(file, 0)
    binformat.skip(file, 150)
    assert binformat.read_exact(file, 2) == bytes([150, 151])
    with pytest.raises(IoFailure):
        binformat.skip(file, 100)


@pytest.mark.parametrize('value, result', [
    (0x04030201, 0x01020304),
    (0x01020304, 0x04030201),
    (0, 0),
    (0xFF, 0xFF000000),
    (0x12345678, 0x78563412),
    (0xFFFFFFFF, 0xFFFFFFFF),
])
def test_swap_int32(value: int, result: int) -> None:
    """Test byte-swapping integers."""
    assert binformat.swap_int32(value) == result
    assert binformat.swap_int32(result) == value


@pytest.mark.parametrize('size, pad, aligned', [
    (0, 0, 0),
    (1, 3, 4),
    (2, 2, 4),
    (3, 1, 4),
    (4, 0, 4),
    (18, 2, 20),
    (21, 3, 24),
])
def test_padding(size: int, pad: int, aligned: int) -> None:
    """Test computing padding to 4 bytes."""
    assert binformat.padding(size) == pad
    assert binformat.align(size) == aligned


def test_padding_alignment() -> None:
    """Other alignments can be used."""
    assert binformat.padding(5, 8) == 3
    assert binformat.align(5, 8) == 8
    assert binformat.align(16, 8) == 16
