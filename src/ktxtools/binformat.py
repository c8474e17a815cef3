"""
The binformat module :mod:`binformat` contains functionality for handling binary formats, \
essentially expanding on :external:mod:`struct`'s functionality.

Files are only ever read sequentially, so non-seekable streams can be decoded.
"""
from typing import IO, Any, Final, Tuple, Union
from struct import Struct
import functools

from .errors import IoFailure


__all__ = [
    'SIZE_INT',
    'read_upto', 'read_exact', 'struct_read', 'skip',
    'swap_int32', 'padding', 'align',
]

SIZE_INT: Final = Struct('<I').size

_cached_struct = functools.lru_cache()(Struct)


def read_upto(file: IO[bytes], size: int) -> bytes:
    """Read up to the specified number of bytes, returning less if the file ends.

    Errors produced by the stream itself are reported as :py:class:`~ktxtools.errors.IoFailure`.
    """
    try:
        return file.read(size)
    except OSError as exc:
        raise IoFailure(f'Failed to read {size} bytes: {exc}') from exc


def read_exact(file: IO[bytes], size: int) -> bytes:
    """Read exactly the specified number of bytes from the file.

    Errors produced by the stream itself, or the stream ending early, are both reported as
    :py:class:`~ktxtools.errors.IoFailure`.
    """
    data = read_upto(file, size)
    if len(data) != size:
        raise IoFailure(f'Unexpected end of file, expected {size} bytes, got {len(data)}!')
    return data


def struct_read(fmt: Union[Struct, str], file: IO[bytes]) -> Tuple[Any, ...]:
    """Read a structure from the file, automatically computing the required number of bytes."""
    if not isinstance(fmt, Struct):
        fmt = _cached_struct(fmt)
    return fmt.unpack(read_exact(file, fmt.size))


def skip(file: IO[bytes], size: int) -> None:
    """Discard the specified number of bytes, without requiring the stream to be seekable."""
    while size > 0:
        chunk = read_exact(file, min(size, 65536))
        size -= len(chunk)


def swap_int32(value: int) -> int:
    """Reverse the byte order of an unsigned 32-bit integer."""
    return (
        ((value & 0x000000FF) << 24) |
        ((value & 0x0000FF00) << 8) |
        ((value & 0x00FF0000) >> 8) |
        ((value & 0xFF000000) >> 24)
    )


def padding(size: int, alignment: int = 4) -> int:
    """Return the number of bytes needed to pad ``size`` up to a multiple of ``alignment``."""
    return -size % alignment


def align(size: int, alignment: int = 4) -> int:
    """Round ``size`` up to the next multiple of ``alignment``."""
    return size + padding(size, alignment)

