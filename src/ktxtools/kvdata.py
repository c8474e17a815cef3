"""Parses the key/value metadata block stored in KTX files.

The block is a sequence of entries, each laid out as::

    u32 size     # Length of the key, null terminator and value.
    key          # UTF-8, null-terminated.
    value        # Arbitrary bytes.
    padding      # To the next multiple of 4.

Entries are kept in the order they appear in the file, and duplicate keys are not merged.
"""
from typing import Iterable, List, Optional, Sequence, Tuple, Union
import struct

import attrs
from typing_extensions import Literal

from . import binformat
from .errors import ForbiddenKeyPrefix, TruncatedKeyValueBlock, UnterminatedKey


__all__ = [
    'KeyValueEntry', 'BOM', 'ORIENTATION_KEY',
    'parse_kvd', 'build_kvd', 'find_value', 'find_all',
]

#: Keys may not start with a UTF-8 byte order mark.
BOM = b'\xEF\xBB\xBF'
ORIENTATION_KEY = b'KTXorientation'


@attrs.frozen
class KeyValueEntry:
    """A single metadata entry. The value may be empty."""
    key: bytes
    value: bytes = b''

    @property
    def entry_size(self) -> int:
        """The size this entry is stored with, excluding the size field and padding."""
        return len(self.key) + 1 + len(self.value)


def _as_key(key: Union[str, bytes]) -> bytes:
    return key.encode('utf8') if isinstance(key, str) else key


def parse_kvd(data: bytes, byteorder: Literal['<', '>'] = '<') -> Tuple[KeyValueEntry, ...]:
    """Parse a key/value block.

    :param data: The entire block, exactly as long as the header specified.
    :param byteorder: The byte order of the size fields. Byte-swapped KTX 1 files use ``>``.
    """
    size_fmt = struct.Struct(byteorder + 'I')
    entries: List[KeyValueEntry] = []
    pos = 0
    while pos < len(data):
        start = pos + binformat.SIZE_INT
        if start > len(data):
            raise TruncatedKeyValueBlock(
                f'Key/value block ends inside the size of the entry at offset {pos}!', pos,
            )
        [entry_size] = size_fmt.unpack_from(data, pos)
        end = start + entry_size
        if end > len(data):
            raise TruncatedKeyValueBlock(
                f'Entry at offset {pos} is {entry_size} bytes long, '
                f'but only {len(data) - start} bytes remain!',
                pos,
            )
        null = data.find(b'\0', start, end)
        if null == -1:
            raise UnterminatedKey(pos)
        key = bytes(data[start:null])
        if key.startswith(BOM):
            raise ForbiddenKeyPrefix(pos)
        entries.append(KeyValueEntry(key, bytes(data[null + 1:end])))
        # Padding may be left off the final entry.
        pos = binformat.align(end)
    return tuple(entries)


def build_kvd(
    entries: Iterable[KeyValueEntry],
    byteorder: Literal['<', '>'] = '<',
) -> bytes:
    """Produce a key/value block from a sequence of entries. This is the inverse of :py:func:`parse_kvd`."""
    size_fmt = struct.Struct(byteorder + 'I')
    buf = bytearray()
    for entry in entries:
        if b'\0' in entry.key:
            raise ValueError(f'Key {entry.key!r} may not contain a null byte!')
        if entry.key.startswith(BOM):
            raise ValueError(f'Key {entry.key!r} may not start with a byte order mark!')
        buf += size_fmt.pack(entry.entry_size)
        buf += entry.key
        buf += b'\0'
        buf += entry.value
        buf += bytes(binformat.padding(len(buf)))
    return bytes(buf)


def find_value(entries: Sequence[KeyValueEntry], key: Union[str, bytes]) -> Optional[bytes]:
    """Return the value of the first entry with this key, or None if not present."""
    key = _as_key(key)
    for entry in entries:
        if entry.key == key:
            return entry.value
    return None


def find_all(entries: Sequence[KeyValueEntry], key: Union[str, bytes]) -> List[bytes]:
    """Return the values of every entry with this key, in file order."""
    key = _as_key(key)
    return [entry.value for entry in entries if entry.key == key]
