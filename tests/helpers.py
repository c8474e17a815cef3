"""Helpers for building KTX files to test with."""
from typing import Any, List, Tuple

import attrs
from typing_extensions import Literal

from ktxtools.header import HEADER_SIZE_V2, LEVEL_INDEX_SIZE, HeaderV1, HeaderV2, IndexEntry


__all__ = [
    'GL_UNSIGNED_BYTE', 'GL_RGB', 'GL_RGBA', 'GL_RGBA8', 'GL_DXT5',
    'make_v1', 'make_v2', 'build_v1', 'build_v2',
]

GL_UNSIGNED_BYTE = 0x1401
GL_RGB = 0x1907
GL_RGBA = 0x1908
GL_RGBA8 = 0x8058
GL_DXT5 = 0x83F3
VK_R8G8B8A8_UNORM = 37


def make_v1(**kwargs: Any) -> HeaderV1:
    """Produce a valid 64x64 RGBA8 header, with some fields overridden."""
    values = dict(
        gl_type=GL_UNSIGNED_BYTE,
        gl_type_size=1,
        gl_format=GL_RGBA,
        gl_internal_format=GL_RGBA8,
        gl_base_internal_format=GL_RGBA,
        pixel_width=64,
        pixel_height=64,
    )
    values.update(kwargs)
    return HeaderV1(**values)


def make_v2(**kwargs: Any) -> HeaderV2:
    """Produce a valid 64x64 RGBA8 header, with some fields overridden."""
    values = dict(
        vk_format=VK_R8G8B8A8_UNORM,
        type_size=1,
        pixel_width=64,
        pixel_height=64,
    )
    values.update(kwargs)
    return HeaderV2(**values)


def build_v1(
    header: HeaderV1,
    kvd: bytes = b'',
    byteorder: Literal['<', '>'] = '<',
) -> bytes:
    """Write out a KTX 1 file, with the key/value data size filled in."""
    header = attrs.evolve(header, kvd_size=len(kvd))
    return header.pack(byteorder) + kvd


def build_v2(header: HeaderV2, kvd: bytes = b'', dfd: bytes = b'') -> Tuple[HeaderV2, bytes]:
    """Write out a KTX 2 file, with the index entries filled in.

    The level index is left zeroed, then the DFD and key/value data follows.
    """
    pos = HEADER_SIZE_V2 + LEVEL_INDEX_SIZE * header.level_index_count
    parts: List[bytes] = [bytes(LEVEL_INDEX_SIZE * header.level_index_count)]
    dfd_entry = IndexEntry(pos if dfd else 0, len(dfd))
    pos += len(dfd)
    parts.append(dfd)
    kvd_entry = IndexEntry(pos if kvd else 0, len(kvd))
    parts.append(kvd)
    header = attrs.evolve(header, dfd=dfd_entry, kvd=kvd_entry)
    return header, header.pack() + b''.join(parts)
