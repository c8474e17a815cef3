"""Test reading the raw headers."""
from io import BytesIO
import struct

import pytest

from ktxtools import header as hdr_mod
from ktxtools.errors import IoFailure, MalformedIdentifier
from ktxtools.header import (
    ENDIAN_REF, ENDIAN_REF_REV, HEADER_SIZE_V1, HEADER_SIZE_V2, IDENTIFIER_V1, IDENTIFIER_V2,
    HeaderV1, HeaderV2, IndexEntry, LevelIndex, read_header, read_level_index,
)
from helpers import *


def test_identifiers() -> None:
    """Check the magic bytes."""
    assert IDENTIFIER_V1 == bytes([0xAB, 0x4B, 0x54, 0x58, 0x20, 0x31, 0x31, 0xBB, 0x0D, 0x0A, 0x1A, 0x0A])
    assert IDENTIFIER_V2 == bytes([0xAB, 0x4B, 0x54, 0x58, 0x20, 0x32, 0x30, 0xBB, 0x0D, 0x0A, 0x1A, 0x0A])


def test_read_v1() -> None:
    """Test reading a KTX 1 header, field by field."""
    data = IDENTIFIER_V1 + struct.pack(
        '<13I',
        ENDIAN_REF, GL_UNSIGNED_BYTE, 1, GL_RGBA, GL_RGBA8, GL_RGBA,
        32, 16, 0, 0, 1, 6, 20,
    )
    assert len(data) == HEADER_SIZE_V1
    file = BytesIO(data + b'extra')
    header = read_header(file)
    assert header == HeaderV1(
        endianness=ENDIAN_REF,
        gl_type=GL_UNSIGNED_BYTE,
        gl_type_size=1,
        gl_format=GL_RGBA,
        gl_internal_format=GL_RGBA8,
        gl_base_internal_format=GL_RGBA,
        pixel_width=32,
        pixel_height=16,
        pixel_depth=0,
        array_elements=0,
        faces=1,
        mip_levels=6,
        kvd_size=20,
    )
    assert header.identifier == IDENTIFIER_V1
    # Only the header is consumed.
    assert file.read() == b'extra'
    assert header.pack() == data


def test_read_v1_swapped() -> None:
    """The header reader does not swap anything itself."""
    data = make_v1(pixel_width=0x100).pack('>')
    header = read_header(BytesIO(data))
    assert isinstance(header, HeaderV1)
    assert header.endianness == ENDIAN_REF_REV
    assert header.pixel_width == 0x10000
    assert header.gl_format == 0x08190000
    assert header.swapped() == make_v1(pixel_width=0x100)
    assert header.swapped().swapped() == header
    # Writing it back out is still identical.
    assert header.pack() == data


def test_read_v2() -> None:
    """Test reading a KTX 2 header, field by field."""
    data = IDENTIFIER_V2 + struct.pack(
        '<9I4I2Q',
        37, 1, 256, 128, 0, 4, 6, 9, 2,
        104, 44, 148, 32,
        184, 1000,
    )
    assert len(data) == HEADER_SIZE_V2
    header = read_header(BytesIO(data))
    assert header == HeaderV2(
        vk_format=37,
        type_size=1,
        pixel_width=256,
        pixel_height=128,
        pixel_depth=0,
        layer_count=4,
        face_count=6,
        level_count=9,
        supercompression_scheme=2,
        dfd=IndexEntry(104, 44),
        kvd=IndexEntry(148, 32),
        sgd=IndexEntry(184, 1000),
    )
    assert header.identifier == IDENTIFIER_V2
    assert header.pack() == data


@pytest.mark.parametrize('levels, count', [(0, 1), (1, 1), (9, 9)])
def test_level_index_count(levels: int, count: int) -> None:
    """The level index always has at least one entry."""
    assert make_v2(level_count=levels).level_index_count == count


def test_read_level_index() -> None:
    """Test reading the level index following a KTX 2 header."""
    data = struct.pack('<6Q', 1000, 256, 512, 1256, 64, 128)
    assert read_level_index(BytesIO(data), 2) == (
        LevelIndex(1000, 256, 512),
        LevelIndex(1256, 64, 128),
    )
    with pytest.raises(IoFailure):
        read_level_index(BytesIO(data), 3)


@pytest.mark.parametrize('data', [
    b'',
    b'\xabKTX',
    b'\x89PNG\r\n\x1a\n\0\0\0\rIHDR',
    b'\xabKTX 10\xbb\r\n\x1a\n' + bytes(52),
    b'\xabKTX 21\xbb\r\n\x1a\n' + bytes(68),
    IDENTIFIER_V1[:-1] + b'\0' + bytes(52),
], ids=['empty', 'short', 'png', 'ktx10', 'ktx21', 'damaged'])
def test_bad_identifier(data: bytes) -> None:
    """Anything other than the two identifiers is rejected."""
    with pytest.raises(MalformedIdentifier) as exc_info:
        read_header(BytesIO(data))
    assert exc_info.value.identifier == data[:12]


@pytest.mark.parametrize('identifier, size', [
    (IDENTIFIER_V1, HEADER_SIZE_V1),
    (IDENTIFIER_V2, HEADER_SIZE_V2),
])
def test_truncated_header(identifier: bytes, size: int) -> None:
    """Running out of data inside the header is an IO failure."""
    for length in [0, 1, size - 13]:
        with pytest.raises(IoFailure):
            read_header(BytesIO(identifier + bytes(length)))
    # The full length is fine.
    read_header(BytesIO(identifier + bytes(size - 12)))


def test_pack_v1_big_endian() -> None:
    """Packing big-endian reverses every field after the identifier."""
    header = make_v1()
    little = header.pack('<')
    big = header.pack('>')
    assert little[:12] == big[:12] == hdr_mod.IDENTIFIER_V1
    for pos in range(12, HEADER_SIZE_V1, 4):
        assert little[pos:pos + 4] == big[pos:pos + 4][::-1]
