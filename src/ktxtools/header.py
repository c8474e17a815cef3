"""Reads the fixed-size headers at the start of KTX 1.1 and KTX 2.0 files.

No validation is done here, beyond detecting which of the two formats is present. The raw
values are returned exactly as they were on disk, for :py:mod:`ktxtools.validate` to check.
"""
from typing import IO, Final, Tuple, Union
import struct

import attrs
from typing_extensions import Literal, TypeAlias

from . import binformat
from .errors import MalformedIdentifier


__all__ = [
    'IDENTIFIER_V1', 'IDENTIFIER_V2', 'ENDIAN_REF', 'ENDIAN_REF_REV',
    'HEADER_SIZE_V1', 'HEADER_SIZE_V2', 'LEVEL_INDEX_SIZE',
    'IndexEntry', 'LevelIndex', 'HeaderV1', 'HeaderV2', 'Header',
    'read_header', 'read_level_index',
]

IDENTIFIER_V1: Final = b'\xabKTX 11\xbb\r\n\x1a\n'
IDENTIFIER_V2: Final = b'\xabKTX 20\xbb\r\n\x1a\n'
IDENTIFIER_SIZE: Final = 12
#: The endianness marker, when the file matches how it is read.
ENDIAN_REF: Final = 0x04030201
#: The endianness marker, when every field needs to be byte-swapped.
ENDIAN_REF_REV: Final = 0x01020304

HEADER_SIZE_V1: Final = 64
HEADER_SIZE_V2: Final = 80
LEVEL_INDEX_SIZE: Final = 24

ByteOrder: TypeAlias = Literal['<', '>']

# Everything after the identifier.
_HEADER_V1_FMT = (
    'I'  # Endianness
    'I'  # glType
    'I'  # glTypeSize
    'I'  # glFormat
    'I'  # glInternalFormat
    'I'  # glBaseInternalFormat
    'I'  # Width
    'I'  # Height
    'I'  # Depth
    'I'  # Array elements
    'I'  # Faces
    'I'  # Mipmap levels
    'I'  # Key/value data size
)
_HEADER_V2 = struct.Struct(
    '<'
    'I'  # vkFormat
    'I'  # Type size
    'I'  # Width
    'I'  # Height
    'I'  # Depth
    'I'  # Layers
    'I'  # Faces
    'I'  # Levels
    'I'  # Supercompression scheme
    'II'  # Data format descriptor offset, length
    'II'  # Key/value data offset, length
    'QQ'  # Supercompression global data offset, length
)
_LEVEL_INDEX = struct.Struct('<QQQ')

assert IDENTIFIER_SIZE + struct.calcsize('<' + _HEADER_V1_FMT) == HEADER_SIZE_V1
assert IDENTIFIER_SIZE + _HEADER_V2.size == HEADER_SIZE_V2
assert _LEVEL_INDEX.size == LEVEL_INDEX_SIZE


@attrs.frozen
class IndexEntry:
    """Locates a block of data elsewhere in a KTX 2 file."""
    offset: int = 0
    length: int = 0


@attrs.frozen
class LevelIndex:
    """Locates the image data for a single mip level in a KTX 2 file."""
    offset: int
    length: int
    #: The size after supercompression is undone.
    uncompressed_length: int


@attrs.frozen(kw_only=True)
class HeaderV1:
    """The raw header of a KTX 1.1 file.

    If the file was written with the opposite byte order, every field will appear swapped,
    including ``endianness``. Call :py:meth:`swapped` to correct this.
    """
    endianness: int = ENDIAN_REF
    gl_type: int
    gl_type_size: int
    gl_format: int
    gl_internal_format: int
    gl_base_internal_format: int
    pixel_width: int
    pixel_height: int = 0
    pixel_depth: int = 0
    array_elements: int = 0
    faces: int = 1
    mip_levels: int = 1
    kvd_size: int = 0

    @property
    def identifier(self) -> bytes:
        """The magic bytes this header was read with."""
        return IDENTIFIER_V1

    def swapped(self) -> 'HeaderV1':
        """Return a copy with every field byte-swapped.

        The marker is swapped too, so it continues to describe the byte order of the fields.
        """
        return attrs.evolve(
            self,
            endianness=binformat.swap_int32(self.endianness),
            gl_type=binformat.swap_int32(self.gl_type),
            gl_type_size=binformat.swap_int32(self.gl_type_size),
            gl_format=binformat.swap_int32(self.gl_format),
            gl_internal_format=binformat.swap_int32(self.gl_internal_format),
            gl_base_internal_format=binformat.swap_int32(self.gl_base_internal_format),
            pixel_width=binformat.swap_int32(self.pixel_width),
            pixel_height=binformat.swap_int32(self.pixel_height),
            pixel_depth=binformat.swap_int32(self.pixel_depth),
            array_elements=binformat.swap_int32(self.array_elements),
            faces=binformat.swap_int32(self.faces),
            mip_levels=binformat.swap_int32(self.mip_levels),
            kvd_size=binformat.swap_int32(self.kvd_size),
        )

    def pack(self, byteorder: ByteOrder = '<') -> bytes:
        """Write this header back out, including the identifier.

        Writing big-endian produces a file which must be byte-swapped when read.
        """
        return IDENTIFIER_V1 + struct.pack(
            byteorder + _HEADER_V1_FMT,
            self.endianness,
            self.gl_type, self.gl_type_size, self.gl_format,
            self.gl_internal_format, self.gl_base_internal_format,
            self.pixel_width, self.pixel_height, self.pixel_depth,
            self.array_elements, self.faces, self.mip_levels,
            self.kvd_size,
        )


@attrs.frozen(kw_only=True)
class HeaderV2:
    """The raw header of a KTX 2.0 file. These are always little-endian."""
    vk_format: int
    type_size: int
    pixel_width: int
    pixel_height: int = 0
    pixel_depth: int = 0
    layer_count: int = 0
    face_count: int = 1
    level_count: int = 1
    supercompression_scheme: int = 0
    dfd: IndexEntry = IndexEntry()  #: The data format descriptor.
    kvd: IndexEntry = IndexEntry()  #: The key/value data.
    sgd: IndexEntry = IndexEntry()  #: The supercompression global data.

    @property
    def identifier(self) -> bytes:
        """The magic bytes this header was read with."""
        return IDENTIFIER_V2

    @property
    def level_index_count(self) -> int:
        """The number of entries in the level index following the header."""
        return max(1, self.level_count)

    def pack(self) -> bytes:
        """Write this header back out, including the identifier."""
        return IDENTIFIER_V2 + _HEADER_V2.pack(
            self.vk_format, self.type_size,
            self.pixel_width, self.pixel_height, self.pixel_depth,
            self.layer_count, self.face_count, self.level_count,
            self.supercompression_scheme,
            self.dfd.offset, self.dfd.length,
            self.kvd.offset, self.kvd.length,
            self.sgd.offset, self.sgd.length,
        )


Header: TypeAlias = Union[HeaderV1, HeaderV2]


def read_header(file: IO[bytes]) -> Header:
    """Read the identifier and header from the start of a file.

    :raises MalformedIdentifier: If the file does not start with either identifier.
    :raises IoFailure: If the file ends partway through the header.
    """
    identifier = binformat.read_upto(file, IDENTIFIER_SIZE)
    if identifier == IDENTIFIER_V1:
        (
            endianness,
            gl_type, gl_type_size, gl_format,
            gl_internal_format, gl_base_internal_format,
            width, height, depth,
            array_elements, faces, mip_levels,
            kvd_size,
        ) = binformat.struct_read('<' + _HEADER_V1_FMT, file)
        return HeaderV1(
            endianness=endianness,
            gl_type=gl_type,
            gl_type_size=gl_type_size,
            gl_format=gl_format,
            gl_internal_format=gl_internal_format,
            gl_base_internal_format=gl_base_internal_format,
            pixel_width=width,
            pixel_height=height,
            pixel_depth=depth,
            array_elements=array_elements,
            faces=faces,
            mip_levels=mip_levels,
            kvd_size=kvd_size,
        )
    elif identifier == IDENTIFIER_V2:
        (
            vk_format, type_size,
            width, height, depth,
            layers, faces, levels,
            scheme,
            dfd_off, dfd_len,
            kvd_off, kvd_len,
            sgd_off, sgd_len,
        ) = binformat.struct_read(_HEADER_V2, file)
        return HeaderV2(
            vk_format=vk_format,
            type_size=type_size,
            pixel_width=width,
            pixel_height=height,
            pixel_depth=depth,
            layer_count=layers,
            face_count=faces,
            level_count=levels,
            supercompression_scheme=scheme,
            dfd=IndexEntry(dfd_off, dfd_len),
            kvd=IndexEntry(kvd_off, kvd_len),
            sgd=IndexEntry(sgd_off, sgd_len),
        )
    else:
        raise MalformedIdentifier(identifier)


def read_level_index(file: IO[bytes], count: int) -> Tuple[LevelIndex, ...]:
    """Read the level index which immediately follows a KTX 2 header.

    Entries are read one at a time, so a count larger than the file fails once the data runs out.
    """
    return tuple(
        LevelIndex(*binformat.struct_read(_LEVEL_INDEX, file))
        for _ in range(count)
    )
