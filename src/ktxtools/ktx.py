"""Decodes the header and metadata of KTX textures into a :py:class:`TextureDescriptor`.

Only the description of the texture is read, the image data following it is left untouched.
Both KTX 1.1 and KTX 2.0 files are supported::

    with open('texture.ktx', 'rb') as f:
        tex = ktx.decode(f)
    print(tex.base_width, tex.base_height, tex.num_levels)
"""
from typing import IO, List, Optional, Tuple, Union
from enum import Enum
from io import BytesIO
import os

import attrs

from . import binformat, formats, logger, vkformat
from .errors import CorruptIndex, DecodeError, TruncatedKeyValueBlock
from .formats import FormatDescriptor
from .header import (
    HEADER_SIZE_V2, LEVEL_INDEX_SIZE, Header, HeaderV1, HeaderV2, LevelIndex,
    read_header, read_level_index,
)
from .kvdata import ORIENTATION_KEY, KeyValueEntry, find_all, find_value, parse_kvd
from .validate import Dimensionality, check_header_v1, check_header_v2


__all__ = [
    'OrientationX', 'OrientationY', 'OrientationZ', 'Orientation', 'DEFAULT_ORIENTATION',
    'TextureDescriptor', 'parse_orientation', 'decode', 'decode_bytes',
]
LOGGER = logger.get_logger(__name__)


class OrientationX(Enum):
    """The direction the S texture coordinate increases in."""
    LEFT = 'l'
    RIGHT = 'r'


class OrientationY(Enum):
    """The direction the T texture coordinate increases in."""
    UP = 'u'
    DOWN = 'd'


class OrientationZ(Enum):
    """The direction the R texture coordinate increases in."""
    IN = 'i'
    OUT = 'o'


@attrs.frozen
class Orientation:
    """The logical orientation of the texture data."""
    x: OrientationX = OrientationX.RIGHT
    y: OrientationY = OrientationY.DOWN
    z: OrientationZ = OrientationZ.OUT


DEFAULT_ORIENTATION = Orientation()
_AXES = (OrientationX, OrientationY, OrientationZ)
# The axis names used in the KTX 1 style, "S=r,T=d,R=o".
_AXIS_NAMES = {'S': 0, 'T': 1, 'R': 2}


def parse_orientation(value: bytes) -> Orientation:
    """Parse the value of a ``KTXorientation`` entry.

    This accepts either the compact form (``rd``, ``rdi``), or the older ``S=r,T=d`` form.
    Axes which are not specified keep their default direction.
    """
    try:
        text = value.rstrip(b'\0').decode('ascii')
    except UnicodeDecodeError:
        raise DecodeError(f'Invalid orientation {value!r}!') from None
    dirs: List[str] = ['r', 'd', 'o']
    if '=' in text:
        for part in text.split(','):
            axis, sep, direction = part.strip().partition('=')
            try:
                dirs[_AXIS_NAMES[axis.upper()]] = direction
            except KeyError:
                raise DecodeError(f'Unknown orientation axis "{axis}" in {value!r}!') from None
    else:
        if len(text) > 3:
            raise DecodeError(f'Invalid orientation {value!r}!')
        dirs[:len(text)] = text
    try:
        x, y, z = [axis_type(direction) for axis_type, direction in zip(_AXES, dirs)]
    except ValueError:
        raise DecodeError(f'Invalid orientation {value!r}!') from None
    return Orientation(x, y, z)


@attrs.frozen(kw_only=True)
class TextureDescriptor:
    """The layout of a texture, decoded from the header of a KTX file."""
    format_descriptor: FormatDescriptor
    #: The size of the data type used for endianness conversion, 1 for compressed data.
    type_size: int
    dimensionality: Dimensionality
    base_width: int
    base_height: int = 1
    base_depth: int = 1
    is_array: bool = False
    num_layers: int = 1
    is_cube_map: bool = False
    num_faces: int = 1
    num_levels: int = 1
    is_compressed: bool = False
    #: If set, the file only contains the first mip level, the rest need to be generated.
    generate_mipmaps: bool = False
    orientation: Orientation = DEFAULT_ORIENTATION
    #: If set, the image data must be byte-swapped in units of ``type_size``.
    needs_byte_swap: bool = False
    #: Metadata entries, in file order.
    key_values: Tuple[KeyValueEntry, ...] = ()
    #: The header this was decoded from, with the byte order corrected.
    header: Header
    #: For KTX 2, the compression scheme applied on top of the format.
    supercompression_scheme: int = 0
    #: For KTX 2, the location of each mip level.
    level_index: Tuple[LevelIndex, ...] = ()

    @property
    def version(self) -> int:
        """The KTX version this was read from, either 1 or 2."""
        return 2 if isinstance(self.header, HeaderV2) else 1

    def level_extent(self, level: int) -> Tuple[int, int, int]:
        """The width, height and depth of a mip level."""
        if not 0 <= level < self.num_levels:
            raise IndexError(f'Mip level {level} out of range, texture has {self.num_levels}!')
        return (
            max(1, self.base_width >> level),
            max(1, self.base_height >> level),
            max(1, self.base_depth >> level),
        )

    def level_size(self, level: int) -> int:
        """The number of bytes needed for a mip level, across all layers and faces."""
        width, height, depth = self.level_extent(level)
        image = self.format_descriptor.image_size(width, height, depth)
        return image * self.num_layers * self.num_faces

    def find_value(self, key: Union[str, bytes]) -> Optional[bytes]:
        """Return the value of the first metadata entry with this key, or None."""
        return find_value(self.key_values, key)

    def find_all(self, key: Union[str, bytes]) -> List[bytes]:
        """Return the values of every metadata entry with this key."""
        return find_all(self.key_values, key)


def _source_name(file: IO[bytes]) -> str:
    name = getattr(file, 'name', None)
    if isinstance(name, (str, os.PathLike)):
        return os.path.basename(os.fspath(name))
    return '<stream>'


def _read_kvd(file: IO[bytes], size: int) -> bytes:
    """Read the key/value block, which must be entirely present."""
    data = binformat.read_upto(file, size)
    if len(data) != size:
        raise TruncatedKeyValueBlock(
            f'Key/value block is {size} bytes long, but the file ends after {len(data)}!'
        )
    return data


def _orientation(entries: Tuple[KeyValueEntry, ...], apply: bool) -> Orientation:
    if not apply:
        return DEFAULT_ORIENTATION
    value = find_value(entries, ORIENTATION_KEY)
    if value is None:
        return DEFAULT_ORIENTATION
    orient = parse_orientation(value)
    LOGGER.debug('Orientation: {}', orient)
    return orient


def _decode_v1(file: IO[bytes], raw: HeaderV1, apply_orientation: bool) -> TextureDescriptor:
    header, info, needs_swap = check_header_v1(raw)
    if needs_swap:
        LOGGER.debug('File has opposite endianness, byte-swapping.')

    fmt = formats.lookup(header.gl_internal_format)
    if fmt.is_unknown:
        LOGGER.warning('Unknown GL internal format 0x{:04X}!', header.gl_internal_format)

    if header.kvd_size > 0:
        entries = parse_kvd(_read_kvd(file, header.kvd_size), '>' if needs_swap else '<')
    else:
        entries = ()
    LOGGER.debug('Read {} key/value entries.', len(entries))

    return TextureDescriptor(
        format_descriptor=fmt,
        type_size=header.gl_type_size,
        dimensionality=info.dimensionality,
        base_width=header.pixel_width,
        base_height=header.pixel_height if info.dimensionality >= 2 else 1,
        base_depth=header.pixel_depth if info.dimensionality == 3 else 1,
        is_array=header.array_elements > 0,
        num_layers=header.array_elements or 1,
        is_cube_map=header.faces == 6,
        num_faces=header.faces,
        num_levels=header.mip_levels,
        is_compressed=info.compressed,
        generate_mipmaps=info.generate_mipmaps,
        orientation=_orientation(entries, apply_orientation),
        needs_byte_swap=needs_swap,
        key_values=entries,
        header=header,
    )


def _decode_v2(
    file: IO[bytes], raw: HeaderV2,
    apply_orientation: bool, validate: bool,
) -> TextureDescriptor:
    fmt = vkformat.lookup_vk(raw.vk_format)
    if fmt.is_unknown and raw.vk_format != vkformat.VkFormat.UNDEFINED:
        LOGGER.warning('Unknown Vulkan format {}!', raw.vk_format)
    header, info = check_header_v2(raw, fmt, validate)

    level_index = read_level_index(file, header.level_index_count)
    pos = HEADER_SIZE_V2 + LEVEL_INDEX_SIZE * len(level_index)
    if header.kvd.length > 0:
        if header.kvd.offset < pos:
            raise CorruptIndex(
                f'Key/value data at offset {header.kvd.offset} overlaps '
                f'the header, which ends at {pos}!'
            )
        binformat.skip(file, header.kvd.offset - pos)
        entries = parse_kvd(_read_kvd(file, header.kvd.length))
    else:
        entries = ()
    LOGGER.debug('Read {} key/value entries.', len(entries))

    return TextureDescriptor(
        format_descriptor=fmt,
        type_size=header.type_size,
        dimensionality=info.dimensionality,
        base_width=header.pixel_width,
        base_height=header.pixel_height if info.dimensionality >= 2 else 1,
        base_depth=header.pixel_depth if info.dimensionality == 3 else 1,
        is_array=header.layer_count > 0,
        num_layers=header.layer_count or 1,
        is_cube_map=header.face_count == 6,
        num_faces=header.face_count,
        num_levels=header.level_count,
        is_compressed=info.compressed,
        generate_mipmaps=info.generate_mipmaps,
        orientation=_orientation(entries, apply_orientation),
        key_values=entries,
        header=header,
        supercompression_scheme=header.supercompression_scheme,
        level_index=level_index,
    )


def decode(
    file: IO[bytes],
    *,
    apply_orientation: bool = False,
    validate_v2: bool = True,
) -> TextureDescriptor:
    """Decode the header and metadata of a KTX file.

    The file should be positioned at the start of the texture, it is only read sequentially.
    Afterward it is left positioned after the key/value data.

    :param apply_orientation: If set, the ``KTXorientation`` metadata entry is used to set \
        the orientation. Otherwise it is always right, down, out.
    :param validate_v2: If set, KTX 2 headers are checked the same way as KTX 1 headers. \
        Otherwise only the width and an upper bound on the level count are checked.
    :raises DecodeError: If the file is not a valid KTX texture.
    """
    with logger.context(_source_name(file)):
        raw = read_header(file)
        if isinstance(raw, HeaderV1):
            LOGGER.debug('Decoding KTX 1 texture.')
            return _decode_v1(file, raw, apply_orientation)
        else:
            LOGGER.debug('Decoding KTX 2 texture.')
            return _decode_v2(file, raw, apply_orientation, validate_v2)


def decode_bytes(
    data: bytes,
    *,
    apply_orientation: bool = False,
    validate_v2: bool = True,
) -> TextureDescriptor:
    """Decode a KTX file which has already been read into memory."""
    return decode(
        BytesIO(data),
        apply_orientation=apply_orientation,
        validate_v2=validate_v2,
    )
