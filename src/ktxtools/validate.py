"""Structural checks on raw KTX headers.

The checks are done in a fixed order, and the first failing one raises. Along the way,
facts which are not directly stored in the file are derived into :py:class:`SupplementalInfo`.
"""
from typing import Final, Tuple

import attrs
from typing_extensions import Literal, TypeAlias

from .errors import (
    CorruptDimensions, CorruptFormatFields, UnsupportedArrayDimensionality,
    UnsupportedEndianness, UnsupportedFaceCount, UnsupportedMipCount,
)
from .formats import FormatDescriptor
from .header import ENDIAN_REF, ENDIAN_REF_REV, HeaderV1, HeaderV2


__all__ = [
    'SupplementalInfo', 'Dimensionality',
    'MAX_LEVELS', 'max_mip_levels', 'check_header_v1', 'check_header_v2',
]

Dimensionality: TypeAlias = Literal[1, 2, 3]


@attrs.frozen
class SupplementalInfo:
    """Information derived from a header, after it has been validated."""
    #: If set, the image is stored in a block-compressed format.
    compressed: bool
    #: If set, only the first level is present, the rest must be generated by the loader.
    generate_mipmaps: bool
    dimensionality: Dimensionality


#: The longest mip chain any image can have, with 32-bit extents.
MAX_LEVELS: Final = 32


def max_mip_levels(width: int, height: int = 0, depth: int = 0) -> int:
    """Compute the longest mip chain possible for an image, ``1 + floor(log2(size))``."""
    return max(width, height, depth).bit_length()


def _check_geometry(
    width: int, height: int, depth: int,
    layers: int, faces: int, levels: int,
) -> Tuple[Dimensionality, int, bool]:
    """Check the size and layout values, shared by both versions.

    This returns the dimensionality, the normalised level count and whether mipmaps need to be
    generated.
    """
    if width == 0:
        raise CorruptDimensions('Image width must be greater than zero!')
    dimensionality: Dimensionality
    if depth > 0:
        if height == 0:
            raise CorruptDimensions(f'3D image with depth {depth} must have a height!')
        if layers != 0:
            raise UnsupportedArrayDimensionality(
                f'3D array textures are not supported, got {layers} layers!'
            )
        dimensionality = 3
    elif height > 0:
        dimensionality = 2
    else:
        dimensionality = 1

    if faces == 6:
        if dimensionality != 2:
            raise UnsupportedFaceCount(
                f'Cubemaps must have 2D faces, not {dimensionality}D!', faces,
            )
    elif faces != 1:
        raise UnsupportedFaceCount(f'Unsupported face count {faces}, must be 1 or 6!', faces)

    if levels == 0:
        generate_mipmaps = True
        levels = 1
    else:
        generate_mipmaps = False

    max_levels = max_mip_levels(width, height, depth)
    if levels > max_levels:
        raise UnsupportedMipCount(levels, max_levels)
    return dimensionality, levels, generate_mipmaps


def check_header_v1(header: HeaderV1) -> Tuple[HeaderV1, SupplementalInfo, bool]:
    """Validate a KTX 1 header.

    This returns the header with the byte order corrected, the derived information, and whether
    the file needed to be byte-swapped. The mip level count in the returned header is normalised
    to be at least 1.
    """
    if header.endianness == ENDIAN_REF_REV:
        header = header.swapped()
        needs_swap = True
    elif header.endianness == ENDIAN_REF:
        needs_swap = False
    else:
        raise UnsupportedEndianness(header.endianness)

    dimensionality, levels, generate_mipmaps = _check_geometry(
        header.pixel_width, header.pixel_height, header.pixel_depth,
        header.array_elements, header.faces, header.mip_levels,
    )

    if header.gl_format == header.gl_internal_format:
        raise CorruptFormatFields(
            f'glFormat and glInternalFormat are both 0x{header.gl_format:04X}!'
        )
    # Both zero means compressed, only one is invalid.
    if (header.gl_type == 0) != (header.gl_format == 0):
        raise CorruptFormatFields(
            f'glType (0x{header.gl_type:04X}) and glFormat (0x{header.gl_format:04X}) '
            'must either both be zero, or neither!'
        )
    compressed = header.gl_type == 0

    if levels != header.mip_levels:
        header = attrs.evolve(header, mip_levels=levels)
    return header, SupplementalInfo(compressed, generate_mipmaps, dimensionality), needs_swap


def check_header_v2(
    header: HeaderV2,
    fmt: FormatDescriptor,
    validate: bool = True,
) -> Tuple[HeaderV2, SupplementalInfo]:
    """Validate a KTX 2 header.

    KTX 2 has no OpenGL format fields, so whether the image is compressed is taken from the
    format descriptor instead. If ``validate`` is false, only the width is checked and the
    remaining values are used as-is.
    """
    if validate:
        dimensionality, levels, generate_mipmaps = _check_geometry(
            header.pixel_width, header.pixel_height, header.pixel_depth,
            header.layer_count, header.face_count, header.level_count,
        )
    else:
        if header.pixel_width == 0:
            raise CorruptDimensions('Image width must be greater than zero!')
        if header.pixel_depth > 0:
            dimensionality = 3
        elif header.pixel_height > 0:
            dimensionality = 2
        else:
            dimensionality = 1
        generate_mipmaps = header.level_count == 0
        levels = max(1, header.level_count)
        # No 32-bit extent allows more than this, whatever the other fields say.
        if levels > MAX_LEVELS:
            raise UnsupportedMipCount(levels, MAX_LEVELS)

    if levels != header.level_count:
        header = attrs.evolve(header, level_count=levels)
    return header, SupplementalInfo(fmt.is_compressed, generate_mipmaps, dimensionality)
