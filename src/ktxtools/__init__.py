"""Reads the headers and metadata of KTX 1.1 and KTX 2.0 texture containers.

The main entry point is :py:func:`decode`, which produces a :py:class:`TextureDescriptor`
describing the size, layout and pixel format of the texture, without reading the image data.
"""
from .errors import (
    CorruptDimensions, CorruptFormatFields, CorruptIndex, DecodeError, ForbiddenKeyPrefix,
    IoFailure, MalformedIdentifier, TruncatedKeyValueBlock, UnsupportedArrayDimensionality,
    UnsupportedEndianness, UnsupportedFaceCount, UnsupportedMipCount, UnterminatedKey,
)
from .formats import FormatDescriptor, FormatFlags
from .kvdata import KeyValueEntry
from .ktx import Orientation, TextureDescriptor, decode, decode_bytes


__version__ = '0.1.0'
__all__ = [
    '__version__',
    'decode', 'decode_bytes',
    'TextureDescriptor', 'FormatDescriptor', 'FormatFlags', 'KeyValueEntry', 'Orientation',

    'DecodeError', 'IoFailure', 'MalformedIdentifier', 'UnsupportedEndianness',
    'CorruptDimensions', 'UnsupportedArrayDimensionality', 'UnsupportedFaceCount',
    'UnsupportedMipCount', 'CorruptFormatFields', 'CorruptIndex',
    'UnterminatedKey', 'ForbiddenKeyPrefix', 'TruncatedKeyValueBlock',

    # Submodules:
    'binformat', 'errors', 'formats', 'header', 'kvdata', 'ktx',  # pyright: ignore
    'logger', 'validate', 'vkformat',  # pyright: ignore
]
