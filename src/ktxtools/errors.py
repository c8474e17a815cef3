"""Exceptions raised when a KTX container cannot be decoded.

Every failure derives from :py:class:`DecodeError`, so callers can reject a single bad file
without needing to know which check failed.
"""
from typing import Optional


__all__ = [
    'DecodeError', 'IoFailure',
    'MalformedIdentifier', 'UnsupportedEndianness',
    'CorruptDimensions', 'UnsupportedArrayDimensionality', 'UnsupportedFaceCount',
    'UnsupportedMipCount', 'CorruptFormatFields', 'CorruptIndex',
    'UnterminatedKey', 'ForbiddenKeyPrefix', 'TruncatedKeyValueBlock',
]


class DecodeError(ValueError):
    """The data is not a valid KTX container."""


class IoFailure(DecodeError, OSError):
    """Reading from the underlying byte source failed, or it ended too early."""


class MalformedIdentifier(DecodeError):
    """The first 12 bytes are neither the KTX 1.1 nor the KTX 2.0 magic."""
    identifier: bytes

    def __init__(self, identifier: bytes) -> None:
        super().__init__(f'Not a KTX file, bad identifier {identifier!r}!')
        self.identifier = identifier


class UnsupportedEndianness(DecodeError):
    """The endianness marker matched neither byte order."""
    marker: int

    def __init__(self, marker: int) -> None:
        super().__init__(f'Invalid endianness marker 0x{marker:08X}!')
        self.marker = marker


class CorruptDimensions(DecodeError):
    """The width is zero, or a 3D image has no height."""


class UnsupportedArrayDimensionality(DecodeError):
    """Array textures of 3D images cannot be represented."""


class UnsupportedFaceCount(DecodeError):
    """The face count is not 1 or 6, or a cubemap is not built from 2D faces."""
    faces: int

    def __init__(self, message: str, faces: int) -> None:
        super().__init__(message)
        self.faces = faces


class UnsupportedMipCount(DecodeError):
    """More mipmap levels are present than the base size allows."""
    levels: int
    max_levels: int

    def __init__(self, levels: int, max_levels: int) -> None:
        super().__init__(
            f'{levels} mipmap levels specified, but the image only allows {max_levels}!'
        )
        self.levels = levels
        self.max_levels = max_levels


class CorruptFormatFields(DecodeError):
    """The GL type/format fields contradict each other."""


class CorruptIndex(DecodeError):
    """A KTX 2 index entry points somewhere it cannot."""


class UnterminatedKey(DecodeError):
    """A key in the key/value data has no terminating null byte."""
    offset: int

    def __init__(self, offset: int) -> None:
        super().__init__(f'Key at offset {offset} is not null-terminated!')
        self.offset = offset


class ForbiddenKeyPrefix(DecodeError):
    """A key in the key/value data starts with a UTF-8 byte order mark."""
    offset: int

    def __init__(self, offset: int) -> None:
        super().__init__(f'Key at offset {offset} starts with a byte order mark!')
        self.offset = offset


class TruncatedKeyValueBlock(DecodeError):
    """An entry extends past the end of the key/value data."""
    offset: Optional[int]

    def __init__(self, message: str, offset: Optional[int] = None) -> None:
        super().__init__(message)
        self.offset = offset
