"""Block layouts for the OpenGL internal formats used by KTX 1 files.

Every pixel format is described as a grid of fixed-size blocks. Uncompressed formats use
1x1x1 blocks holding a single texel, block-compressed formats cover a larger footprint.
The lookup never fails: unrecognised codes produce a descriptor with a zero block size, which
callers should treat as "unsupported format".
"""
from typing import Dict, Final, Iterable, Mapping, Tuple
from enum import Flag, IntEnum
import types

import attrs


__all__ = [
    'FormatFlags', 'FormatDescriptor', 'GLInternalFormat',
    'UNKNOWN_FORMAT', 'TABLE', 'lookup',
    'uncompressed', 'packed', 'block_compressed', 'palettized', 'depth_stencil', 'build_table',
]


class FormatFlags(Flag):
    """Properties of a pixel format's storage."""
    NONE = 0
    PACKED = 0x01  #: Components are packed into sub-byte fields.
    COMPRESSED = 0x02  #: Stored in compressed blocks.
    PALETTIZED = 0x04  #: Texels are indexes into a palette.
    DEPTH = 0x08  #: Has a depth component.
    STENCIL = 0x10  #: Has a stencil component.
    YUV = 0x20  #: Multi-plane or subsampled YUV data.


@attrs.frozen
class FormatDescriptor:
    """The block geometry of a pixel format."""
    flags: FormatFlags = FormatFlags.NONE
    #: For palettized formats, the total size of the palette, in bits.
    palette_size_bits: int = 0
    block_size_bits: int = 0  #: The size of a single block, in bits.
    block_width: int = 1  #: Width of the block, in texels.
    block_height: int = 1  #: Height of the block, in texels.
    block_depth: int = 1  #: Depth of the block, in texels.
    #: Some formats can only be decoded in groups of blocks, so images are padded to this many.
    min_blocks_x: int = 1
    min_blocks_y: int = 1

    @property
    def is_unknown(self) -> bool:
        """Check if this is the descriptor returned for unrecognised formats."""
        return self.block_size_bits == 0

    @property
    def is_compressed(self) -> bool:
        """Checks if the format is stored in compressed blocks."""
        return FormatFlags.COMPRESSED in self.flags

    def image_size(self, width: int, height: int = 1, depth: int = 1) -> int:
        """Compute the number of bytes needed for an image of this size.

        Partial blocks at the edges count as whole blocks. For palettized formats this includes
        the palette itself.
        """
        if self.is_unknown:
            raise ValueError('Cannot compute the size of an unknown format!')
        blocks_x = max(-(-width // self.block_width), self.min_blocks_x)
        blocks_y = max(-(-height // self.block_height), self.min_blocks_y)
        blocks_z = -(-depth // self.block_depth)
        bits = blocks_x * blocks_y * blocks_z * self.block_size_bits
        # Sub-byte formats are padded to the next byte.
        size = -(-bits // 8)
        if FormatFlags.PALETTIZED in self.flags:
            size += self.palette_size_bits // 8
        return size


UNKNOWN_FORMAT: Final = FormatDescriptor(block_size_bits=0)


class GLInternalFormat(IntEnum):
    """OpenGL sized internal formats recognised by :py:func:`lookup`."""
    # 8 bits per component.
    R8 = 0x8229
    R8_SNORM = 0x8F94
    R8UI = 0x8232
    R8I = 0x8231
    SR8 = 0x8FBD
    RG8 = 0x822B
    RG8_SNORM = 0x8F95
    RG8UI = 0x8238
    RG8I = 0x8237
    SRG8 = 0x8FBE
    RGB8 = 0x8051
    RGB8_SNORM = 0x8F96
    RGB8UI = 0x8D7D
    RGB8I = 0x8D8F
    SRGB8 = 0x8C41
    RGBA8 = 0x8058
    RGBA8_SNORM = 0x8F97
    RGBA8UI = 0x8D7C
    RGBA8I = 0x8D8E
    SRGB8_ALPHA8 = 0x8C43

    # 16 bits per component.
    R16 = 0x822A
    R16_SNORM = 0x8F98
    R16UI = 0x8234
    R16I = 0x8233
    R16F = 0x822D
    RG16 = 0x822C
    RG16_SNORM = 0x8F99
    RG16UI = 0x823A
    RG16I = 0x8239
    RG16F = 0x822F
    RGB16 = 0x8054
    RGB16_SNORM = 0x8F9A
    RGB16UI = 0x8D77
    RGB16I = 0x8D89
    RGB16F = 0x881B
    RGBA16 = 0x805B
    RGBA16_SNORM = 0x8F9B
    RGBA16UI = 0x8D76
    RGBA16I = 0x8D88
    RGBA16F = 0x881A

    # 32 bits per component.
    R32UI = 0x8236
    R32I = 0x8235
    R32F = 0x822E
    RG32UI = 0x823C
    RG32I = 0x823B
    RG32F = 0x8230
    RGB32UI = 0x8D71
    RGB32I = 0x8D83
    RGB32F = 0x8815
    RGBA32UI = 0x8D70
    RGBA32I = 0x8D82
    RGBA32F = 0x8814

    # Packed.
    R3_G3_B2 = 0x2A10
    RGB4 = 0x804F
    RGB5 = 0x8050
    RGB565 = 0x8D62
    RGB10 = 0x8052
    RGB12 = 0x8053
    RGBA2 = 0x8055
    RGBA4 = 0x8056
    RGBA12 = 0x805A
    RGB5_A1 = 0x8057
    RGB10_A2 = 0x8059
    RGB10_A2UI = 0x906F
    R11F_G11F_B10F = 0x8C3A
    RGB9_E5 = 0x8C3D

    # S3TC/DXT/BC
    COMPRESSED_RGB_S3TC_DXT1 = 0x83F0
    COMPRESSED_RGBA_S3TC_DXT1 = 0x83F1
    COMPRESSED_RGBA_S3TC_DXT3 = 0x83F2
    COMPRESSED_RGBA_S3TC_DXT5 = 0x83F3
    COMPRESSED_SRGB_S3TC_DXT1 = 0x8C4C
    COMPRESSED_SRGB_ALPHA_S3TC_DXT1 = 0x8C4D
    COMPRESSED_SRGB_ALPHA_S3TC_DXT3 = 0x8C4E
    COMPRESSED_SRGB_ALPHA_S3TC_DXT5 = 0x8C4F

    COMPRESSED_LUMINANCE_LATC1 = 0x8C70
    COMPRESSED_SIGNED_LUMINANCE_LATC1 = 0x8C71
    COMPRESSED_LUMINANCE_ALPHA_LATC2 = 0x8C72
    COMPRESSED_SIGNED_LUMINANCE_ALPHA_LATC2 = 0x8C73

    COMPRESSED_RED_RGTC1 = 0x8DBB
    COMPRESSED_SIGNED_RED_RGTC1 = 0x8DBC
    COMPRESSED_RG_RGTC2 = 0x8DBD
    COMPRESSED_SIGNED_RG_RGTC2 = 0x8DBE

    COMPRESSED_RGBA_BPTC_UNORM = 0x8E8C
    COMPRESSED_SRGB_ALPHA_BPTC_UNORM = 0x8E8D
    COMPRESSED_RGB_BPTC_SIGNED_FLOAT = 0x8E8E
    COMPRESSED_RGB_BPTC_UNSIGNED_FLOAT = 0x8E8F

    # ETC
    ETC1_RGB8 = 0x8D64
    COMPRESSED_R11_EAC = 0x9270
    COMPRESSED_SIGNED_R11_EAC = 0x9271
    COMPRESSED_RG11_EAC = 0x9272
    COMPRESSED_SIGNED_RG11_EAC = 0x9273
    COMPRESSED_RGB8_ETC2 = 0x9274
    COMPRESSED_SRGB8_ETC2 = 0x9275
    COMPRESSED_RGB8_PUNCHTHROUGH_ALPHA1_ETC2 = 0x9276
    COMPRESSED_SRGB8_PUNCHTHROUGH_ALPHA1_ETC2 = 0x9277
    COMPRESSED_RGBA8_ETC2_EAC = 0x9278
    COMPRESSED_SRGB8_ALPHA8_ETC2_EAC = 0x9279

    # PVRTC
    COMPRESSED_RGB_PVRTC_4BPPV1 = 0x8C00
    COMPRESSED_RGB_PVRTC_2BPPV1 = 0x8C01
    COMPRESSED_RGBA_PVRTC_4BPPV1 = 0x8C02
    COMPRESSED_RGBA_PVRTC_2BPPV1 = 0x8C03
    COMPRESSED_SRGB_PVRTC_2BPPV1 = 0x8A54
    COMPRESSED_SRGB_PVRTC_4BPPV1 = 0x8A55
    COMPRESSED_SRGB_ALPHA_PVRTC_2BPPV1 = 0x8A56
    COMPRESSED_SRGB_ALPHA_PVRTC_4BPPV1 = 0x8A57
    COMPRESSED_RGBA_PVRTC_2BPPV2 = 0x9137
    COMPRESSED_RGBA_PVRTC_4BPPV2 = 0x9138
    COMPRESSED_SRGB_ALPHA_PVRTC_2BPPV2 = 0x93F0
    COMPRESSED_SRGB_ALPHA_PVRTC_4BPPV2 = 0x93F1

    # ASTC, 2D
    COMPRESSED_RGBA_ASTC_4x4 = 0x93B0
    COMPRESSED_RGBA_ASTC_5x4 = 0x93B1
    COMPRESSED_RGBA_ASTC_5x5 = 0x93B2
    COMPRESSED_RGBA_ASTC_6x5 = 0x93B3
    COMPRESSED_RGBA_ASTC_6x6 = 0x93B4
    COMPRESSED_RGBA_ASTC_8x5 = 0x93B5
    COMPRESSED_RGBA_ASTC_8x6 = 0x93B6
    COMPRESSED_RGBA_ASTC_8x8 = 0x93B7
    COMPRESSED_RGBA_ASTC_10x5 = 0x93B8
    COMPRESSED_RGBA_ASTC_10x6 = 0x93B9
    COMPRESSED_RGBA_ASTC_10x8 = 0x93BA
    COMPRESSED_RGBA_ASTC_10x10 = 0x93BB
    COMPRESSED_RGBA_ASTC_12x10 = 0x93BC
    COMPRESSED_RGBA_ASTC_12x12 = 0x93BD
    COMPRESSED_SRGB8_ALPHA8_ASTC_4x4 = 0x93D0
    COMPRESSED_SRGB8_ALPHA8_ASTC_5x4 = 0x93D1
    COMPRESSED_SRGB8_ALPHA8_ASTC_5x5 = 0x93D2
    COMPRESSED_SRGB8_ALPHA8_ASTC_6x5 = 0x93D3
    COMPRESSED_SRGB8_ALPHA8_ASTC_6x6 = 0x93D4
    COMPRESSED_SRGB8_ALPHA8_ASTC_8x5 = 0x93D5
    COMPRESSED_SRGB8_ALPHA8_ASTC_8x6 = 0x93D6
    COMPRESSED_SRGB8_ALPHA8_ASTC_8x8 = 0x93D7
    COMPRESSED_SRGB8_ALPHA8_ASTC_10x5 = 0x93D8
    COMPRESSED_SRGB8_ALPHA8_ASTC_10x6 = 0x93D9
    COMPRESSED_SRGB8_ALPHA8_ASTC_10x8 = 0x93DA
    COMPRESSED_SRGB8_ALPHA8_ASTC_10x10 = 0x93DB
    COMPRESSED_SRGB8_ALPHA8_ASTC_12x10 = 0x93DC
    COMPRESSED_SRGB8_ALPHA8_ASTC_12x12 = 0x93DD

    # ASTC, 3D
    COMPRESSED_RGBA_ASTC_3x3x3 = 0x93C0
    COMPRESSED_RGBA_ASTC_4x3x3 = 0x93C1
    COMPRESSED_RGBA_ASTC_4x4x3 = 0x93C2
    COMPRESSED_RGBA_ASTC_4x4x4 = 0x93C3
    COMPRESSED_RGBA_ASTC_5x4x4 = 0x93C4
    COMPRESSED_RGBA_ASTC_5x5x4 = 0x93C5
    COMPRESSED_RGBA_ASTC_5x5x5 = 0x93C6
    COMPRESSED_RGBA_ASTC_6x5x5 = 0x93C7
    COMPRESSED_RGBA_ASTC_6x6x5 = 0x93C8
    COMPRESSED_RGBA_ASTC_6x6x6 = 0x93C9
    COMPRESSED_SRGB8_ALPHA8_ASTC_3x3x3 = 0x93E0
    COMPRESSED_SRGB8_ALPHA8_ASTC_4x3x3 = 0x93E1
    COMPRESSED_SRGB8_ALPHA8_ASTC_4x4x3 = 0x93E2
    COMPRESSED_SRGB8_ALPHA8_ASTC_4x4x4 = 0x93E3
    COMPRESSED_SRGB8_ALPHA8_ASTC_5x4x4 = 0x93E4
    COMPRESSED_SRGB8_ALPHA8_ASTC_5x5x4 = 0x93E5
    COMPRESSED_SRGB8_ALPHA8_ASTC_5x5x5 = 0x93E6
    COMPRESSED_SRGB8_ALPHA8_ASTC_6x5x5 = 0x93E7
    COMPRESSED_SRGB8_ALPHA8_ASTC_6x6x5 = 0x93E8
    COMPRESSED_SRGB8_ALPHA8_ASTC_6x6x6 = 0x93E9

    # ATC
    ATC_RGB = 0x8C92
    ATC_RGBA_EXPLICIT_ALPHA = 0x8C93
    ATC_RGBA_INTERPOLATED_ALPHA = 0x87EE

    # Palettized
    PALETTE4_RGB8 = 0x8B90
    PALETTE4_RGBA8 = 0x8B91
    PALETTE4_R5_G6_B5 = 0x8B92
    PALETTE4_RGBA4 = 0x8B93
    PALETTE4_RGB5_A1 = 0x8B94
    PALETTE8_RGB8 = 0x8B95
    PALETTE8_RGBA8 = 0x8B96
    PALETTE8_R5_G6_B5 = 0x8B97
    PALETTE8_RGBA4 = 0x8B98
    PALETTE8_RGB5_A1 = 0x8B99

    # Depth/stencil
    DEPTH_COMPONENT16 = 0x81A5
    DEPTH_COMPONENT24 = 0x81A6
    DEPTH_COMPONENT32 = 0x81A7
    DEPTH_COMPONENT32F = 0x8CAC
    DEPTH_COMPONENT32F_NV = 0x8DAB
    STENCIL_INDEX1 = 0x8D46
    STENCIL_INDEX4 = 0x8D47
    STENCIL_INDEX8 = 0x8D48
    STENCIL_INDEX16 = 0x8D49
    DEPTH24_STENCIL8 = 0x88F0
    DEPTH32F_STENCIL8 = 0x8CAD
    DEPTH32F_STENCIL8_NV = 0x8DAC


def uncompressed(size_bytes: int) -> FormatDescriptor:
    """Uncompressed format, one texel per block."""
    return FormatDescriptor(block_size_bits=size_bytes * 8)


def packed(size_bits: int) -> FormatDescriptor:
    """Uncompressed format with sub-byte components."""
    return FormatDescriptor(FormatFlags.PACKED, block_size_bits=size_bits)


def block_compressed(
    size_bits: int, width: int, height: int, depth: int = 1,
    min_blocks: int = 1,
) -> FormatDescriptor:
    """Block-compressed format."""
    return FormatDescriptor(
        FormatFlags.COMPRESSED,
        block_size_bits=size_bits,
        block_width=width,
        block_height=height,
        block_depth=depth,
        min_blocks_x=min_blocks,
        min_blocks_y=min_blocks,
    )


def palettized(index_bits: int, colour_bits: int) -> FormatDescriptor:
    """Palettized format, with 2^index_bits palette entries."""
    return FormatDescriptor(
        FormatFlags.PALETTIZED,
        palette_size_bits=(1 << index_bits) * colour_bits,
        block_size_bits=index_bits,
    )


def depth_stencil(flags: FormatFlags, size_bits: int) -> FormatDescriptor:
    """Depth and/or stencil format."""
    return FormatDescriptor(flags, block_size_bits=size_bits)


def build_table(
    groups: Iterable[Tuple[Iterable[int], FormatDescriptor]],
) -> Mapping[int, FormatDescriptor]:
    """Flatten groups of format codes into a read-only table.

    Each code may only be defined once.
    """
    table: Dict[int, FormatDescriptor] = {}
    for codes, desc in groups:
        for code in codes:
            if code in table:
                raise ValueError(f'Duplicate format {code!r}!')
            table[int(code)] = desc
    return types.MappingProxyType(table)


GL = GLInternalFormat
_DEPTH = FormatFlags.DEPTH
_STENCIL = FormatFlags.STENCIL
# The ASTC formats are laid out in sequential order of their footprints.
_ASTC_2D = [(4, 4), (5, 4), (5, 5), (6, 5), (6, 6), (8, 5), (8, 6), (8, 8), (10, 5), (10, 6), (10, 8), (10, 10), (12, 10), (12, 12)]
_ASTC_3D = [(3, 3, 3), (4, 3, 3), (4, 4, 3), (4, 4, 4), (5, 4, 4), (5, 5, 4), (5, 5, 5), (6, 5, 5), (6, 6, 5), (6, 6, 6)]

TABLE: Final[Mapping[int, FormatDescriptor]] = build_table([
    # 8 bits per component.
    ([GL.R8, GL.R8_SNORM, GL.R8UI, GL.R8I, GL.SR8], uncompressed(1)),
    ([GL.RG8, GL.RG8_SNORM, GL.RG8UI, GL.RG8I, GL.SRG8], uncompressed(2)),
    ([GL.RGB8, GL.RGB8_SNORM, GL.RGB8UI, GL.RGB8I, GL.SRGB8], uncompressed(3)),
    ([GL.RGBA8, GL.RGBA8_SNORM, GL.RGBA8UI, GL.RGBA8I, GL.SRGB8_ALPHA8], uncompressed(4)),
    # 16 bits per component.
    ([GL.R16, GL.R16_SNORM, GL.R16UI, GL.R16I, GL.R16F], uncompressed(2)),
    ([GL.RG16, GL.RG16_SNORM, GL.RG16UI, GL.RG16I, GL.RG16F], uncompressed(4)),
    ([GL.RGB16, GL.RGB16_SNORM, GL.RGB16UI, GL.RGB16I, GL.RGB16F], uncompressed(6)),
    ([GL.RGBA16, GL.RGBA16_SNORM, GL.RGBA16UI, GL.RGBA16I, GL.RGBA16F], uncompressed(8)),
    # 32 bits per component.
    ([GL.R32UI, GL.R32I, GL.R32F], uncompressed(4)),
    ([GL.RG32UI, GL.RG32I, GL.RG32F], uncompressed(8)),
    ([GL.RGB32UI, GL.RGB32I, GL.RGB32F], uncompressed(12)),
    ([GL.RGBA32UI, GL.RGBA32I, GL.RGBA32F], uncompressed(16)),

    ([GL.R3_G3_B2, GL.RGBA2], packed(8)),
    ([GL.RGB4], packed(12)),
    ([GL.RGB5, GL.RGB565, GL.RGBA4], packed(16)),
    ([GL.RGB12], packed(36)),
    ([GL.RGBA12], packed(48)),
    ([
        GL.RGB10, GL.RGB5_A1, GL.RGB10_A2, GL.RGB10_A2UI,
        GL.R11F_G11F_B10F, GL.RGB9_E5,
    ], packed(32)),

    ([
        GL.COMPRESSED_RGB_S3TC_DXT1, GL.COMPRESSED_RGBA_S3TC_DXT1,
        GL.COMPRESSED_SRGB_S3TC_DXT1, GL.COMPRESSED_SRGB_ALPHA_S3TC_DXT1,
        GL.COMPRESSED_LUMINANCE_LATC1, GL.COMPRESSED_SIGNED_LUMINANCE_LATC1,
        GL.COMPRESSED_RED_RGTC1, GL.COMPRESSED_SIGNED_RED_RGTC1,
        GL.ETC1_RGB8, GL.COMPRESSED_RGB8_ETC2, GL.COMPRESSED_SRGB8_ETC2,
        GL.COMPRESSED_RGB8_PUNCHTHROUGH_ALPHA1_ETC2, GL.COMPRESSED_SRGB8_PUNCHTHROUGH_ALPHA1_ETC2,
        GL.COMPRESSED_R11_EAC, GL.COMPRESSED_SIGNED_R11_EAC,
        GL.ATC_RGB,
    ], block_compressed(64, 4, 4)),
    ([
        GL.COMPRESSED_RGBA_S3TC_DXT3, GL.COMPRESSED_RGBA_S3TC_DXT5,
        GL.COMPRESSED_SRGB_ALPHA_S3TC_DXT3, GL.COMPRESSED_SRGB_ALPHA_S3TC_DXT5,
        GL.COMPRESSED_LUMINANCE_ALPHA_LATC2, GL.COMPRESSED_SIGNED_LUMINANCE_ALPHA_LATC2,
        GL.COMPRESSED_RG_RGTC2, GL.COMPRESSED_SIGNED_RG_RGTC2,
        GL.COMPRESSED_RGB_BPTC_UNSIGNED_FLOAT, GL.COMPRESSED_RGB_BPTC_SIGNED_FLOAT,
        GL.COMPRESSED_RGBA_BPTC_UNORM, GL.COMPRESSED_SRGB_ALPHA_BPTC_UNORM,
        GL.COMPRESSED_RGBA8_ETC2_EAC, GL.COMPRESSED_SRGB8_ALPHA8_ETC2_EAC,
        GL.COMPRESSED_RG11_EAC, GL.COMPRESSED_SIGNED_RG11_EAC,
        GL.ATC_RGBA_EXPLICIT_ALPHA, GL.ATC_RGBA_INTERPOLATED_ALPHA,
    ], block_compressed(128, 4, 4)),

    # PVRTC1 must be decoded in at least 2x2 blocks, v2 has no such limit.
    ([
        GL.COMPRESSED_RGB_PVRTC_2BPPV1, GL.COMPRESSED_SRGB_PVRTC_2BPPV1,
        GL.COMPRESSED_RGBA_PVRTC_2BPPV1, GL.COMPRESSED_SRGB_ALPHA_PVRTC_2BPPV1,
    ], block_compressed(64, 8, 4, min_blocks=2)),
    ([
        GL.COMPRESSED_RGB_PVRTC_4BPPV1, GL.COMPRESSED_SRGB_PVRTC_4BPPV1,
        GL.COMPRESSED_RGBA_PVRTC_4BPPV1, GL.COMPRESSED_SRGB_ALPHA_PVRTC_4BPPV1,
    ], block_compressed(64, 4, 4, min_blocks=2)),
    ([GL.COMPRESSED_RGBA_PVRTC_2BPPV2, GL.COMPRESSED_SRGB_ALPHA_PVRTC_2BPPV2], block_compressed(64, 8, 4)),
    ([GL.COMPRESSED_RGBA_PVRTC_4BPPV2, GL.COMPRESSED_SRGB_ALPHA_PVRTC_4BPPV2], block_compressed(64, 4, 4)),

    *[
        (
            [GL[f'COMPRESSED_RGBA_ASTC_{w}x{h}'], GL[f'COMPRESSED_SRGB8_ALPHA8_ASTC_{w}x{h}']],
            block_compressed(128, w, h),
        )
        for w, h in _ASTC_2D
    ],
    *[
        (
            [GL[f'COMPRESSED_RGBA_ASTC_{w}x{h}x{d}'], GL[f'COMPRESSED_SRGB8_ALPHA8_ASTC_{w}x{h}x{d}']],
            block_compressed(128, w, h, d),
        )
        for w, h, d in _ASTC_3D
    ],

    ([GL.PALETTE4_RGB8], palettized(4, 24)),
    ([GL.PALETTE4_RGBA8], palettized(4, 32)),
    ([GL.PALETTE4_R5_G6_B5, GL.PALETTE4_RGBA4, GL.PALETTE4_RGB5_A1], palettized(4, 16)),
    ([GL.PALETTE8_RGB8], palettized(8, 24)),
    ([GL.PALETTE8_RGBA8], palettized(8, 32)),
    ([GL.PALETTE8_R5_G6_B5, GL.PALETTE8_RGBA4, GL.PALETTE8_RGB5_A1], palettized(8, 16)),

    ([GL.DEPTH_COMPONENT16], depth_stencil(_DEPTH, 16)),
    ([
        GL.DEPTH_COMPONENT24, GL.DEPTH_COMPONENT32,
        GL.DEPTH_COMPONENT32F, GL.DEPTH_COMPONENT32F_NV,
    ], depth_stencil(_DEPTH, 32)),
    ([GL.STENCIL_INDEX1], depth_stencil(_STENCIL, 1)),
    ([GL.STENCIL_INDEX4], depth_stencil(_STENCIL, 4)),
    ([GL.STENCIL_INDEX8], depth_stencil(_STENCIL, 8)),
    ([GL.STENCIL_INDEX16], depth_stencil(_STENCIL, 16)),
    ([GL.DEPTH24_STENCIL8], depth_stencil(_DEPTH | _STENCIL, 32)),
    ([GL.DEPTH32F_STENCIL8, GL.DEPTH32F_STENCIL8_NV], depth_stencil(_DEPTH | _STENCIL, 64)),
])
del GL, _DEPTH, _STENCIL, _ASTC_2D, _ASTC_3D


def lookup(internal_format: int) -> FormatDescriptor:
    """Find the block layout for an OpenGL internal format.

    Unrecognised formats return :py:data:`UNKNOWN_FORMAT`, which has a block size of zero.
    """
    return TABLE.get(internal_format, UNKNOWN_FORMAT)
