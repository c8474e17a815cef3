"""Test the Vulkan format table."""
import pytest

from ktxtools.formats import UNKNOWN_FORMAT, FormatDescriptor, FormatFlags
from ktxtools.vkformat import VK_TABLE, VkFormat, lookup_vk


def test_undefined() -> None:
    """UNDEFINED is used for supercompressed data, it has no layout."""
    assert lookup_vk(VkFormat.UNDEFINED) is UNKNOWN_FORMAT
    assert lookup_vk(0xDEADBEEF) is UNKNOWN_FORMAT


def test_core_formats_defined() -> None:
    """Every format in the core range has a layout."""
    for code in range(1, VkFormat.ASTC_12x12_SRGB_BLOCK + 1):
        assert code in VK_TABLE, VkFormat(code)


@pytest.mark.parametrize('fmt, size', [
    (VkFormat.R8_UNORM, 8),
    (VkFormat.R8G8_SRGB, 16),
    (VkFormat.B8G8R8_UINT, 24),
    (VkFormat.R8G8B8A8_UNORM, 32),
    (VkFormat.B8G8R8A8_SRGB, 32),
    (VkFormat.R16G16B16_SFLOAT, 48),
    (VkFormat.R32G32B32A32_SFLOAT, 128),
    (VkFormat.R64G64B64A64_SFLOAT, 256),
    (VkFormat.A8_UNORM_KHR, 8),
])
def test_uncompressed(fmt: VkFormat, size: int) -> None:
    """Linear formats are single texels."""
    assert lookup_vk(fmt) == FormatDescriptor(block_size_bits=size)


@pytest.mark.parametrize('fmt, size', [
    (VkFormat.R4G4_UNORM_PACK8, 8),
    (VkFormat.R5G6B5_UNORM_PACK16, 16),
    (VkFormat.A4B4G4R4_UNORM_PACK16, 16),
    (VkFormat.A8B8G8R8_SRGB_PACK32, 32),
    (VkFormat.A2B10G10R10_UINT_PACK32, 32),
    (VkFormat.E5B9G9R9_UFLOAT_PACK32, 32),
    (VkFormat.R12X4G12X4B12X4A12X4_UNORM_4PACK16, 64),
])
def test_packed(fmt: VkFormat, size: int) -> None:
    """Packed formats are flagged."""
    desc = lookup_vk(fmt)
    assert desc.flags is FormatFlags.PACKED
    assert desc.block_size_bits == size


@pytest.mark.parametrize('fmt, size', [
    (VkFormat.BC1_RGBA_SRGB_BLOCK, 64),
    (VkFormat.BC2_UNORM_BLOCK, 128),
    (VkFormat.BC3_SRGB_BLOCK, 128),
    (VkFormat.BC4_SNORM_BLOCK, 64),
    (VkFormat.BC5_UNORM_BLOCK, 128),
    (VkFormat.BC6H_SFLOAT_BLOCK, 128),
    (VkFormat.BC7_UNORM_BLOCK, 128),
    (VkFormat.ETC2_R8G8B8A1_UNORM_BLOCK, 64),
    (VkFormat.ETC2_R8G8B8A8_SRGB_BLOCK, 128),
    (VkFormat.EAC_R11_SNORM_BLOCK, 64),
    (VkFormat.EAC_R11G11_UNORM_BLOCK, 128),
])
def test_block_4x4(fmt: VkFormat, size: int) -> None:
    """BC and ETC formats are all 4x4."""
    desc = lookup_vk(fmt)
    assert desc.flags is FormatFlags.COMPRESSED
    assert desc.block_size_bits == size
    assert (desc.block_width, desc.block_height, desc.block_depth) == (4, 4, 1)


@pytest.mark.parametrize('suffix', ['UNORM', 'SRGB', 'SFLOAT'])
@pytest.mark.parametrize('width, height', [(4, 4), (6, 5), (10, 8), (12, 12)])
def test_astc(suffix: str, width: int, height: int) -> None:
    """All the ASTC variants share the same layout."""
    desc = lookup_vk(VkFormat[f'ASTC_{width}x{height}_{suffix}_BLOCK'])
    assert desc.is_compressed
    assert desc.block_size_bits == 128
    assert (desc.block_width, desc.block_height) == (width, height)


def test_pvrtc() -> None:
    """PVRTC v1 requires 2x2 blocks, like the GL version."""
    desc = lookup_vk(VkFormat.PVRTC1_2BPP_SRGB_BLOCK_IMG)
    assert (desc.block_width, desc.block_height) == (8, 4)
    assert (desc.min_blocks_x, desc.min_blocks_y) == (2, 2)
    desc = lookup_vk(VkFormat.PVRTC2_4BPP_UNORM_BLOCK_IMG)
    assert (desc.block_width, desc.block_height) == (4, 4)
    assert (desc.min_blocks_x, desc.min_blocks_y) == (1, 1)


def test_depth_stencil() -> None:
    """Test depth and stencil formats."""
    assert lookup_vk(VkFormat.D16_UNORM).flags is FormatFlags.DEPTH
    assert lookup_vk(VkFormat.S8_UINT).flags is FormatFlags.STENCIL
    desc = lookup_vk(VkFormat.D24_UNORM_S8_UINT)
    assert desc.flags == FormatFlags.DEPTH | FormatFlags.STENCIL
    assert desc.block_size_bits == 32


def test_subsampled() -> None:
    """4:2:2 formats share chroma between pairs of texels."""
    desc = lookup_vk(VkFormat.G8B8G8R8_422_UNORM)
    assert desc.flags is FormatFlags.YUV
    assert desc.block_size_bits == 32
    assert (desc.block_width, desc.block_height) == (2, 1)
    assert desc.image_size(4, 2) == 16
    assert lookup_vk(VkFormat.B16G16R16G16_422_UNORM).block_size_bits == 64


def test_multiplane_unknown() -> None:
    """Multi-plane formats can't be described by a single block."""
    assert lookup_vk(VkFormat.G8_B8R8_2PLANE_420_UNORM).is_unknown
    assert lookup_vk(VkFormat.G16_B16_R16_3PLANE_444_UNORM).is_unknown
