"""
条码编码器 - 序列号 → Code 128符号 → 位图

职责：
1. 校验序列号可编码（ASCII 0-127、长度上限）
2. 调用python-barcode完成Code 128编码（自动选择A/B/C码集、模103校验）
3. 将条/空位串转换为模块宽度序列
4. 栅格化为指定像素尺寸的位图

依赖：
- python-barcode: Code 128编码
- Pillow: 位图生成与缩放

测试要点：
- test_encode_deterministic: 相同输入得到相同模块序列
- test_encode_rejects_non_ascii: 非ASCII字符报错
- test_integer_centered: 整数模块宽度居中（默认）
- test_stretch_size: 均匀拉伸至目标尺寸
- test_narrower_than_symbol: 目标宽度小于模块数时两种模式均报错
"""

from __future__ import annotations

from itertools import groupby

from barcode.codex import Code128
from barcode.errors import BarcodeError
from PIL import Image

from ..config import BarcodeConfig
from ..interfaces import EncodingError, ISymbolEncoder, RenderError
from ..models import BarcodeSymbol, RasterImage

BLACK = 0
WHITE = 255


class SymbolEncoder(ISymbolEncoder):
    """Code 128编码器实现"""

    def __init__(self, config: BarcodeConfig | None = None):
        self.config = config or BarcodeConfig()

    def encode(self, serial: str) -> BarcodeSymbol:
        """编码单个序列号"""
        self._check_payload(serial)

        try:
            bits = Code128(serial).build()[0]
        except BarcodeError as e:
            raise EncodingError(f"无法编码序列号 {serial!r}: {e}") from e

        return BarcodeSymbol(text=serial, modules=bits_to_modules(bits))

    def rasterize(self, symbol: BarcodeSymbol, width_px: int, height_px: int) -> RasterImage:
        """栅格化条码符号"""
        if width_px <= 0 or height_px <= 0:
            raise RenderError(f"目标尺寸必须为正: {width_px}x{height_px}")
        if width_px < symbol.module_count:
            raise RenderError(
                f"目标宽度 {width_px}px 小于符号模块数 {symbol.module_count}，条空会被丢弃: {symbol.text!r}"
            )

        strip = self._module_strip(symbol)

        if self.config.raster_mode == "integer":
            image = self._scale_integer(strip, width_px, height_px)
        else:
            # 均匀拉伸，不保证整数模块宽度
            image = strip.resize((width_px, height_px), Image.Resampling.NEAREST)

        return RasterImage(serial=symbol.text, width=width_px, height=height_px, image=image)

    def render(self, serial: str, width_px: int, height_px: int) -> RasterImage:
        """encode + rasterize"""
        return self.rasterize(self.encode(serial), width_px, height_px)

    def _check_payload(self, serial: str) -> None:
        if not serial:
            raise EncodingError("序列号为空")
        if len(serial) > self.config.max_payload_length:
            raise EncodingError(
                f"序列号超长: {len(serial)} > {self.config.max_payload_length} ({serial!r})"
            )
        bad = sorted({ch for ch in serial if ord(ch) > 127})
        if bad:
            raise EncodingError(f"序列号包含不可编码字符 {bad!r}: {serial!r}")

    def _module_strip(self, symbol: BarcodeSymbol) -> Image.Image:
        """1像素高、每模块1像素的条带"""
        bits = symbol.to_bits()
        strip = Image.new("L", (len(bits), 1), WHITE)
        strip.putdata([BLACK if b == "1" else WHITE for b in bits])
        return strip

    def _scale_integer(self, strip: Image.Image, width_px: int, height_px: int) -> Image.Image:
        """每模块取整数像素宽度，水平居中"""
        factor = width_px // strip.width
        scaled = strip.resize((strip.width * factor, height_px), Image.Resampling.NEAREST)
        canvas = Image.new("L", (width_px, height_px), WHITE)
        canvas.paste(scaled, ((width_px - scaled.width) // 2, 0))
        return canvas


def bits_to_modules(bits: str) -> tuple[int, ...]:
    """'1101100..' → (2, 1, 2, 2, ...)，首元素必须为条"""
    if not bits or bits[0] != "1":
        raise EncodingError(f"条码位串必须以条开始: {bits[:16]!r}")
    return tuple(len(list(run)) for _, run in groupby(bits))
