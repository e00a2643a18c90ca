"""
条码符号与位图模型

- BarcodeSymbol: 条/空交替的模块宽度序列（首元素为条）
- RasterImage: 由BarcodeSymbol栅格化得到的位图
"""

from __future__ import annotations

from PIL import Image
from pydantic import BaseModel, Field


class BarcodeSymbol(BaseModel):
    """线性条码符号（Code 128）"""
    text: str = Field(..., description="编码的原文")
    modules: tuple[int, ...] = Field(..., description="条/空模块宽度，首元素为条")

    model_config = {"frozen": True}

    @property
    def module_count(self) -> int:
        """符号总模块数"""
        return sum(self.modules)

    @property
    def bar_count(self) -> int:
        return (len(self.modules) + 1) // 2

    def to_bits(self) -> str:
        """展开为 1(条)/0(空) 串"""
        return "".join(
            ("1" if i % 2 == 0 else "0") * width
            for i, width in enumerate(self.modules)
        )


class RasterImage(BaseModel):
    """条码位图（灰度，黑条白底）"""
    serial: str
    width: int
    height: int
    image: Image.Image

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @property
    def aspect(self) -> float:
        return self.width / self.height
