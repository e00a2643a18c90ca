"""
数据模型层 - 定义系统核心数据结构

所有模块通过这些模型交互，实现解耦：
- SerialRange: 序列号区间
- BarcodeSymbol / RasterImage: 条码符号与位图
- LabelPosition: 标签页/行/列与坐标
- Page: 页面图元
- GenerationReport: 生成结果
"""

from .layout import LabelPosition, Point
from .page import ImagePrimitive, LinePrimitive, Page, TextPrimitive
from .report import GenerationReport
from .serial import SerialRange
from .symbol import BarcodeSymbol, RasterImage

__all__ = [
    "SerialRange",
    "BarcodeSymbol",
    "RasterImage",
    "Point",
    "LabelPosition",
    "Page",
    "LinePrimitive",
    "ImagePrimitive",
    "TextPrimitive",
    "GenerationReport",
]
