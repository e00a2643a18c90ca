"""
模块接口契约 - 定义各模块的抽象接口

设计原则：
1. 模块间通过接口通信，不直接依赖具体实现
2. 每个接口定义清晰的输入输出类型
3. 便于单元测试和mock替换

使用方式：
    from serial_labels.interfaces import ISymbolEncoder

    class MyEncoder(ISymbolEncoder):
        def encode(self, serial: str) -> BarcodeSymbol:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import (
        BarcodeSymbol,
        GenerationReport,
        LabelPosition,
        Page,
        RasterImage,
        SerialRange,
    )


# ============================================================================
# 序列号与条码模块接口
# ============================================================================

class ISerialSequencer(ABC):
    """序列号生成器接口 - prefix + 整数"""

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[int, str]]:
        """按序产出 (零基索引, 序列号)"""
        ...

    @abstractmethod
    def serial(self, index: int) -> str:
        """零基索引对应的序列号"""
        ...


class ISymbolEncoder(ABC):
    """条码编码器接口 - 序列号 → 条码符号 → 位图"""

    @abstractmethod
    def encode(self, serial: str) -> BarcodeSymbol:
        """
        编码单个序列号

        Args:
            serial: 序列号字符串

        Returns:
            条码符号（条/空模块宽度序列，含起始符、校验符、终止符）

        Raises:
            EncodingError: 字符不可编码或超出最大长度
        """
        ...

    @abstractmethod
    def rasterize(self, symbol: BarcodeSymbol, width_px: int, height_px: int) -> RasterImage:
        """
        栅格化条码符号

        Args:
            symbol: 条码符号
            width_px: 目标宽度（像素）
            height_px: 目标高度（像素）

        Returns:
            位图

        Raises:
            RenderError: 目标尺寸非正或无法容纳
        """
        ...


class ISymbolDecoder(ABC):
    """条码解码器接口 - 用于校验往返一致性"""

    @abstractmethod
    def decode(self, symbol: BarcodeSymbol) -> str:
        """模块宽度序列 → 原文"""
        ...

    @abstractmethod
    def read_raster(self, image: RasterImage) -> BarcodeSymbol:
        """位图 → 模块宽度序列"""
        ...


# ============================================================================
# 布局与文档模块接口
# ============================================================================

class IGridLayout(ABC):
    """标签网格布局接口"""

    @abstractmethod
    def position(self, index: int) -> LabelPosition:
        """
        计算标签位置

        Args:
            index: 标签在区间内的零基索引（serial_value - start）

        Returns:
            页/行/列及左上角坐标
        """
        ...

    @abstractmethod
    def starts_page(self, index: int) -> bool:
        """该索引是否开启新页"""
        ...


class IDocument(ABC):
    """文档画布接口"""

    @abstractmethod
    def new_page(self) -> Page:
        """追加并返回新页"""
        ...

    @abstractmethod
    def draw_image(self, page: Page, image: RasterImage, position: LabelPosition) -> float:
        """在标签内容区放置位图，返回放置高度"""
        ...

    @abstractmethod
    def draw_debug_grid(self, page: Page) -> None:
        """绘制调试网格线"""
        ...

    @abstractmethod
    def finalize(self) -> bytes:
        """序列化整个文档（仅一次）"""
        ...


class ILabelSheetGenerator(ABC):
    """整体生成流程接口"""

    @abstractmethod
    def generate(self, serial_range: SerialRange) -> GenerationReport:
        """生成标签文档"""
        ...


# ============================================================================
# 异常定义
# ============================================================================

class LabelSheetError(Exception):
    """基础异常"""
    pass


class InvalidRangeError(LabelSheetError):
    """序列号区间错误"""
    pass


class EncodingError(LabelSheetError):
    """条码编码错误"""
    pass


class DecodeError(LabelSheetError):
    """条码解码错误"""
    pass


class RenderError(LabelSheetError):
    """栅格化错误"""
    pass


class LayoutError(LabelSheetError):
    """布局计算错误"""
    pass


class SerializationError(LabelSheetError):
    """文档序列化错误"""
    pass
