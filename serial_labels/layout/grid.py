"""
标签网格布局 - 索引 → 页/行/列/坐标

职责：
1. 计算标签所在页、行、列（纯函数）
2. 计算标签左上角与内容区左上角坐标
3. 判断分页边界、计算总页数
4. 生成调试网格线段

布局规则（columns=3, rows_per_page=10）：
    page = index // labels_per_page
    row  = (index // columns) % rows_per_page
    col  = index % columns
    x    = offset_x + col * (label_width + label_margin)
    y    = offset_y + row * label_height
"""

from __future__ import annotations

import math

from ..config import SheetGeometry
from ..interfaces import IGridLayout, LayoutError
from ..models import LabelPosition, LinePrimitive, Point


class GridLayout(IGridLayout):
    """网格布局实现"""

    def __init__(self, geometry: SheetGeometry | None = None):
        self.geometry = geometry or SheetGeometry()

    @property
    def labels_per_page(self) -> int:
        return self.geometry.labels_per_page

    def position(self, index: int) -> LabelPosition:
        """计算标签位置"""
        if index < 0:
            raise LayoutError(f"标签索引不能为负: {index}")

        g = self.geometry
        col = index % g.columns
        row = (index // g.columns) % g.rows_per_page

        top_left = Point(
            x=g.offset_x + col * (g.label_width + g.label_margin),
            y=g.offset_y + row * g.label_height,
        )
        return LabelPosition(
            index=index,
            page_index=index // self.labels_per_page,
            row=row,
            col=col,
            label_top_left=top_left,
            content_top_left=top_left.offset(g.label_padding, g.label_padding),
        )

    def starts_page(self, index: int) -> bool:
        """该索引是否开启新页"""
        return index % self.labels_per_page == 0

    def page_count(self, label_count: int) -> int:
        """label_count 个标签所需页数"""
        if label_count < 0:
            raise LayoutError(f"标签数量不能为负: {label_count}")
        return math.ceil(label_count / self.labels_per_page)

    def grid_lines(self) -> list[LinePrimitive]:
        """调试网格：每列左右边缘竖线 + 每行边界横线，均贯穿整页"""
        g = self.geometry
        lines = []

        for col in range(g.columns):
            left = g.offset_x + col * (g.label_width + g.label_margin)
            for x in (left, left + g.label_width):
                lines.append(LinePrimitive(x1=x, y1=0, x2=x, y2=g.page_height))

        for row in range(g.rows_per_page + 1):
            y = g.offset_y + row * g.label_height
            lines.append(LinePrimitive(x1=0, y1=y, x2=g.page_width, y2=y))

        return lines
