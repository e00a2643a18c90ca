"""
标签位置模型

坐标原点为页面左上角，单位与SheetGeometry一致
"""

from __future__ import annotations

from pydantic import BaseModel


class Point(BaseModel):
    """页面坐标点"""
    x: float
    y: float

    model_config = {"frozen": True}

    def offset(self, dx: float, dy: float) -> Point:
        return Point(x=self.x + dx, y=self.y + dy)


class LabelPosition(BaseModel):
    """单个标签的页/行/列与坐标（纯函数结果，不可变）"""
    index: int
    page_index: int
    row: int
    col: int
    label_top_left: Point
    content_top_left: Point

    model_config = {"frozen": True}
