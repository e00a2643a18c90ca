"""
页面模型 - 按顺序累积的绘制图元

图元坐标均为页面左上角原点的绝对坐标，序列化时再换算为PDF坐标
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class LinePrimitive(BaseModel):
    """直线"""
    kind: Literal["line"] = "line"
    x1: float
    y1: float
    x2: float
    y2: float


class ImagePrimitive(BaseModel):
    """位图（引用文档级资源）"""
    kind: Literal["image"] = "image"
    resource_key: str
    x: float
    y: float
    width: float
    height: float


class TextPrimitive(BaseModel):
    """居中文字（y为基线）"""
    kind: Literal["text"] = "text"
    text: str
    x: float
    y: float
    font: str = "Helvetica"
    size: float = 7.0


Primitive = Annotated[
    Union[LinePrimitive, ImagePrimitive, TextPrimitive],
    Field(discriminator="kind"),
]


class Page(BaseModel):
    """单页"""
    page_index: int
    width: float
    height: float
    primitives: list[Primitive] = Field(default_factory=list)

    def add(self, primitive: LinePrimitive | ImagePrimitive | TextPrimitive) -> None:
        self.primitives.append(primitive)

    @property
    def is_empty(self) -> bool:
        return not self.primitives

    def image_keys(self) -> list[str]:
        """本页引用的位图资源键（按绘制顺序）"""
        return [p.resource_key for p in self.primitives if isinstance(p, ImagePrimitive)]

    @property
    def label_count(self) -> int:
        return len(self.image_keys())
