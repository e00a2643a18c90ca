"""
分页游标 - 显式的分页状态机

与 GridLayout.position() 逐索引一致，但以状态（current_page /
labels_on_current_page）代替对运行索引取模判断分页。
"""

from __future__ import annotations

from ..models import LabelPosition
from .grid import GridLayout


class PaginationCursor:
    """分页游标"""

    def __init__(self, layout: GridLayout, start_index: int = 0):
        self.layout = layout
        self.index = start_index
        self.current_page = start_index // layout.labels_per_page - (
            1 if layout.starts_page(start_index) else 0
        )
        self.labels_on_current_page = (
            layout.labels_per_page if layout.starts_page(start_index)
            else start_index % layout.labels_per_page
        )

    @property
    def page_full(self) -> bool:
        return self.labels_on_current_page >= self.layout.labels_per_page

    def advance(self) -> tuple[LabelPosition, bool]:
        """
        前进一个标签

        Returns:
            (标签位置, 是否需要先开新页)
        """
        opens_page = self.page_full
        if opens_page:
            self.current_page += 1
            self.labels_on_current_page = 0

        position = self.layout.position(self.index)
        self.index += 1
        self.labels_on_current_page += 1
        return position, opens_page
