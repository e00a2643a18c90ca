"""
布局模块 - 标签网格与分页

子模块：
- grid: 索引 → 页/行/列/坐标
- cursor: 分页游标
"""

from .cursor import PaginationCursor
from .grid import GridLayout

__all__ = [
    "GridLayout",
    "PaginationCursor",
]
