"""
文档生成模块 - 页面组装与PDF序列化

子模块：
- document: 页面画布与PDF序列化
- pdf_engine: PDF页数计算与落盘
"""

from .document import Document
from .pdf_engine import count_pdf_pages, write_pdf

__all__ = [
    "Document",
    "count_pdf_pages",
    "write_pdf",
]
