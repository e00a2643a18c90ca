"""
PDF工具 - 产物校验与落盘

职责：
1. PDF页数计算（校验生成结果）
2. 字节流写入文件

依赖：
- pypdf: PDF解析
"""

from __future__ import annotations

import io
from pathlib import Path

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from ..interfaces import SerializationError


def count_pdf_pages(data: bytes) -> int:
    """计算PDF页数"""
    try:
        return len(PdfReader(io.BytesIO(data)).pages)
    except PyPdfError as e:
        raise SerializationError(f"无法解析PDF: {e}") from e


def write_pdf(data: bytes, pdf_path: Path) -> Path:
    """写入PDF文件（自动创建父目录）"""
    pdf_path.parent.mkdir(parents=True, exist_ok=True)
    pdf_path.write_bytes(data)
    return pdf_path
