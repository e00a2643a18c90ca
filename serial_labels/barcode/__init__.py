"""
条码模块 - Code 128编码/栅格化/解码

子模块：
- encoder: 序列号编码与位图栅格化
- decoder: 标准解码（往返校验）
"""

from .decoder import SymbolDecoder
from .encoder import SymbolEncoder, bits_to_modules

__all__ = [
    "SymbolEncoder",
    "SymbolDecoder",
    "bits_to_modules",
]
