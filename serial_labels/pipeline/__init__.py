"""
流水线模块 - 序列号生成与整体生成流程

子模块：
- sequencer: 序列号区间校验与生成
- generator: encode → rasterize → layout → draw → finalize
"""

from .generator import LabelSheetGenerator
from .sequencer import SerialSequencer, build_range

__all__ = [
    "LabelSheetGenerator",
    "SerialSequencer",
    "build_range",
]
