"""
序列号区间模型

区间 [start, end] 闭区间，序列号 = prefix + 十进制整数（不补零）
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class SerialRange(BaseModel):
    """序列号区间（构造后不可变）"""
    start: int
    end: int
    prefix: str = Field("", description="序列号前缀，可为空")

    model_config = {"frozen": True}

    @property
    def label_count(self) -> int:
        return self.end - self.start + 1

    def serial_for(self, index: int) -> str:
        """零基索引 → 序列号"""
        return f"{self.prefix}{self.start + index}"
