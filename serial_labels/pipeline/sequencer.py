"""
序列号生成器 - prefix + 整数

职责：
1. 校验区间（end必须给出且 >= 0，start <= end）
2. 按升序产出 (零基索引, 序列号)
3. 前缀为空时告警（不中断）
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..interfaces import InvalidRangeError, ISerialSequencer
from ..models import SerialRange

logger = logging.getLogger(__name__)


def build_range(start: int, end: int | None, prefix: str = "") -> SerialRange:
    """校验并构造序列号区间"""
    if end is None or end < 0:
        raise InvalidRangeError("必须指定有效的序列号终点（end >= 0）")
    if start > end:
        raise InvalidRangeError(f"序列号终点必须不小于起点: start={start}, end={end}")
    return SerialRange(start=start, end=end, prefix=prefix or "")


class SerialSequencer(ISerialSequencer):
    """序列号生成器实现"""

    def __init__(self, serial_range: SerialRange):
        # 直接构造的区间同样要校验
        self.serial_range = build_range(serial_range.start, serial_range.end, serial_range.prefix)
        if not self.has_prefix:
            logger.warning("未指定前缀，序列号仅包含数字")

    @property
    def has_prefix(self) -> bool:
        return bool(self.serial_range.prefix)

    def __len__(self) -> int:
        return self.serial_range.label_count

    def __iter__(self) -> Iterator[tuple[int, str]]:
        for index in range(len(self)):
            yield index, self.serial_range.serial_for(index)

    def serial(self, index: int) -> str:
        """零基索引对应的序列号"""
        if not 0 <= index < len(self):
            raise IndexError(f"索引超出区间: {index}")
        return self.serial_range.serial_for(index)
