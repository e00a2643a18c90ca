"""
生成结果模型 - 一次生成任务的产物与统计
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field

from .serial import SerialRange


class GenerationReport(BaseModel):
    """生成结果"""
    serial_range: SerialRange

    # 统计
    label_count: int = 0
    page_count: int = 0
    first_serial: str | None = None
    last_serial: str | None = None

    # 产物
    document: bytes = Field(b"", repr=False)
    output_path: Path | None = None

    # 告警标记（不中断）
    flags: list[str] = Field(default_factory=list)

    # 时间戳
    started_at: datetime = Field(default_factory=datetime.now)
    finished_at: datetime | None = None

    def add_flag(self, flag: str) -> None:
        """添加告警标记"""
        if flag not in self.flags:
            self.flags.append(flag)

    def mark_finished(self) -> None:
        self.finished_at = datetime.now()

    @property
    def duration_sec(self) -> float | None:
        if self.finished_at is None:
            return None
        return (self.finished_at - self.started_at).total_seconds()
