"""
序列号生成器单元测试

每个模块完成后必须运行：pytest tests/unit/test_sequencer.py -v
"""

import logging

import pytest

from serial_labels.interfaces import InvalidRangeError
from serial_labels.models import SerialRange
from serial_labels.pipeline import SerialSequencer, build_range


class TestBuildRange:
    """区间校验测试"""

    def test_valid(self):
        r = build_range(3, 9, "A")
        assert (r.start, r.end, r.prefix) == (3, 9, "A")

    def test_single(self):
        assert build_range(5, 5).label_count == 1

    @pytest.mark.parametrize("end", [None, -1, -100])
    def test_missing_end(self, end):
        """测试未指定终点"""
        with pytest.raises(InvalidRangeError):
            build_range(0, end, "A")

    def test_start_after_end(self):
        """测试起点大于终点"""
        with pytest.raises(InvalidRangeError):
            build_range(5, 3, "A")

    def test_negative_start_allowed(self):
        """终点有效时起点可为负"""
        r = build_range(-2, 1, "N")
        assert SerialSequencer(r).serial(0) == "N-2"


class TestSerialSequencer:
    """序列号生成测试"""

    def test_serials(self):
        """测试 serial(i) == prefix + str(start + i)"""
        r = SerialRange(start=95, end=105, prefix="LOT")
        seq = SerialSequencer(r)
        pairs = list(seq)
        assert len(pairs) == len(seq) == 11
        for i, serial in pairs:
            assert serial == f"LOT{95 + i}"
        assert [i for i, _ in pairs] == list(range(11))

    def test_distinct(self):
        """测试序列号两两不同"""
        seq = SerialSequencer(SerialRange(start=0, end=500, prefix="A"))
        serials = [s for _, s in seq]
        assert len(set(serials)) == len(serials)

    def test_index_out_of_range(self):
        seq = SerialSequencer(SerialRange(start=0, end=2, prefix="A"))
        with pytest.raises(IndexError):
            seq.serial(3)

    def test_invalid_direct_range(self):
        """直接构造的非法区间同样被拒绝"""
        with pytest.raises(InvalidRangeError):
            SerialSequencer(SerialRange(start=5, end=3, prefix="A"))

    def test_missing_prefix_warning(self, caplog: pytest.LogCaptureFixture):
        """测试前缀为空只告警"""
        with caplog.at_level(logging.WARNING, logger="serial_labels"):
            seq = SerialSequencer(SerialRange(start=0, end=1))
        assert not seq.has_prefix
        assert any(r.levelno == logging.WARNING for r in caplog.records)
        assert seq.serial(1) == "1"
