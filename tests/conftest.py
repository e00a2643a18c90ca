"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(geometry, encoder):
        assert geometry.labels_per_page == 30
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from serial_labels.barcode import SymbolDecoder, SymbolEncoder
from serial_labels.config import BarcodeConfig, RuntimeConfig, SheetGeometry
from serial_labels.doc_gen import Document
from serial_labels.layout import GridLayout
from serial_labels.models import SerialRange
from serial_labels.pipeline import LabelSheetGenerator

REPO_ROOT = Path(__file__).resolve().parents[1]


# ============================================================================
# 配置 Fixtures
# ============================================================================

@pytest.fixture
def geometry() -> SheetGeometry:
    """默认标签纸几何（Letter 3×10）"""
    return SheetGeometry()


@pytest.fixture
def runtime_config() -> RuntimeConfig:
    """运行期配置（默认值）"""
    return RuntimeConfig()


@pytest.fixture
def repo_config_path() -> Path:
    """仓库自带的运行期配置"""
    return REPO_ROOT / "config" / "runtime.yaml"


# ============================================================================
# 组件 Fixtures
# ============================================================================

@pytest.fixture
def encoder() -> SymbolEncoder:
    """默认配置（整数模块宽度栅格化）"""
    return SymbolEncoder(BarcodeConfig())


@pytest.fixture
def stretch_encoder() -> SymbolEncoder:
    """均匀拉伸栅格化"""
    return SymbolEncoder(BarcodeConfig(raster_mode="stretch"))


@pytest.fixture
def decoder() -> SymbolDecoder:
    return SymbolDecoder()


@pytest.fixture
def layout(geometry: SheetGeometry) -> GridLayout:
    return GridLayout(geometry)


@pytest.fixture
def document(geometry: SheetGeometry) -> Document:
    return Document(geometry)


@pytest.fixture
def generator(runtime_config: RuntimeConfig) -> LabelSheetGenerator:
    return LabelSheetGenerator(runtime_config)


# ============================================================================
# 数据 Fixtures
# ============================================================================

@pytest.fixture
def one_page_range() -> SerialRange:
    """恰好一整页"""
    return SerialRange(start=0, end=29, prefix="A")


@pytest.fixture
def two_page_range() -> SerialRange:
    """第二页只有一个标签"""
    return SerialRange(start=0, end=30, prefix="A")


# ============================================================================
# 文件 Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """临时目录"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
