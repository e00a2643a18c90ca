"""
运行期配置 - 读取 config/runtime.yaml

职责：
- 加载纸张几何、条码、输出、日志等运行参数
- 提供环境变量覆盖机制
- 类型安全的配置访问
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings
from reportlab.lib.units import inch, mm

_POINTS_PER_UNIT = {
    "in": inch,
    "mm": mm,
    "pt": 1.0,
}


class SheetGeometry(BaseModel):
    """标签纸几何（默认：Letter纸 3列×10行，单位英寸）"""

    unit: Literal["in", "mm", "pt"] = "in"

    page_width: float = Field(8.5, gt=0)
    page_height: float = Field(11.0, gt=0)

    columns: int = Field(3, gt=0)
    rows_per_page: int = Field(10, gt=0)

    label_width: float = Field(2.625, gt=0)
    label_height: float = Field(1.0, gt=0)
    label_margin: float = Field(0.125, ge=0, description="列间距")
    label_padding: float = Field(0.125, ge=0, description="内容与标签边缘的间距")

    offset_x: float = Field(0.1875, ge=0, description="页面左边距")
    offset_y: float = Field(0.5, ge=0, description="页面上边距")

    # 仅决定位图像素尺寸与宽高比
    barcode_width: float = Field(2.0, gt=0)
    barcode_height: float = Field(0.5, gt=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_fits_page(self) -> SheetGeometry:
        right = self.offset_x + self.columns * self.label_width + (self.columns - 1) * self.label_margin
        bottom = self.offset_y + self.rows_per_page * self.label_height
        if right > self.page_width + 1e-9:
            raise ValueError(f"标签列超出页面宽度: {right} > {self.page_width}")
        if bottom > self.page_height + 1e-9:
            raise ValueError(f"标签行超出页面高度: {bottom} > {self.page_height}")
        if self.content_width <= 0:
            raise ValueError("内容区宽度必须为正（label_padding过大）")
        return self

    @property
    def labels_per_page(self) -> int:
        return self.columns * self.rows_per_page

    @property
    def content_width(self) -> float:
        """标签可打印区宽度"""
        return self.label_width - 2 * self.label_padding

    @property
    def points_per_unit(self) -> float:
        return _POINTS_PER_UNIT[self.unit]


class BarcodeConfig(BaseModel):
    """条码配置"""

    max_payload_length: int = Field(48, gt=0)
    raster_mode: Literal["stretch", "integer"] = "integer"
    raster_dpi: int = Field(72, gt=0)

    # 人眼可读文字
    show_text: bool = True
    text_font: str = "Helvetica"
    text_font_size: float = Field(7.0, gt=0, description="字号（pt）")

    def pixel_size(self, geometry: SheetGeometry) -> tuple[int, int]:
        """位图像素尺寸（宽, 高）"""
        scale = self.raster_dpi * geometry.points_per_unit / inch
        return int(geometry.barcode_width * scale), int(geometry.barcode_height * scale)


class OutputConfig(BaseModel):
    """输出配置"""

    default_path: str = "out.pdf"
    debug_grid: bool = False
    compress: bool = True
    title: str = "Serial labels"


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: str = "INFO"
    log_to_file: bool = False
    log_file: str = "serial_labels.log"


class RuntimeConfig(BaseSettings):
    """运行期配置（支持环境变量覆盖）"""

    geometry: SheetGeometry = Field(default_factory=SheetGeometry)
    barcode: BarcodeConfig = Field(default_factory=BarcodeConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "SERIAL_LABELS_",
        "env_nested_delimiter": "__",
    }

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """从YAML文件加载配置"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        runtime_opts = data.get("runtime_options", {})

        return cls(
            geometry=SheetGeometry(**cls._extract(runtime_opts, "geometry")),
            barcode=BarcodeConfig(**cls._extract(runtime_opts, "barcode")),
            output=OutputConfig(**cls._extract(runtime_opts, "output")),
            logging=LoggingConfig(**cls._extract(runtime_opts, "logging")),
        )

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并展平配置"""
        section = data.get(key) or {}
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result


DEFAULT_CONFIG_PATH = Path("config/runtime.yaml")

# 全局配置实例
_config: RuntimeConfig | None = None


def get_config() -> RuntimeConfig:
    """获取全局配置（惰性加载）"""
    global _config
    if _config is None:
        _config = RuntimeConfig.from_yaml(DEFAULT_CONFIG_PATH)
    return _config


def reload_config(yaml_path: str | Path | None = None) -> RuntimeConfig:
    """重新加载配置"""
    global _config
    _config = RuntimeConfig.from_yaml(yaml_path or DEFAULT_CONFIG_PATH)
    return _config
