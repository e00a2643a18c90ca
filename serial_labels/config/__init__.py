"""
配置层 - 运行期配置

职责：
- 加载 config/runtime.yaml（运行期参数）
- 提供类型安全的配置访问接口
"""

from .runtime_config import (
    BarcodeConfig,
    LoggingConfig,
    OutputConfig,
    RuntimeConfig,
    SheetGeometry,
    get_config,
    reload_config,
)

__all__ = [
    "SheetGeometry",
    "BarcodeConfig",
    "OutputConfig",
    "LoggingConfig",
    "RuntimeConfig",
    "get_config",
    "reload_config",
]
