"""
日志配置 - 命令行入口统一初始化

- 控制台输出 + 可选滚动文件
- 重复调用不会重复添加handler
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_ROOT = "serial_labels"

_configured = False


def setup_logging(level: str = "INFO", log_to_file: bool = False, log_file: str | Path = "serial_labels.log") -> logging.Logger:
    """初始化包根logger"""
    global _configured

    root = logging.getLogger(_ROOT)
    root.setLevel(level.upper())
    if _configured:
        return root

    formatter = logging.Formatter(_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_to_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    _configured = True
    return root
