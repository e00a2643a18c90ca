"""
命令行入口

用法：
    serial-labels --prefix SN --start 0 --end 89 --output labels.pdf

退出码：
    0 成功；1 区间无效或生成失败；2 参数错误（argparse）
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from .config import RuntimeConfig, get_config, reload_config
from .doc_gen import count_pdf_pages
from .interfaces import InvalidRangeError, LabelSheetError
from .logging_config import setup_logging
from .pipeline import LabelSheetGenerator, build_range

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="serial-labels",
        description="生成3列×10行标签纸的Code 128序列号条码PDF",
    )
    ap.add_argument("--prefix", default="", help="序列号前缀（可为空）")
    ap.add_argument("--start", type=int, default=0, help="序列号起点")
    ap.add_argument("--end", type=int, default=-1, help="序列号终点（含）")
    ap.add_argument("--output", "-o", default=None, help="输出PDF路径（默认取配置 output.default_path）")
    ap.add_argument("--config", default=None, help="运行期配置YAML")
    ap.add_argument("--debug-grid", action="store_true", help="绘制标签边界调试线")
    ap.add_argument("--raster-mode", choices=["stretch", "integer"], default=None, help="条码栅格化方式")
    ap.add_argument("--no-text", action="store_true", help="不打印条码下方文字")
    ap.add_argument("--log-level", default=None, help="日志级别（DEBUG/INFO/WARNING/ERROR）")
    return ap


def _apply_overrides(config: RuntimeConfig, args: argparse.Namespace) -> RuntimeConfig:
    """命令行参数覆盖配置"""
    barcode = config.barcode
    if args.raster_mode:
        barcode = barcode.model_copy(update={"raster_mode": args.raster_mode})
    if args.no_text:
        barcode = barcode.model_copy(update={"show_text": False})

    output = config.output
    if args.debug_grid:
        output = output.model_copy(update={"debug_grid": True})

    return config.model_copy(update={"barcode": barcode, "output": output})


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = reload_config(args.config) if args.config else get_config()
    config = _apply_overrides(config, args)
    setup_logging(
        args.log_level or config.logging.log_level,
        config.logging.log_to_file,
        config.logging.log_file,
    )

    try:
        serial_range = build_range(args.start, args.end, args.prefix)
    except InvalidRangeError as e:
        parser.print_usage()
        logger.error(str(e))
        return 1

    generator = LabelSheetGenerator(config)
    try:
        report = generator.generate(serial_range)
        path = generator.write(report, args.output)
        logger.info(f"{path}: {count_pdf_pages(report.document)} 页")
    except LabelSheetError as e:
        logger.error(f"生成失败: {e}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
