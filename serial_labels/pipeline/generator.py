"""
标签生成流程 - 编排序列号/编码/布局/文档

职责：
1. 逐个序列号执行 encode → rasterize → layout → draw
2. 跨越每页容量时新建页面（可选绘制调试网格）
3. 一次性序列化并返回生成结果
4. 任一环节失败即中止（不产出部分文档）

测试要点：
- test_single_label: start == end 产出1页1个标签
- test_page_boundary: 31个标签产出2页
- test_serials_decode: 每个位图可解码回序列号
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..barcode import SymbolEncoder
from ..config import RuntimeConfig, get_config
from ..doc_gen import Document, write_pdf
from ..interfaces import ILabelSheetGenerator, LabelSheetError
from ..layout import GridLayout, PaginationCursor
from ..models import GenerationReport, Page, SerialRange
from .sequencer import SerialSequencer

logger = logging.getLogger(__name__)


class LabelSheetGenerator(ILabelSheetGenerator):
    """标签生成流程实现"""

    def __init__(self, config: RuntimeConfig | None = None):
        self.config = config or get_config()
        self.encoder = SymbolEncoder(self.config.barcode)
        self.layout = GridLayout(self.config.geometry)
        self.pixel_size = self.config.barcode.pixel_size(self.config.geometry)

    def new_document(self) -> Document:
        return Document(self.config.geometry, self.config.barcode, self.config.output)

    def generate(self, serial_range: SerialRange) -> GenerationReport:
        """生成标签文档"""
        sequencer = SerialSequencer(serial_range)
        report = GenerationReport(serial_range=sequencer.serial_range)
        if not sequencer.has_prefix:
            report.add_flag("missing_prefix")

        logger.info(
            f"开始生成: {sequencer.serial(0)} .. {sequencer.serial(len(sequencer) - 1)} "
            f"共 {len(sequencer)} 个标签, 预计 {self.layout.page_count(len(sequencer))} 页"
        )

        try:
            document = self.compose(sequencer, report)
            report.document = document.finalize()
        except LabelSheetError:
            logger.error(f"生成中止于第 {report.label_count + 1} 个标签")
            raise

        report.page_count = len(document.pages)
        report.mark_finished()
        logger.info(
            f"生成完成: {report.label_count} 个标签, {report.page_count} 页, "
            f"耗时 {report.duration_sec:.2f}s"
        )
        return report

    def compose(self, sequencer: SerialSequencer, report: GenerationReport | None = None) -> Document:
        """逐个序列号绘制到文档（不序列化）"""
        document = self.new_document()
        cursor = PaginationCursor(self.layout)
        page: Page | None = None
        width_px, height_px = self.pixel_size

        for index, serial in sequencer:
            image = self.encoder.render(serial, width_px, height_px)
            position, opens_page = cursor.advance()

            if opens_page or page is None:
                page = self._open_page(document)

            image_height = document.draw_image(page, image, position)
            if self.config.barcode.show_text:
                document.draw_caption(page, serial, position, image_height)

            if report is not None:
                report.label_count = index + 1
                report.last_serial = serial
                if index == 0:
                    report.first_serial = serial

        return document

    def write(self, report: GenerationReport, output_path: str | Path | None = None) -> Path:
        """写出PDF文件"""
        path = Path(output_path or self.config.output.default_path)
        report.output_path = write_pdf(report.document, path)
        logger.info(f"已写出: {report.output_path}")
        return report.output_path

    def _open_page(self, document: Document) -> Page:
        page = document.new_page()
        if self.config.output.debug_grid:
            document.draw_debug_grid(page)
        return page
