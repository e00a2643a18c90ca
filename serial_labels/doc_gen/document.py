"""
文档画布 - 按页累积绘制图元并序列化为PDF

职责：
1. 新建页面（固定页宽/页高）
2. 注册位图资源（按序列号幂等）并放置到标签内容区
3. 绘制调试网格与条码下方文字
4. 一次性序列化为PDF字节流（结构一致性校验）

依赖：
- reportlab: PDF画布与图片嵌入

测试要点：
- test_new_page: 页尺寸与顺序
- test_draw_image_scaled: 位图缩放到内容区宽度
- test_register_image_idempotent: 同一序列号只注册一次
- test_finalize_unplaced_image: 注册未放置报错
- test_finalize_empty_page: 空页报错
- test_finalize_twice: 重复序列化报错
"""

from __future__ import annotations

import io
import logging

from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from ..config import BarcodeConfig, OutputConfig, SheetGeometry
from ..interfaces import IDocument, SerializationError
from ..models import (
    ImagePrimitive,
    LabelPosition,
    LinePrimitive,
    Page,
    RasterImage,
    TextPrimitive,
)
from ..layout import GridLayout

logger = logging.getLogger(__name__)

# 文字基线与条码底边的间距（以字号为单位）
_CAPTION_GAP = 1.1


class Document(IDocument):
    """PDF文档实现"""

    def __init__(
        self,
        geometry: SheetGeometry | None = None,
        barcode: BarcodeConfig | None = None,
        output: OutputConfig | None = None,
    ):
        self.geometry = geometry or SheetGeometry()
        self.barcode = barcode or BarcodeConfig()
        self.output = output or OutputConfig()

        self.pages: list[Page] = []
        self._resources: dict[str, RasterImage] = {}
        self._finalized = False

    @property
    def page_size(self) -> tuple[float, float]:
        """页尺寸（几何单位）"""
        return self.geometry.page_width, self.geometry.page_height

    @property
    def resource_keys(self) -> list[str]:
        return list(self._resources)

    def get_image(self, key: str) -> RasterImage:
        return self._resources[key]

    def new_page(self) -> Page:
        """追加并返回新页"""
        self._check_open()
        page = Page(
            page_index=len(self.pages),
            width=self.geometry.page_width,
            height=self.geometry.page_height,
        )
        self.pages.append(page)
        logger.debug(f"新建第 {page.page_index + 1} 页")
        return page

    def register_image(self, image: RasterImage) -> str:
        """注册位图资源（按序列号幂等），返回资源键"""
        key = image.serial
        existing = self._resources.get(key)
        if existing is None:
            self._resources[key] = image
        elif existing is not image and existing.image.tobytes() != image.image.tobytes():
            raise SerializationError(f"资源键冲突，同一序列号对应不同位图: {key}")
        return key

    def draw_image(self, page: Page, image: RasterImage, position: LabelPosition) -> float:
        """
        在标签内容区放置位图

        宽度 = label_width - 2*label_padding，高度按位图宽高比等比缩放

        Returns:
            放置高度（几何单位）
        """
        self._check_open()
        key = self.register_image(image)

        width = self.geometry.content_width
        height = width / image.aspect
        page.add(ImagePrimitive(
            resource_key=key,
            x=position.content_top_left.x,
            y=position.content_top_left.y,
            width=width,
            height=height,
        ))
        return height

    def draw_caption(self, page: Page, text: str, position: LabelPosition, image_height: float) -> None:
        """条码下方居中绘制序列号文字"""
        self._check_open()
        size = self.barcode.text_font_size
        baseline = position.content_top_left.y + image_height + _CAPTION_GAP * size / self.geometry.points_per_unit
        page.add(TextPrimitive(
            text=text,
            x=position.content_top_left.x + self.geometry.content_width / 2,
            y=baseline,
            font=self.barcode.text_font,
            size=size,
        ))

    def draw_debug_grid(self, page: Page) -> None:
        """绘制标签边界调试线（不影响标签位置）"""
        self._check_open()
        for line in GridLayout(self.geometry).grid_lines():
            page.add(line)

    def finalize(self) -> bytes:
        """序列化整个文档（仅一次）"""
        self._check_open()
        self._validate()

        buffer = io.BytesIO()
        try:
            pdf = self._render(buffer)
            pdf.save()
        except Exception as e:
            raise SerializationError(f"PDF序列化失败: {e}") from e

        self._finalized = True
        data = buffer.getvalue()
        logger.debug(f"文档序列化完成: {len(self.pages)} 页, {len(self._resources)} 个位图, {len(data)} 字节")
        return data

    def _check_open(self) -> None:
        if self._finalized:
            raise SerializationError("文档已序列化，不可再修改或重复序列化")

    def _validate(self) -> None:
        """结构一致性校验"""
        if not self.pages:
            raise SerializationError("文档没有任何页面")

        placed: set[str] = set()
        for page in self.pages:
            if page.is_empty:
                raise SerializationError(f"第 {page.page_index + 1} 页没有内容")
            for key in page.image_keys():
                if key not in self._resources:
                    raise SerializationError(f"第 {page.page_index + 1} 页引用了未注册的位图: {key}")
                placed.add(key)

        unplaced = [k for k in self._resources if k not in placed]
        if unplaced:
            raise SerializationError(f"位图已注册但未放置: {unplaced[:5]}")

    def _render(self, buffer: io.BytesIO) -> canvas.Canvas:
        """图元 → reportlab画布（左上角原点 → PDF左下角原点）"""
        k = self.geometry.points_per_unit
        page_w, page_h = self.page_size

        pdf = canvas.Canvas(
            buffer,
            pagesize=(page_w * k, page_h * k),
            pageCompression=1 if self.output.compress else 0,
        )
        pdf.setTitle(self.output.title)

        readers = {key: ImageReader(img.image) for key, img in self._resources.items()}

        for page in self.pages:
            for prim in page.primitives:
                if isinstance(prim, LinePrimitive):
                    pdf.line(prim.x1 * k, (page_h - prim.y1) * k, prim.x2 * k, (page_h - prim.y2) * k)
                elif isinstance(prim, ImagePrimitive):
                    pdf.drawImage(
                        readers[prim.resource_key],
                        prim.x * k,
                        (page_h - prim.y - prim.height) * k,
                        width=prim.width * k,
                        height=prim.height * k,
                    )
                elif isinstance(prim, TextPrimitive):
                    pdf.setFont(prim.font, prim.size)
                    pdf.drawCentredString(prim.x * k, (page_h - prim.y) * k, prim.text)
            pdf.showPage()

        return pdf
