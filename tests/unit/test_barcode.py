"""
条码编码/栅格化/解码单元测试

每个模块完成后必须运行：pytest tests/unit/test_barcode.py -v
"""

import pytest
from barcode.charsets import code128 as charset

from serial_labels.barcode import SymbolDecoder, SymbolEncoder, bits_to_modules
from serial_labels.barcode.decoder import STOP_WIDTHS
from serial_labels.config import BarcodeConfig
from serial_labels.interfaces import DecodeError, EncodingError, RenderError
from serial_labels.models import BarcodeSymbol

SERIALS = ["A0", "A29", "A30", "SN000123", "lot-7", "0", "123456789", "X\t1", "a~b|c"]


class TestEncode:
    """编码测试"""

    def test_deterministic(self, encoder: SymbolEncoder):
        """测试相同输入得到相同模块序列"""
        assert encoder.encode("A17") == encoder.encode("A17")

    def test_structure(self, encoder: SymbolEncoder, decoder: SymbolDecoder):
        """测试起始符/校验符/终止符结构"""
        symbol = encoder.encode("A29")
        values = decoder.decode_values(symbol.modules)
        assert values[0] in (103, 104, 105)
        assert symbol.modules[-len(STOP_WIDTHS):] == STOP_WIDTHS
        assert symbol.module_count == 11 * len(values) + 13
        # 条空交替，条数比空数多1
        assert len(symbol.modules) % 2 == 1

    @pytest.mark.parametrize("serial", SERIALS)
    def test_roundtrip(self, encoder: SymbolEncoder, decoder: SymbolDecoder, serial: str):
        """测试 decode(encode(s)) == s"""
        assert decoder.decode(encoder.encode(serial)) == serial

    def test_rejects_non_ascii(self, encoder: SymbolEncoder):
        with pytest.raises(EncodingError):
            encoder.encode("é1")

    def test_rejects_empty(self, encoder: SymbolEncoder):
        with pytest.raises(EncodingError):
            encoder.encode("")

    def test_rejects_too_long(self):
        encoder = SymbolEncoder(BarcodeConfig(max_payload_length=8))
        encoder.encode("A1234567")
        with pytest.raises(EncodingError):
            encoder.encode("A12345678")

    def test_bits_to_modules(self):
        assert bits_to_modules("11010011100") == (2, 1, 1, 2, 3, 2)
        with pytest.raises(EncodingError):
            bits_to_modules("0110")


class TestRasterize:
    """栅格化测试"""

    def test_integer_centered(self, encoder: SymbolEncoder):
        """测试默认模式：整数模块宽度居中"""
        symbol = encoder.encode("A0")
        width = symbol.module_count * 3 + 10
        image = encoder.rasterize(symbol, width, 20)
        assert image.image.size == (width, 20)
        # 两侧各留5像素空白
        assert image.image.getpixel((4, 10)) == 255
        assert image.image.getpixel((5, 10)) == 0
        assert image.image.getpixel((width - 5, 10)) == 255
        assert image.image.getpixel((width - 6, 10)) == 0

    def test_default_box_size(self, encoder: SymbolEncoder):
        image = encoder.rasterize(encoder.encode("A0"), 144, 36)
        assert (image.width, image.height) == (144, 36)
        assert image.image.size == (144, 36)
        assert image.serial == "A0"
        assert image.aspect == pytest.approx(4.0)

    def test_stretch_size(self, stretch_encoder: SymbolEncoder):
        """测试拉伸到目标尺寸"""
        image = stretch_encoder.rasterize(stretch_encoder.encode("A0"), 144, 36)
        assert image.image.size == (144, 36)
        assert image.aspect == pytest.approx(4.0)

    def test_stretch_fills_edges(self, stretch_encoder: SymbolEncoder):
        """拉伸模式首末像素均为条"""
        image = stretch_encoder.rasterize(stretch_encoder.encode("A0"), 200, 10)
        assert image.image.getpixel((0, 5)) == 0
        assert image.image.getpixel((199, 5)) == 0

    @pytest.mark.parametrize("mode", ["integer", "stretch"])
    def test_narrower_than_symbol(self, mode: str):
        """目标宽度小于模块数时两种模式均报错"""
        encoder = SymbolEncoder(BarcodeConfig(raster_mode=mode))
        symbol = encoder.encode("X" * 48)
        assert symbol.module_count > 144
        with pytest.raises(RenderError):
            encoder.rasterize(symbol, 144, 36)
        with pytest.raises(RenderError):
            encoder.rasterize(symbol, symbol.module_count - 1, 36)
        # 恰好每模块1像素可绘制
        assert encoder.rasterize(symbol, symbol.module_count, 36).width == symbol.module_count

    @pytest.mark.parametrize("size", [(0, 36), (144, 0), (-1, -1)])
    def test_non_positive(self, encoder: SymbolEncoder, size):
        with pytest.raises(RenderError):
            encoder.rasterize(encoder.encode("A0"), *size)


class TestDecode:
    """解码测试"""

    @pytest.mark.parametrize("serial", SERIALS)
    def test_raster_roundtrip_stretch(
        self, stretch_encoder: SymbolEncoder, decoder: SymbolDecoder, serial: str
    ):
        """测试非整数模块宽度位图可读回"""
        image = stretch_encoder.render(serial, 700, 40)
        assert decoder.read_text(image) == serial

    @pytest.mark.parametrize("serial", SERIALS)
    def test_raster_roundtrip_integer(self, encoder: SymbolEncoder, decoder: SymbolDecoder, serial: str):
        symbol = encoder.encode(serial)
        image = encoder.rasterize(symbol, symbol.module_count * 2 + 7, 30)
        assert decoder.read_raster(image).modules == symbol.modules
        assert decoder.read_text(image) == serial

    @pytest.mark.parametrize("serial", ["A0", "A99999", "ABCDE", "ABCDEF", "SN00012", "A1234567"])
    def test_raster_default_box(self, encoder: SymbolEncoder, decoder: SymbolDecoder, serial: str):
        """默认 144×36 位图中的序列号可读回"""
        image = encoder.render(serial, 144, 36)
        assert decoder.read_text(image) == serial

    def test_bad_checksum(self, encoder: SymbolEncoder, decoder: SymbolDecoder):
        """测试校验值错误"""
        modules = list(encoder.encode("A5").modules)
        # 把第一个数据字符替换为另一个合法字符（码值1）
        modules[6:12] = bits_to_modules(charset.CODES[1])
        with pytest.raises(DecodeError):
            decoder.decode(BarcodeSymbol(text="A5", modules=tuple(modules)))

    def test_bad_stop(self, encoder: SymbolEncoder, decoder: SymbolDecoder):
        modules = list(encoder.encode("A5").modules)
        modules[-1] = 3
        with pytest.raises(DecodeError):
            decoder.decode(BarcodeSymbol(text="A5", modules=tuple(modules)))

    def test_too_short(self, decoder: SymbolDecoder):
        with pytest.raises(DecodeError):
            decoder.decode(BarcodeSymbol(text="", modules=STOP_WIDTHS))

    def test_code_set_c(self, decoder: SymbolDecoder):
        """手工构造码集C符号：START C, 12, 34, 校验, STOP"""
        values = [105, 12, 34]
        values.append((105 + 12 * 1 + 34 * 2) % 103)
        bits = "".join(charset.CODES[v] for v in values) + "1100011101011"
        symbol = BarcodeSymbol(text="1234", modules=bits_to_modules(bits))
        assert decoder.decode(symbol) == "1234"
