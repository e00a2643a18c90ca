"""
条码解码器 - Code 128标准解码（用于往返校验）

职责：
1. 模块宽度序列 → 码值（每字符6个元素共11模块，终止符7个元素共13模块）
2. 校验起始符、模103校验值、终止符
3. 按码集A/B/C及SHIFT/切换码还原原文
4. 从位图中间行读取模块宽度（逐字符归一化像素宽度）

依赖：
- python-barcode: Code 128码表

测试要点：
- test_decode_roundtrip: encode → decode 还原原文
- test_decode_bad_checksum: 校验值错误
- test_raster_roundtrip_stretch: 非整数模块宽度位图可读
"""

from __future__ import annotations

from barcode.charsets import code128 as charset

from ..interfaces import DecodeError, ISymbolDecoder
from ..models import BarcodeSymbol, RasterImage
from .encoder import bits_to_modules

START_A, START_B, START_C = 103, 104, 105
CODE_C, CODE_B, CODE_A = 99, 100, 101
SHIFT, FNC1 = 98, 102

STOP_WIDTHS = (2, 3, 3, 1, 1, 1, 2)
CHAR_ELEMENTS = 6
CHAR_MODULES = 11
STOP_MODULES = sum(STOP_WIDTHS)

# 模块宽度 → 码值（0-105）
_WIDTHS_TO_VALUE: dict[tuple[int, ...], int] = {
    bits_to_modules(pattern): value for value, pattern in enumerate(charset.CODES[:START_C + 1])
}


class SymbolDecoder(ISymbolDecoder):
    """Code 128解码器实现"""

    def decode(self, symbol: BarcodeSymbol) -> str:
        """模块宽度序列 → 原文"""
        values = self.decode_values(symbol.modules)
        start, *data, check = values

        expected = (start + sum(i * v for i, v in enumerate(data, 1))) % 103
        if expected != check:
            raise DecodeError(f"校验值不匹配: 期望 {expected}，实际 {check}")

        return self._translate(start, data)

    def decode_values(self, modules: tuple[int, ...]) -> list[int]:
        """模块宽度序列 → 码值列表（起始符 + 数据 + 校验值）"""
        body_len = len(modules) - len(STOP_WIDTHS)
        if body_len < 2 * CHAR_ELEMENTS or body_len % CHAR_ELEMENTS:
            raise DecodeError(f"元素数量不合法: {len(modules)}")
        if tuple(modules[body_len:]) != STOP_WIDTHS:
            raise DecodeError(f"终止符不匹配: {tuple(modules[body_len:])}")

        values = []
        for i in range(0, body_len, CHAR_ELEMENTS):
            chunk = tuple(modules[i:i + CHAR_ELEMENTS])
            if chunk not in _WIDTHS_TO_VALUE:
                raise DecodeError(f"未知字符图案(第{i // CHAR_ELEMENTS}个): {chunk}")
            values.append(_WIDTHS_TO_VALUE[chunk])

        if values[0] not in (START_A, START_B, START_C):
            raise DecodeError(f"起始符不合法: {values[0]}")
        return values

    def read_raster(self, image: RasterImage) -> BarcodeSymbol:
        """位图中间行 → 模块宽度序列"""
        runs = self._scan_runs(image)

        body_len = len(runs) - len(STOP_WIDTHS)
        if body_len < 2 * CHAR_ELEMENTS or body_len % CHAR_ELEMENTS:
            raise DecodeError(f"位图条空数量不合法: {len(runs)}")

        modules: list[int] = []
        for i in range(0, body_len, CHAR_ELEMENTS):
            modules.extend(self._normalize(runs[i:i + CHAR_ELEMENTS], CHAR_MODULES))
        modules.extend(self._normalize(runs[body_len:], STOP_MODULES))

        return BarcodeSymbol(text=image.serial, modules=tuple(modules))

    def read_text(self, image: RasterImage) -> str:
        """位图 → 原文"""
        return self.decode(self.read_raster(image))

    def _scan_runs(self, image: RasterImage) -> list[int]:
        """中间行游程（去除两侧空白），首个游程为条"""
        y = image.height // 2
        row = image.image.convert("L").crop((0, y, image.width, y + 1)).tobytes()
        dark = [px < 128 for px in row]

        if True not in dark:
            raise DecodeError("位图中没有条")
        first = dark.index(True)
        last = len(dark) - dark[::-1].index(True)

        runs: list[int] = []
        current, length = dark[first], 0
        for is_dark in dark[first:last]:
            if is_dark == current:
                length += 1
            else:
                runs.append(length)
                current, length = is_dark, 1
        runs.append(length)
        return runs

    @staticmethod
    def _normalize(widths: list[int], modules: int) -> list[int]:
        """像素宽度按字符总宽归一化为模块数"""
        unit = sum(widths) / modules
        return [max(1, round(w / unit)) for w in widths]

    @staticmethod
    def _translate(start: int, data: list[int]) -> str:
        """码值 → 字符（处理码集切换与SHIFT）"""
        code_set = {START_A: "A", START_B: "B", START_C: "C"}[start]
        shifted = False
        out: list[str] = []

        for value in data:
            active = code_set
            if shifted:
                active = "B" if code_set == "A" else "A"
                shifted = False

            if active == "C":
                if value < 100:
                    out.append(f"{value:02d}")
                elif value == CODE_B:
                    code_set = "B"
                elif value == CODE_A:
                    code_set = "A"
                elif value != FNC1:
                    raise DecodeError(f"码集C中的非法码值: {value}")
                continue

            if value < 96:
                if active == "A" and value >= 64:
                    out.append(chr(value - 64))
                else:
                    out.append(chr(value + 32))
            elif value == SHIFT:
                shifted = True
            elif value == CODE_C:
                code_set = "C"
            elif value == CODE_B and active == "A":
                code_set = "B"
            elif value == CODE_A and active == "B":
                code_set = "A"
            elif value in (100, 101):
                raise DecodeError("不支持FNC4扩展字符")
            # FNC1/FNC2/FNC3 不输出字符

        return "".join(out)
