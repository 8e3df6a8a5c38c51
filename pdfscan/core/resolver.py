"""
텍스트 변환 (2단계)

스캔이 끝난 뒤 모든 조각을 폰트 정보로 변환한다.

폰트 이름 → 폰트 객체 → ToUnicode CMap 객체 → CMap 테이블

- 폰트 이름을 모르면 조각은 버린다
- 바이너리 조각: 테이블이 있으면 2바이트 코드를 변환, 없으면 UTF-16BE 그대로
- 텍스트 조각: Shift-JIS 폰트면 그대로, 테이블이 있으면 문자 단위 변환, 없으면 그대로
- 테이블에 없는 코드는 로그만 남기고 버린다
"""

from typing import Dict, List, Optional

from .models import Fragment, IndirectRef, ScanContext


class TextResolver:
    """조각 → 최종 텍스트"""

    def __init__(self, ctx: ScanContext):
        self.ctx = ctx
        self.sink = ctx.sink

    def resolve(self, fragments: List[Fragment]) -> List[str]:
        """
        Returns:
            seq 순으로 정렬된 텍스트 목록 (빈 결과는 제외)
        """
        found = []

        for fragment in fragments:
            font_ref = self.ctx.font_resources.get(fragment.font)
            if font_ref is None:
                continue

            table = self.ctx.cmap_for_font(font_ref)
            if fragment.is_binary:
                text = self.resolve_binary(fragment.payload, table)
            else:
                text = self.resolve_text(fragment.payload, font_ref, table)

            if text:
                found.append((fragment.seq, text))

        found.sort(key=lambda item: item[0])
        return [text for _, text in found]

    def resolve_binary(self, raw: bytes, table: Optional[Dict[int, int]]) -> str:
        if table is None:
            return raw.decode('utf-16-be', errors='replace')

        if len(raw) % 2 == 1:
            raw = raw + b'\x00'

        result = bytearray()
        for i in range(0, len(raw), 2):
            code = (raw[i] << 8) | raw[i + 1]
            value = table.get(code)
            if value is None:
                self.sink(f"Can't convert code = {code}")
                continue
            result.extend(value.to_bytes(2, 'big'))

        return result.decode('utf-16-be', errors='replace')

    def resolve_text(self, text: str, font_ref: IndirectRef,
                     table: Optional[Dict[int, int]]) -> str:
        if font_ref in self.ctx.shift_jis_fonts:
            return text

        if table is None:
            return text

        result = bytearray()
        for ch in text:
            value = table.get(ord(ch))
            if value is None:
                self.sink(f"Can't convert char = {ord(ch)}")
                continue
            result.extend(value.to_bytes(2, 'big'))

        # 서로게이트 쌍은 여기서 한 글자로 합쳐진다
        return result.decode('utf-16-be', errors='replace')
