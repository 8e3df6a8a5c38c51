"""
콘텐츠 스트림 텍스트 추출

줄 단위로 두 가지만 본다:
- '/F1 ' 이 있는 줄: 현재 폰트 변경 (BT ... /F1 12 Tf)
- 'Tj' 또는 'TJ'로 끝나는 줄: 텍스트 조각 추출
    <30423044> Tj          → 바이너리 조각
    [(Hel)-20(lo)] TJ      → 텍스트 조각 'Hello'

여기서는 해석하지 않는다. 폰트/CMap 정보는 문서 뒤쪽에 나올 수 있으므로
조각은 순번(seq)과 폰트 이름만 달고 모아 두었다가 TextResolver에서 변환한다.
"""

from typing import List

from . import patterns
from .models import Fragment, ScanContext


class ContentExtractor:
    """Tj/TJ 조각 추출기"""

    def __init__(self, ctx: ScanContext):
        self.ctx = ctx
        self.current_font = ""

    def extract(self, lines: List[str]) -> List[Fragment]:
        fragments = []
        for line in lines:
            fragments.extend(self.feed(line))
        return fragments

    def feed(self, line: str) -> List[Fragment]:
        font = patterns.find_font_selector(line)
        if font:
            self.ctx.sink(line)
            self.current_font = font

        if not patterns.is_text_show(line):
            return []

        self.ctx.sink(line)
        fragments = []

        # 16진 문자열
        raw = patterns.show_hex_bytes(line)
        if raw:
            fragments.append(Fragment(self.ctx.next_sequence(), self.current_font, raw))

        # 괄호 문자열
        for text in patterns.iter_literal_runs(line):
            fragments.append(Fragment(self.ctx.next_sequence(), self.current_font, text))

        return fragments
