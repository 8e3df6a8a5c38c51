"""
ToUnicode CMap 빌더

디코딩된 스트림 줄을 상태 머신으로 훑어서 코드 → 유니코드 테이블을 만든다.

CMap 형식 예시:
    2 beginbfchar
    <0003> <0020>
    <0011> <3042>
    endbfchar
    1 beginbfrange
    <0020> <007E> <0020>
    <0100> <0102> [<4E00> <4E8C> <4E09>]
    endbfrange

테이블은 CMap 스트림 객체의 IndirectRef 단위로 저장되고,
같은 코드가 두 번 등록되면 처음 값을 유지한다.
"""

from enum import Enum
from typing import Dict, List

from . import patterns
from .models import IndirectRef, ScanContext


class CMapState(Enum):
    IDLE = "idle"
    IN_BFCHAR = "bfchar"
    IN_BFRANGE = "bfrange"


class CMapBuilder:
    """bfchar / bfrange 블록 파서"""

    def __init__(self, ctx: ScanContext, ref: IndirectRef):
        self.ctx = ctx
        self.ref = ref
        self.state = CMapState.IDLE
        # 한 줄의 토큰들 = 한 그룹
        self.groups: List[List[int]] = []
        self.registered = 0

    @property
    def table(self) -> Dict[int, int]:
        return self.ctx.cmaps.setdefault(self.ref, {})

    def build(self, lines: List[str]) -> int:
        """
        모든 줄 처리

        Returns:
            새로 등록된 매핑 수
        """
        for line in lines:
            self.feed(line)
        return self.registered

    def feed(self, line: str):
        if 'beginbfchar' in line:
            self.state = CMapState.IN_BFCHAR
            self.groups = []
            return

        if 'endbfchar' in line:
            if self.state == CMapState.IN_BFCHAR:
                self._flush_bfchar()
            self.state = CMapState.IDLE
            return

        if 'beginbfrange' in line:
            self.state = CMapState.IN_BFRANGE
            self.groups = []
            return

        if 'endbfrange' in line:
            if self.state == CMapState.IN_BFRANGE:
                self._flush_bfrange()
            self.state = CMapState.IDLE
            return

        if self.state != CMapState.IDLE:
            codes = patterns.tokens_to_codes(patterns.cmap_hex_tokens(line))
            if codes:
                self.groups.append(codes)

    def _flush_bfchar(self):
        """<src> <dst>"""
        for codes in self.groups:
            if len(codes) == 2:
                self._register(codes[0], codes[1])
        self.groups = []

    def _flush_bfrange(self):
        """<lo> <hi> <dst> 또는 <lo> <hi> [<dst0> <dst1> ...]"""
        # 유효한 그룹이 없어도 bfrange 블록이 있으면 테이블은 생긴다
        if self.groups:
            self.ctx.cmaps.setdefault(self.ref, {})

        for codes in self.groups:
            if len(codes) < 2:
                continue

            lo, hi = codes[0], codes[1]
            if len(codes) == 3:
                dst = codes[2]
                for i in range(hi - lo + 1):
                    self._register(lo + i, (dst + i) & 0xFFFF)
            else:
                dst_list = codes[2:]
                for i in range(min(hi - lo + 1, len(dst_list))):
                    self._register(lo + i, dst_list[i])

        self.groups = []

    def _register(self, src: int, dst: int):
        table = self.table
        if src in table:
            self.ctx.sink(f"Conflict : {src} : {table[src]} vs {dst}")
            return
        table[src] = dst
        self.registered += 1
