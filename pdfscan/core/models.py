"""
스캔 데이터 모델

- IndirectRef: 간접 객체 참조 (obj_num, gen_num)
- Fragment: Tj/TJ에서 뽑은 해석 전 텍스트 조각
- ObjectOutcome: 객체 하나를 처리한 결과
- ScanContext: 스캔 동안 모이는 모든 테이블과 커서
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set, Union

from ..config import ScanConfig
from ..diagnostics import MessageSink
from .line_reader import LineReader


@dataclass(frozen=True)
class IndirectRef:
    """객체 참조 (예: 5 0 R)"""
    obj_num: int
    gen_num: int

    def __repr__(self):
        return f"Ref({self.obj_num} {self.gen_num} R)"


@dataclass
class Fragment:
    """
    텍스트 조각

    payload가 bytes면 <hex> 피연산자, str이면 (literal) 피연산자에서 온 것.
    seq는 문서 전체에서 Tj/TJ가 나온 순서.
    """
    seq: int
    font: str
    payload: Union[bytes, str]

    @property
    def is_binary(self) -> bool:
        return isinstance(self.payload, bytes)


class OutcomeKind(Enum):
    """객체 처리 결과 종류"""
    PROCESSED = "processed"
    SKIPPED = "skipped"
    MALFORMED = "malformed"


@dataclass
class ObjectOutcome:
    """객체 하나의 처리 결과"""
    kind: OutcomeKind
    ref: Optional[IndirectRef] = None
    fragments: List[Fragment] = field(default_factory=list)
    reason: str = ""

    @classmethod
    def processed(cls, ref: IndirectRef, fragments: List[Fragment] = None) -> 'ObjectOutcome':
        return cls(OutcomeKind.PROCESSED, ref, fragments or [])

    @classmethod
    def skipped(cls, ref: IndirectRef, reason: str = "") -> 'ObjectOutcome':
        return cls(OutcomeKind.SKIPPED, ref, reason=reason)

    @classmethod
    def malformed(cls, ref: IndirectRef, reason: str) -> 'ObjectOutcome':
        return cls(OutcomeKind.MALFORMED, ref, reason=reason)


@dataclass
class ScanContext:
    """
    스캔 상태

    커서(reader)는 앞으로만 움직이고, 나머지 테이블은 스캔이 끝난 뒤
    TextResolver가 한꺼번에 사용한다.
    """
    reader: LineReader
    sink: MessageSink = field(default_factory=MessageSink)
    config: ScanConfig = field(default_factory=ScanConfig)

    # F1 → 폰트 객체
    font_resources: Dict[str, IndirectRef] = field(default_factory=dict)
    # 폰트 객체 → ToUnicode CMap 스트림 객체
    to_unicode: Dict[IndirectRef, IndirectRef] = field(default_factory=dict)
    # RKSJ (Shift-JIS) 폰트
    shift_jis_fonts: Set[IndirectRef] = field(default_factory=set)
    # CMap 스트림 객체 → {원본 코드: 유니코드}
    cmaps: Dict[IndirectRef, Dict[int, int]] = field(default_factory=dict)

    fragments: List[Fragment] = field(default_factory=list)
    outcomes: List[ObjectOutcome] = field(default_factory=list)

    sequence: int = 0

    def next_sequence(self) -> int:
        seq = self.sequence
        self.sequence += 1
        return seq

    def register_font_resource(self, name: str, ref: IndirectRef):
        # 먼저 등록된 것 우선
        self.font_resources.setdefault(name, ref)

    def register_to_unicode(self, font_ref: IndirectRef, cmap_ref: IndirectRef):
        self.to_unicode.setdefault(font_ref, cmap_ref)

    def cmap_for_font(self, font_ref: IndirectRef) -> Optional[Dict[int, int]]:
        """폰트가 쓰는 CMap 테이블 (없으면 None)"""
        cmap_ref = self.to_unicode.get(font_ref)
        if cmap_ref is None:
            return None
        return self.cmaps.get(cmap_ref)
