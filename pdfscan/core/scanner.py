"""
PDF 객체 스캐너

XRef를 해석하지 않고 파일을 앞에서부터 한 줄씩 읽는다.

1. 헤더 확인 (%PDF-x.y) - 실패하면 빈 결과
2. 'N G obj' 줄을 만나면 다음 딕셔너리 줄을 읽고 분기
   - /Font                 → 폰트 메타데이터 등록
   - Length + FlateDecode  → 스트림 디코딩 → CMap 빌드 + 텍스트 조각 추출
   - Length만              → 'stream' 줄 뒤 Length 바이트 건너뛰기
3. 버퍼 끝까지 반복한 뒤 TextResolver로 모든 조각 변환

객체 하나에서 오류가 나도 로그만 남기고 다음 줄부터 계속한다.
커서는 하나뿐이고 되돌리지 않는다.
"""

import logging
from typing import Callable, List, Union

from ..config import ScanConfig
from ..diagnostics import MessageSink
from ..exceptions import InvalidHeaderError
from . import patterns
from .cmap import CMapBuilder
from .content_stream import ContentExtractor
from .fonts import extract_font_metadata
from .line_reader import LineReader
from .models import IndirectRef, ObjectOutcome, OutcomeKind, ScanContext
from .resolver import TextResolver
from .stream_decoder import StreamDecoder

logger = logging.getLogger(__name__)

SinkLike = Union[MessageSink, Callable[[str], None], None]


def validate_header(ctx: ScanContext, strict: bool = False) -> bool:
    """첫 논리 줄이 %PDF-x.y 인지 확인"""
    line = ctx.reader.read_logical_line()
    if patterns.match_header(line):
        ctx.sink(f"OK : {line}")
        return True

    ctx.sink(f"NG : {line}")
    if strict:
        raise InvalidHeaderError(f"Invalid PDF: missing header ({line[:32]!r})")
    return False


class ObjectScanner:
    """순차 스캐너 - 한 번의 scan()으로 한 문서를 처리"""

    def __init__(self, data: bytes, sink: SinkLike = None, config: ScanConfig = None):
        config = config or ScanConfig()
        self.ctx = ScanContext(
            reader=LineReader(data),
            sink=MessageSink.wrap(sink),
            config=config,
        )
        self.decoder = StreamDecoder(config)

    def scan(self) -> List[str]:
        """
        문서 전체 스캔 후 텍스트 변환

        Returns:
            문서 순서대로 정렬된 텍스트 조각 목록
        """
        ctx = self.ctx
        if not validate_header(ctx):
            return []

        reader = ctx.reader
        while not reader.at_end():
            line = reader.read_logical_line()
            if not line or line.startswith('%'):
                continue

            ctx.sink(f"Read : {line}")

            ref = patterns.match_object_header(line)
            if ref is None:
                continue

            outcome = self.process_object(ref)
            ctx.outcomes.append(outcome)
            ctx.fragments.extend(outcome.fragments)

        malformed = sum(1 for o in ctx.outcomes if o.kind == OutcomeKind.MALFORMED)
        logger.debug("scan finished: %d objects, %d malformed, %d fragments",
                     len(ctx.outcomes), malformed, len(ctx.fragments))

        # 2단계: 스캔이 끝난 뒤에만 변환
        return TextResolver(ctx).resolve(ctx.fragments)

    def process_object(self, ref: IndirectRef) -> ObjectOutcome:
        """객체 하나 처리 - 오류는 Malformed 결과로 바꾼다"""
        try:
            return self._dispatch(ref)
        except Exception as e:
            logger.debug("object %r failed", ref, exc_info=True)
            self.ctx.sink(f"{type(e).__name__}: {e}")
            return ObjectOutcome.malformed(ref, str(e))

    def _dispatch(self, ref: IndirectRef) -> ObjectOutcome:
        ctx = self.ctx
        dictionary = ctx.reader.read_logical_line()
        ctx.sink(f"Read : {dictionary}")

        # Form XObject는 /Font 리소스와 스트림을 함께 가질 수 있다
        font_outcome = None
        if patterns.is_font_dictionary(dictionary):
            font_outcome = extract_font_metadata(ctx, ref, dictionary)

        length = patterns.find_stream_length(dictionary)
        if length is None:
            return font_outcome or ObjectOutcome.skipped(ref, "no stream")

        if 'FlateDecode' in dictionary:
            return self._decode_stream(ref, dictionary, length)

        return self._skip_stream(ref, length)

    def _decode_stream(self, ref: IndirectRef, dictionary: str, length: int) -> ObjectOutcome:
        lines = self.decoder.read_stream(self.ctx, dictionary, length)
        if lines is None:
            return ObjectOutcome.skipped(ref, "stream not decoded")

        # 한 스트림에는 보통 CMap 아니면 콘텐츠 중 하나만 있다
        registered = CMapBuilder(self.ctx, ref).build(lines)
        if registered:
            logger.debug("cmap %r: %d mappings registered", ref, registered)
        fragments = ContentExtractor(self.ctx).extract(lines)
        return ObjectOutcome.processed(ref, fragments)

    def _skip_stream(self, ref: IndirectRef, length: int) -> ObjectOutcome:
        """압축되지 않은 (또는 다른 필터의) 스트림은 내용을 보지 않고 건너뛴다"""
        ctx = self.ctx
        line = ctx.reader.read_logical_line()
        ctx.sink(f"Read : {line}")

        if 'stream' in line:
            ctx.reader.advance(length)
        ctx.sink(f"Current Pos : {ctx.reader.pos}")
        return ObjectOutcome.skipped(ref, "opaque stream")


def analyze_bytes(data: bytes, sink: SinkLike = None, config: ScanConfig = None) -> List[str]:
    """
    PDF 바이트에서 텍스트 추출

    Args:
        data: PDF 파일 전체 바이트
        sink: 진단 메시지를 받을 콜백 (기본: 버림)
        config: 스캔 설정

    Returns:
        문서 순서대로 정렬된 텍스트 조각 목록. 이어 붙이면 전체 텍스트.
    """
    return ObjectScanner(data, sink=sink, config=config).scan()
