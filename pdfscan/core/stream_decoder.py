"""
스트림 디코딩

지원하는 필터는 FlateDecode 하나뿐이다.
텍스트(콘텐츠 스트림, ToUnicode CMap)로 보이는 스트림만 풀고,
이미지/색공간/XRef 등은 바이트만 건너뛴다.

디코딩 순서:
1. 'stream' 줄 다음에서 Length 바이트를 꺼낸다 (앞 2바이트 zlib 헤더 제외)
2. raw deflate로 압축 해제
3. Shift-JIS(cp932)로 문자열화
4. CR/LF/CRLF로 줄 분리
"""

import re
import zlib
from typing import List, Optional

from ..config import ScanConfig
from ..exceptions import MalformedObjectError
from . import patterns
from .models import ScanContext


LINE_BREAK_PATTERN = re.compile(r'\r\n|\n|\r')


class StreamDecoder:
    """FlateDecode 스트림 디코더"""

    def __init__(self, config: ScanConfig = None):
        self.config = config or ScanConfig()

    def skip_reason(self, dictionary: str) -> Optional[str]:
        """
        디코딩하면 안 되는 스트림이면 이유를, 아니면 None

        1. 제외 이름(/XObject, /DeviceRGB ...)이 있으면 제외
        2. Filter, FlateDecode, Length 외의 키가 하나라도 있으면 제외
        """
        marker = patterns.has_excluded_marker(dictionary, self.config.excluded_markers)
        if marker:
            return f"excluded /{marker}"

        allowed = self.config.allowed_dictionary_keys
        others = [key for key in patterns.dictionary_keys(dictionary) if key not in allowed]
        if others:
            return f"unexpected keys {others}"

        return None

    def read_stream(self, ctx: ScanContext, dictionary: str, length: int) -> Optional[List[str]]:
        """
        딕셔너리 다음의 스트림을 읽고 디코딩

        Returns:
            디코딩된 줄 목록, 디코딩 대상이 아니면 None
        """
        reader = ctx.reader
        line = reader.read_logical_line()
        ctx.sink(f"Read : {line}")

        if 'stream' not in line:
            return None

        # 디코딩 여부와 관계없이 커서는 Length만큼 진행
        data = reader.take(length, skip=self.config.skip_prefix)

        reason = self.skip_reason(dictionary)
        if reason:
            ctx.sink(f"Skip stream : {reason}")
            return None

        ctx.sink("Decode as String!")
        decoded = self.decode_flate(data)
        text = self.decode_text(decoded)
        return self.split_lines(text)

    @staticmethod
    def decode_flate(data: bytes) -> bytes:
        """raw deflate 압축 해제 (zlib 헤더 없음)"""
        decompressor = zlib.decompressobj(-15)
        try:
            return decompressor.decompress(data) + decompressor.flush()
        except zlib.error as e:
            raise MalformedObjectError(f"FlateDecode failed: {e}") from e

    def decode_text(self, data: bytes) -> str:
        return data.decode(self.config.stream_encoding, errors='replace')

    @staticmethod
    def split_lines(text: str) -> List[str]:
        return LINE_BREAK_PATTERN.split(text)
