"""
pdfscan - CID 폰트 / Shift-JIS PDF 텍스트 추출기

렌더링 엔진 없이 PDF 바이트를 앞에서부터 훑어서 텍스트를 뽑는다.
- ToUnicode CMap (bfchar / bfrange) 내장 PDF
- RKSJ (Shift-JIS) 폰트 PDF
- FlateDecode 스트림만 지원, 외부 라이브러리 없음

사용법:
    from pdfscan import analyze, extract_text

    result = analyze('document.pdf')
    for text in result.texts:       # 문서 순서대로 잘게 나뉜 조각
        print(text)
    print(result.joined_text)       # 전부 이어 붙인 텍스트

    # 바이트 입력
    from pdfscan import analyze_bytes
    texts = analyze_bytes(pdf_bytes)

    # 진단 메시지 보기
    result = analyze('document.pdf', sink=print)
"""
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from .config import ScanConfig
from .diagnostics import MessageSink
from .exceptions import (
    PdfScanError, InvalidHeaderError, MalformedObjectError, ConfigurationError
)
from .core import (
    LineReader, IndirectRef, Fragment, ObjectScanner, analyze_bytes
)

__version__ = '0.1.0'
__all__ = [
    # API
    'analyze', 'analyze_bytes', 'extract_text', 'to_json', 'to_dict', 'ScanResult',
    # 설정 / 진단
    'ScanConfig', 'MessageSink',
    # Core
    'ObjectScanner', 'LineReader', 'IndirectRef', 'Fragment',
    # 예외
    'PdfScanError', 'InvalidHeaderError', 'MalformedObjectError', 'ConfigurationError',
]


@dataclass
class ScanResult:
    """분석 결과"""
    filename: str = ""
    texts: List[str] = field(default_factory=list)

    @property
    def joined_text(self) -> str:
        """조각이 매우 잘게 나뉘어 있으므로 보통은 이쪽을 쓴다"""
        return "".join(self.texts)

    @property
    def is_empty(self) -> bool:
        return not self.texts


def analyze(
    filepath: Union[str, Path],
    sink=None,
    config: ScanConfig = None,
) -> ScanResult:
    """
    PDF 파일 분석

    파일 전체를 메모리에 읽은 뒤 스캔한다.

    Args:
        filepath: PDF 파일 경로
        sink: 진단 메시지 콜백 (기본: 버림)
        config: 스캔 설정

    Returns:
        ScanResult

    Raises:
        FileNotFoundError: 파일이 없을 때
    """
    path = Path(filepath)
    data = path.read_bytes()
    texts = analyze_bytes(data, sink=sink, config=config)
    return ScanResult(filename=str(filepath), texts=texts)


def extract_text(filepath: Union[str, Path], config: ScanConfig = None) -> str:
    """PDF 파일의 텍스트를 한 문자열로"""
    return analyze(filepath, config=config).joined_text


def to_dict(result: ScanResult) -> dict:
    return {
        'filename': result.filename,
        'count': len(result.texts),
        'texts': result.texts,
        'text': result.joined_text,
    }


def to_json(result: ScanResult, indent: int = 2) -> str:
    """ScanResult → JSON 문자열"""
    return json.dumps(to_dict(result), ensure_ascii=False, indent=indent)
