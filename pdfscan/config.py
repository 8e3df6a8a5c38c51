"""
pdfscan 스캔 설정

기본값은 그대로 쓰면 되고, 필요한 항목만 바꿔서 넘긴다.

Example:
    >>> config = ScanConfig(stream_encoding="shift_jis")
    >>> texts = analyze_bytes(data, config=config)
"""

import codecs
from dataclasses import dataclass
from typing import Tuple

from .exceptions import ConfigurationError


# 이 이름이 딕셔너리에 있으면 텍스트 스트림이 아님 (이미지, 색공간, XRef 등)
DEFAULT_EXCLUDED_MARKERS = (
    'XRef', 'ObjStm', 'Length1', 'XObject',
    'DeviceRGB', 'DeviceGray', 'DeviceCMYK',
    'CalGray', 'CalRGB', 'Lab', 'ICCCBased',
    'Separation', 'Device', 'Indexed', 'Pattern',
)

# 디코딩 대상 스트림 딕셔너리에 허용되는 키 (소문자)
DEFAULT_ALLOWED_KEYS = ('filter', 'flatedecode', 'length')


@dataclass
class ScanConfig:
    """스트림 디코딩 설정"""

    excluded_markers: Tuple[str, ...] = DEFAULT_EXCLUDED_MARKERS
    allowed_dictionary_keys: Tuple[str, ...] = DEFAULT_ALLOWED_KEYS

    # cp932 = Windows Shift-JIS
    stream_encoding: str = 'cp932'

    # zlib 헤더 2바이트를 건너뛰고 raw deflate로 푼다
    skip_prefix: int = 2

    def __post_init__(self):
        if self.skip_prefix < 0:
            raise ConfigurationError(f"skip_prefix must be >= 0, got {self.skip_prefix}")
        try:
            codecs.lookup(self.stream_encoding)
        except LookupError:
            raise ConfigurationError(f"Unknown stream encoding: {self.stream_encoding!r}")
        self.allowed_dictionary_keys = tuple(k.lower() for k in self.allowed_dictionary_keys)
