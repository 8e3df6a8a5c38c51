"""
진단 메시지 출력

스캐너는 읽은 줄, 디코딩 판단, 충돌, 변환 실패 등을 MessageSink로 보낸다.
기본 콜백은 메시지를 버리고, 모든 메시지는 'pdfscan' 로거에 DEBUG로도 남는다.
"""

import logging
from typing import Callable, Optional

logger = logging.getLogger('pdfscan')


def _discard(message: str):
    pass


class MessageSink:
    """주입 가능한 메시지 출력 대상"""

    def __init__(self, callback: Optional[Callable[[str], None]] = None):
        self.callback = callback or _discard

    def __call__(self, message: str):
        logger.debug(message)
        self.callback(message)

    @classmethod
    def wrap(cls, sink) -> 'MessageSink':
        """None, 콜백, MessageSink 중 무엇이 와도 MessageSink로 변환"""
        if isinstance(sink, cls):
            return sink
        return cls(sink)
