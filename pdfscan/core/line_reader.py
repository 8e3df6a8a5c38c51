"""
PDF 논리 줄 리더

바이트 버퍼를 하나의 커서로 앞으로만 읽으면서 줄 단위로 잘라낸다.

일반 줄바꿈(CR, LF, CRLF) 외에 두 가지 규칙이 있다:
1. 다음 두 바이트가 '<<'이면 거기서 줄을 끊는다 (중첩 딕셔너리는 새 줄에서 시작)
2. '>>'를 만나면 그 직후에서 줄을 끊는다 (딕셔너리 닫힘 = 줄바꿈)

read_logical_line()은 '<<'와 '>>' 개수가 같아질 때까지 줄을 이어 붙여서
여러 줄에 걸친 딕셔너리도 한 줄로 돌려준다.
"""

from typing import Optional

from ..exceptions import MalformedObjectError


CR = 0x0D
LF = 0x0A
LT = 0x3C  # '<'
GT = 0x3E  # '>'


class LineReader:
    """바이트 커서 기반 줄 리더"""

    def __init__(self, data: bytes, pos: int = 0):
        self.data = data
        self.pos = pos
        self.length = len(data)

    def at_end(self) -> bool:
        return self.pos >= self.length

    def read_raw_line(self) -> Optional[bytes]:
        """
        줄바꿈 문자를 포함한 원시 줄 하나 읽기

        Returns:
            줄 바이트, 버퍼 끝이면 None
        """
        if self.pos >= self.length:
            return None

        data = self.data
        start = self.pos
        end = start
        prev = None

        while end < self.length:
            ch = data[end]

            # 첫 바이트는 무조건 소비
            if prev is not None:
                if prev == CR and ch == LF:
                    end += 1
                    break
                if prev == CR or prev == LF:
                    break

                if prev == GT and ch == GT:
                    end += 1
                    break

                # 현재 바이트 다음이 '<<'이면 여기까지
                if end + 2 < self.length and data[end + 1] == LT and data[end + 2] == LT:
                    end += 1
                    break

            prev = ch
            end += 1

        self.pos = end
        return data[start:end]

    def read_text_line(self) -> Optional[str]:
        """빈 줄을 건너뛰고 줄바꿈을 제거한 텍스트 줄 읽기"""
        while True:
            raw = self.read_raw_line()
            if raw is None:
                return None

            text = raw.decode('utf-8', errors='replace')
            text = text.replace('\r\n', '').replace('\r', '').replace('\n', '')
            if text:
                return text

    def read_logical_line(self) -> str:
        """
        '<<'와 '>>'의 개수가 맞을 때까지 줄을 이어 붙여 읽기

        Returns:
            논리 줄, 버퍼 끝이면 빈 문자열
        """
        line = ''
        while True:
            text = self.read_text_line()
            if text is None:
                break

            line += text
            if line.count('<<') == line.count('>>'):
                break

        return line

    def advance(self, count: int):
        """해석하지 않는 데이터 건너뛰기"""
        self.pos += count

    def take(self, length: int, skip: int = 0) -> bytes:
        """
        스트림 데이터 꺼내기

        현재 위치 + skip 부터 현재 위치 + length 까지를 돌려주고
        커서를 length만큼 전진시킨다. 범위를 벗어나면 커서는 그대로 둔다.
        """
        if length < skip:
            raise MalformedObjectError(f"Stream length {length} is shorter than prefix {skip}")

        end = self.pos + length
        if end > self.length:
            raise MalformedObjectError(
                f"Stream at {self.pos} with length {length} runs past end of data ({self.length})"
            )

        result = self.data[self.pos + skip:end]
        self.pos = end
        return result
