"""
줄 인식기

스캐너가 다루는 줄 종류마다 작은 인식 함수를 둔다.
- 헤더:          %PDF-1.4
- 객체 시작:     12 0 obj
- 폰트 딕셔너리: << /Font << /F1 5 0 R >> >>, /ToUnicode 6 0 R, RKSJ
- 스트림 딕셔너리: << /Length 120 /Filter /FlateDecode >>
- 콘텐츠 줄:     /F1 12 Tf, <0041> Tj, [(A)-120(B)] TJ
- CMap 토큰:     <0041> <0042>
"""

import re
from typing import Iterator, List, Optional, Tuple

from .models import IndirectRef


HEADER_PATTERN = re.compile(r'%PDF-[0-9]\.[0-9]')
OBJECT_HEADER_PATTERN = re.compile(r'[0-9]+ +[0-9]+ +obj *$')
INTEGER_PATTERN = re.compile(r'[0-9]+')

LENGTH_PATTERN = re.compile(r'Length +([0-9]+)')
FONT_RESOURCE_PATTERN = re.compile(r'/(F[0-9]+) +([0-9]+) +([0-9]+)')
TO_UNICODE_PATTERN = re.compile(r'/ToUnicode +([0-9]+) +([0-9]+)')

FONT_SELECT_PATTERN = re.compile(r'/(F[0-9]+) ')
TEXT_SHOW_PATTERN = re.compile(r'T[Jj]$')
SHOW_HEX_PATTERN = re.compile(r'<([0-9a-fA-F]*)>')
LITERAL_PATTERN = re.compile(r'\(.*\)')
# TJ 배열의 ")-120(" 같은 간격 조정값
ARRAY_ADJUST_PATTERN = re.compile(r'\)[0-9\-]*\(')

CMAP_HEX_PATTERN = re.compile(r'<([0-9a-fA-F]+)>')


# =============================================================================
# 구조 줄
# =============================================================================

def match_header(line: str) -> bool:
    return HEADER_PATTERN.match(line) is not None


def match_object_header(line: str) -> Optional[IndirectRef]:
    """'12 0 obj' 줄이면 IndirectRef(12, 0)"""
    if not OBJECT_HEADER_PATTERN.search(line):
        return None
    numbers = INTEGER_PATTERN.findall(line)
    return IndirectRef(int(numbers[0]), int(numbers[1]))


def find_stream_length(dictionary: str) -> Optional[int]:
    match = LENGTH_PATTERN.search(dictionary)
    if not match:
        return None
    return int(match.group(1))


def has_excluded_marker(dictionary: str, markers) -> Optional[str]:
    """제외 대상 이름(/XObject 등)이 있으면 그 이름 반환"""
    for marker in markers:
        if '/' + marker in dictionary:
            return marker
    return None


def dictionary_keys(dictionary: str) -> List[str]:
    """
    '/'로 나눈 각 조각의 첫 단어 (소문자)

    '<< /Length 10 /Filter /FlateDecode >>' → ['length', 'filter', 'flatedecode']
    """
    keys = []
    body = dictionary.replace('<<', '').replace('>>', '')
    for part in body.split('/'):
        head = part.split(' ')[0]
        if head:
            keys.append(head.lower())
    return keys


# =============================================================================
# 폰트 딕셔너리
# =============================================================================

def is_font_dictionary(dictionary: str) -> bool:
    return '/Font' in dictionary


def iter_font_resources(dictionary: str) -> Iterator[Tuple[str, IndirectRef]]:
    """'/F1 5 0' → ('F1', Ref(5 0 R))"""
    for match in FONT_RESOURCE_PATTERN.finditer(dictionary):
        yield match.group(1), IndirectRef(int(match.group(2)), int(match.group(3)))


def find_to_unicode(dictionary: str) -> Optional[IndirectRef]:
    match = TO_UNICODE_PATTERN.search(dictionary)
    if not match:
        return None
    return IndirectRef(int(match.group(1)), int(match.group(2)))


def is_shift_jis(dictionary: str) -> bool:
    return 'RKSJ' in dictionary


# =============================================================================
# 콘텐츠 스트림
# =============================================================================

def find_font_selector(line: str) -> Optional[str]:
    """'/F1 12 Tf' → 'F1'"""
    match = FONT_SELECT_PATTERN.search(line)
    return match.group(1) if match else None


def is_text_show(line: str) -> bool:
    return TEXT_SHOW_PATTERN.search(line) is not None


def show_hex_bytes(line: str) -> bytes:
    """
    줄의 모든 <hex> 토큰을 이어 붙인 바이트

    토큰마다 2자리씩 바이트로 바꾸고, 홀수 자리의 마지막 한 글자는 버린다.
    """
    result = bytearray()
    for match in SHOW_HEX_PATTERN.finditer(line):
        digits = match.group(1)
        digits = digits[:len(digits) - len(digits) % 2]
        result.extend(bytes.fromhex(digits))
    return bytes(result)


def iter_literal_runs(line: str) -> Iterator[str]:
    """
    괄호 문자열 추출

    '[(Hel)-20(lo)] TJ' → 'Hello'
    """
    for match in LITERAL_PATTERN.finditer(line):
        run = ARRAY_ADJUST_PATTERN.sub('', match.group(0))
        if len(run) >= 2:
            yield run[1:-1]


# =============================================================================
# CMap
# =============================================================================

def cmap_hex_tokens(line: str) -> List[bytes]:
    """
    <hex> 토큰을 바이트로 변환

    홀수 자리면 뒤에 0을 하나 붙인다: <041> → b'\\x04\\x10'
    """
    tokens = []
    for match in CMAP_HEX_PATTERN.finditer(line):
        digits = match.group(1)
        if len(digits) % 2 == 1:
            digits += '0'
        tokens.append(bytes.fromhex(digits))
    return tokens


def tokens_to_codes(tokens: List[bytes]) -> List[int]:
    """
    토큰 바이트를 16비트 코드 목록으로

    1바이트 토큰은 그 값 그대로, 나머지는 2바이트씩 빅엔디언.
    남는 홀수 바이트는 버린다.
    """
    codes = []
    for token in tokens:
        if len(token) == 1:
            codes.append(token[0])
            continue
        for i in range(0, len(token) - 1, 2):
            codes.append((token[i] << 8) | token[i + 1])
    return codes
