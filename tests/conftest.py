"""
Pytest configuration and fixtures for pdfscan tests.

PDF는 모두 메모리에서 직접 조립한다 (xref 없이 객체만 나열).
"""

import zlib

import pytest


class PdfBuilder:
    """테스트용 PDF 바이트 조립기"""

    HEADER = b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n"
    TRAILER = b"trailer\n<< /Size 10 >>\nstartxref\n0\n%%EOF\n"

    def dict_object(self, num: int, dictionary: str, gen: int = 0) -> bytes:
        return f"{num} {gen} obj\n{dictionary}\nendobj\n".encode('latin-1')

    def stream_object(self, num: int, body: bytes, gen: int = 0,
                      dictionary: str = None, compress: bool = True) -> bytes:
        """
        dictionary에는 {length} 자리표시자를 쓸 수 있다.
        """
        data = zlib.compress(body) if compress else body
        if dictionary is None:
            if compress:
                dictionary = "<< /Length {length} /Filter /FlateDecode >>"
            else:
                dictionary = "<< /Length {length} >>"
        dictionary = dictionary.format(length=len(data))
        head = f"{num} {gen} obj\n{dictionary}\nstream\n".encode('latin-1')
        return head + data + b"\nendstream\nendobj\n"

    def cmap_object(self, num: int, bfchar: str = "", bfrange: str = "") -> bytes:
        lines = ["/CIDInit /ProcSet findresource begin", "begincmap"]
        if bfchar:
            lines += ["1 beginbfchar", bfchar, "endbfchar"]
        if bfrange:
            lines += ["1 beginbfrange", bfrange, "endbfrange"]
        lines += ["endcmap", "end"]
        return self.stream_object(num, "\n".join(lines).encode('ascii'))

    def page_object(self, num: int, fonts: dict, contents: int = 4) -> bytes:
        entries = " ".join(f"/{name} {obj} 0 R" for name, obj in fonts.items())
        return self.dict_object(
            num,
            f"<< /Type /Page /Resources << /Font << {entries} >> >> /Contents {contents} 0 R >>",
        )

    def build(self, *objects: bytes, header: bytes = None) -> bytes:
        return (header if header is not None else self.HEADER) + b"".join(objects) + self.TRAILER


@pytest.fixture
def builder() -> PdfBuilder:
    return PdfBuilder()


@pytest.fixture
def messages() -> list:
    """진단 메시지 수집용 리스트 (sink=messages.append)"""
    return []


@pytest.fixture
def simple_pdf(builder) -> bytes:
    """
    F1 → (5, 0), ToUnicode (6, 0): 0x0041 → 0x0042
    콘텐츠: /F1 선택 후 <0041> Tj
    """
    return builder.build(
        builder.page_object(3, {"F1": 5}),
        builder.stream_object(4, b"BT\n/F1 12 Tf\n100 700 Td\n<0041> Tj\nET\n"),
        builder.dict_object(5, "<< /Type /Font /Subtype /Type0 /BaseFont /MSGothic /ToUnicode 6 0 R >>"),
        builder.cmap_object(6, bfchar="<0041> <0042>"),
    )
