"""
pdfscan 예외 클래스

모든 예외는 PdfScanError를 상속하므로
라이브러리 오류를 한 번에 잡을 수 있다.

Example:
    >>> try:
    ...     validate_header(ctx, strict=True)
    ... except PdfScanError as e:
    ...     print(f"분석 실패: {e}")
"""


class PdfScanError(Exception):
    """pdfscan 기본 예외"""

    pass


class InvalidHeaderError(PdfScanError):
    """
    첫 줄이 %PDF-x.y 헤더가 아닐 때

    스캐너 내부에서는 빈 결과로 처리되고,
    validate_header(..., strict=True) 호출 시에만 발생한다.
    """

    pass


class MalformedObjectError(PdfScanError):
    """
    객체 하나를 처리하는 중 발생한 오류

    스트림 길이가 범위를 벗어나거나 압축 해제에 실패한 경우.
    스캐너는 이 오류를 객체 단위로 잡고 다음 줄부터 계속 진행한다.
    """

    pass


class ConfigurationError(PdfScanError):
    """잘못된 ScanConfig 설정"""

    pass
