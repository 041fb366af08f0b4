"""
상품 카탈로그 에러 정의
"""


class CatalogError(Exception):
    """상품 카탈로그 처리 에러"""

    pass


class FetchError(CatalogError):
    """상품 API 호출 실패 (재시도 소진)"""

    def __init__(self, url: str, attempts: int, cause: BaseException) -> None:
        self.url = url
        self.attempts = attempts
        self.cause = cause
        super().__init__(f"GET {url} failed after {attempts} attempt(s): {cause}")


class DeserializationError(CatalogError):
    """API 응답을 상품 목록으로 변환할 수 없음"""

    pass


class ExportError(CatalogError):
    """지원하지 않는 출력 형식"""

    def __init__(self, output_format: str) -> None:
        self.output_format = output_format
        super().__init__(
            f"Unsupported format '{output_format}'. Please use json, csv, or xml"
        )
