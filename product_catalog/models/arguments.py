"""
명령줄 인자 모델 정의
플래그별 파싱 결과 및 최종 해석 결과
"""
from typing import Generic, List, Literal, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")

OutputFormat = Literal["json", "csv", "xml"]


class ArgumentError(BaseModel):
    """잘못된 플래그 값"""

    flag: str = Field(..., description="플래그 이름 (예: --minPrice)")
    value: str = Field(..., description="입력된 원본 값")
    message: str = Field(..., description="사용자에게 보여줄 에러 메시지")


class FlagResult(BaseModel, Generic[T]):
    """단일 플래그 파싱 결과 (성공 시 value, 실패 시 error)"""

    value: Optional[T] = None
    error: Optional[ArgumentError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "FlagResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, flag: str, value: str, message: str) -> "FlagResult[T]":
        return cls(error=ArgumentError(flag=flag, value=value, message=message))


class ResolvedArguments(BaseModel):
    """해석된 명령줄 인자"""

    min_price: Optional[float] = Field(None, description="최소 가격 (포함)")
    max_price: Optional[float] = Field(None, description="최대 가격 (포함)")
    output_format: OutputFormat = Field("json", description="출력 파일 형식")
    errors: List[ArgumentError] = Field(default_factory=list, description="파싱 에러 목록")
