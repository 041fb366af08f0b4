"""
환경변수 설정 모듈
Pydantic Settings를 사용하여 환경변수를 관리합니다.
.env 파일이 있으면 함께 읽습니다.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """애플리케이션 설정"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========== 상품 API 설정 ==========
    api_url: str = "https://fakestoreapi.com/products"
    http_timeout_seconds: float = 30.0

    # ========== 재시도 설정 ==========
    max_retries: int = 3
    retry_delay_seconds: float = 2.0

    # ========== 로그 설정 ==========
    log_dir: str = "logs"
    log_level: LogLevel = "INFO"

    # ========== 출력 설정 ==========
    output_dir: str = "."
    output_basename: str = "grouped_products"
    default_format: Literal["json", "csv", "xml"] = "json"

    # ========== 난수 설정 ==========
    # None이면 OS 엔트로피로 시드 (실행마다 다른 값)
    random_seed: Optional[int] = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        """로그 레벨은 대소문자 무시"""
        return value.upper() if isinstance(value, str) else value


@lru_cache()
def get_settings() -> Settings:
    """캐싱된 설정 인스턴스 반환"""
    return Settings()
