"""
API 감사 로그
실행 시작 시각이 들어간 로그 파일(logs/api_log_YYYYMMDD_HHMMSS.txt)에 기록하고
같은 내용을 표준 출력에도 출력
"""
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

AUDIT_LOGGER_NAME = "product_catalog.audit"
LOG_FORMAT = "[%(asctime)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)


def log_file_path(log_dir: str, started_at: datetime) -> Path:
    """실행 시작 시각 기반 로그 파일 경로"""
    return Path(log_dir) / f"api_log_{started_at:%Y%m%d_%H%M%S}.txt"


def create_audit_logger(
    log_dir: str,
    started_at: Optional[datetime] = None,
) -> logging.Logger:
    """
    감사 로거 생성

    로그 디렉토리가 없으면 생성합니다. 디렉토리나 파일을 열 수 없으면
    경고만 남기고 표준 출력으로만 기록합니다 (로그 실패로 요청을 중단하지 않음).

    Args:
        log_dir: 로그 디렉토리
        started_at: 실행 시작 시각 (기본값: 현재 시각)

    Returns:
        설정된 logging.Logger
    """
    started_at = started_at or datetime.now()
    audit_logger = logging.getLogger(AUDIT_LOGGER_NAME)
    close_audit_logger(audit_logger)

    audit_logger.setLevel(logging.INFO)
    audit_logger.propagate = False
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    audit_logger.addHandler(console_handler)

    path = log_file_path(log_dir, started_at)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
    except OSError as e:
        logger.warning(f"[AuditLog] 로그 파일을 열 수 없음 ({path}): {e}")
    else:
        file_handler.setFormatter(formatter)
        audit_logger.addHandler(file_handler)

    return audit_logger


def close_audit_logger(audit_logger: logging.Logger) -> None:
    """핸들러 정리 (파일 핸들 닫기)"""
    for handler in list(audit_logger.handlers):
        audit_logger.removeHandler(handler)
        handler.close()
