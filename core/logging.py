"""
로깅 설정 유틸리티

Web 프로세스와 스크립트에서 사용하는 공통 로깅 설정.
- 콘솔: settings.yaml logging.level
- 파일: logs/web/web.log (TimedRotatingFileHandler, daily)
- logger.info(..., extra={...}) 로 넘긴 필드는 줄 끝에 key=value 로 출력

사용법:
    from core.logging import setup_logging
    setup_logging("web", console_level=logging.DEBUG)
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from core.constants import Paths


# 로그 설정 상수
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_BACKUP_COUNT = 7  # 최대 7일치 파일 유지

# 불필요한 로그를 생성하는 로거 목록 (레벨 조정 대상)
NOISY_LOGGERS = [
    "aiosqlite",      # DB 쿼리마다 executing/completed 로그 (매우 많음)
    "httpcore",
    "httpx",
    "asyncio",
    "uvicorn.access", # 요청별 access 로그
]

# LogRecord 기본 속성 (extra 필드 판별용)
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime", "color_message"}  # color_message: uvicorn


class ExtraFieldsFormatter(logging.Formatter):
    """extra 필드를 메시지 뒤에 붙이는 포맷터

    예: 2024-01-01 00:00:00 | INFO     | core.ledger.chart | Account created: 1000 | account_id=1 account_type=asset
    """

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)

        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS and not key.startswith("_")
        }
        if not extras:
            return line

        fields = " ".join(f"{key}={value}" for key, value in extras.items())
        if record.exc_text:
            # traceback 앞(첫 줄 끝)에 붙임
            head, sep, tail = line.partition("\n")
            return f"{head} | {fields}{sep}{tail}"
        return f"{line} | {fields}"


def get_log_file_path(process_name: str) -> Path:
    """로그 파일 경로 반환

    "web"은 logs/web/ 아래, 그 외(스크립트)는 logs/ 바로 아래.
    """
    if process_name == "web":
        return Paths.WEB_LOGS_DIR / f"{process_name}.log"
    return Paths.LOGS_DIR / f"{process_name}.log"


def setup_logging(
    process_name: str,
    console_level: int = logging.INFO,
    file_level: int = logging.INFO,
    log_to_file: bool = True,
) -> logging.Logger:
    """로깅 설정 초기화

    Daily 롤링으로 매일 자정에 새 파일 생성.
    여러 번 호출해도 핸들러가 중복되지 않음.

    Args:
        process_name: 프로세스 이름 ("web" 또는 스크립트 이름)
        console_level: 콘솔 로그 레벨 (기본: INFO)
        file_level: 파일 로그 레벨 (기본: INFO)
        log_to_file: 파일 핸들러 사용 여부 (스크립트는 False)

    Returns:
        설정된 루트 Logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # 루트는 DEBUG로 설정 (핸들러에서 필터링)

    # 기존 핸들러 제거 (중복 방지)
    root_logger.handlers.clear()

    formatter = ExtraFieldsFormatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file = get_log_file_path(process_name)
    if log_to_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = TimedRotatingFileHandler(
            filename=log_file,
            when="midnight",
            interval=1,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.suffix = "%Y-%m-%d"  # 백업 파일 형식: web.log.2026-02-21
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    root_logger.info(f"로깅 초기화 완료: {process_name}")
    root_logger.info(f"  - 콘솔: {logging.getLevelName(console_level)}")
    if log_to_file:
        root_logger.info(f"  - 파일: {log_file} ({logging.getLevelName(file_level)}, daily rotation)")

    return root_logger
