"""
서비스 공통

저장소 에러를 고정 메시지의 StoreFailure로 변환.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

import aiosqlite

from core.errors import StoreFailure

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(operation: str, message: str) -> Iterator[None]:
    """aiosqlite 에러를 StoreFailure로 변환

    원인은 traceback과 함께 로그로 남기고 호출자에게는 message만 노출.

    Args:
        operation: 로그용 작업 이름
        message: 호출자에게 보낼 고정 메시지
    """
    try:
        yield
    except aiosqlite.Error as e:
        logger.exception(f"Error in {operation}")
        raise StoreFailure(message) from e
