"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
"""

from typing import AsyncGenerator

from fastapi import Depends, Header

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import Settings, get_settings
from core.constants import Defaults


def get_app_settings() -> Settings:
    """애플리케이션 설정 반환"""
    return get_settings()


async def get_db(
    settings: Settings = Depends(get_app_settings),
) -> AsyncGenerator[SQLiteAdapter, None]:
    """DB 세션 반환 (읽기 전용)

    조회 API에서 사용.
    """
    async with SQLiteAdapter(settings.db_path, readonly=True) as db:
        yield db


async def get_db_write(
    settings: Settings = Depends(get_app_settings),
) -> AsyncGenerator[SQLiteAdapter, None]:
    """DB 세션 반환 (쓰기 가능)

    계정 생성/수정, 분개 생성 시 사용.
    """
    async with SQLiteAdapter(settings.db_path, readonly=False) as db:
        yield db


def get_actor_id(x_user_id: str | None = Header(default=None)) -> str:
    """요청자 식별자

    인증은 앞단(게이트웨이)에서 처리하고 X-User-Id 헤더로 전달받음.
    헤더가 없으면 기본 Web 사용자로 기록.
    """
    if x_user_id and x_user_id.strip():
        return x_user_id.strip()
    return Defaults.ACTOR_ID
