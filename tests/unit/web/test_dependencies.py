"""
web/dependencies.py 테스트
"""

from pathlib import Path
from types import SimpleNamespace

import pytest

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.constants import Defaults
from web.dependencies import get_actor_id, get_db, get_db_write


class TestGetActorId:
    def test_header(self) -> None:
        assert get_actor_id("user:42") == "user:42"

    def test_strips_whitespace(self) -> None:
        assert get_actor_id("  user:42 ") == "user:42"

    def test_default(self) -> None:
        assert get_actor_id(None) == Defaults.ACTOR_ID
        assert get_actor_id("   ") == Defaults.ACTOR_ID


class TestDbSessions:
    """요청마다 연결을 열고, 요청이 끝나면 닫음"""

    @pytest.mark.asyncio
    async def test_write_session(self, tmp_path: Path) -> None:
        settings = SimpleNamespace(db_path=tmp_path / "ledger.db")
        gen = get_db_write(settings=settings)

        db = await gen.__anext__()
        assert isinstance(db, SQLiteAdapter)
        assert db.readonly is False
        assert db.is_connected is True

        await gen.aclose()
        assert db.is_connected is False

    @pytest.mark.asyncio
    async def test_readonly_session(self, tmp_path: Path) -> None:
        db_path = tmp_path / "ledger.db"
        async with SQLiteAdapter(db_path) as writer:
            await writer.execute("CREATE TABLE t (id INTEGER)")
            await writer.commit()

        gen = get_db(settings=SimpleNamespace(db_path=db_path))

        db = await gen.__anext__()
        assert db.readonly is True
        assert await db.table_exists("t") is True

        await gen.aclose()
        assert db.is_connected is False
