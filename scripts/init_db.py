"""
원장 DB 초기화

사용법:
    python -m scripts.init_db
    python -m scripts.init_db --seed
    python -m scripts.init_db --db data/other.db --seed
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import ConfigLoadError, get_settings
from core.constants import Paths
from core.ledger.schema import init_ledger_schema, seed_default_accounts
from core.logging import setup_logging

logger = logging.getLogger(__name__)


def _resolve_db_path(arg: str | None) -> Path:
    if arg:
        return Path(arg).resolve()
    try:
        return get_settings().db_path
    except ConfigLoadError as e:
        logger.warning(f"설정 로드 실패, 기본 DB 경로 사용: {e}")
        return Paths.DEFAULT_DB


async def main(db_path: Path, seed: bool) -> None:
    async with SQLiteAdapter(db_path) as db:
        existed = await db.table_exists("chart_of_accounts")
        await init_ledger_schema(db)
        print(f"Schema: {'already initialized' if existed else 'created'}")

        if seed:
            created = await seed_default_accounts(db)
            print(f"Seeded accounts: {created}")

    print(f"DB Path: {db_path}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="원장 DB 스키마 생성")
    parser.add_argument("--db", help="DB 파일 경로 (기본: settings.yaml)")
    parser.add_argument("--seed", action="store_true", help="기본 계정과목표 입력")
    args = parser.parse_args()

    setup_logging("init_db", log_to_file=False)
    asyncio.run(main(_resolve_db_path(args.db), args.seed))
