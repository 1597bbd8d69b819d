"""
원장 저장소 어댑터

SQLite 연결(WAL, 컬럼명 행 접근)과 BEGIN IMMEDIATE 트랜잭션.
"""

from adapters.db.sqlite_adapter import SQLiteAdapter, create_connection

__all__ = ["SQLiteAdapter", "create_connection"]
