"""
분개 라우트

분개 조회/생성 API
"""

from datetime import date

from fastapi import APIRouter, Depends, Path, Query

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.types import JournalStatus
from web.dependencies import get_actor_id, get_db, get_db_write
from web.models.requests import JournalEntryCreateRequest
from web.models.responses import ApiResponse, CreatedResponse, JournalEntryResponse
from web.services.journal_service import JournalService

router = APIRouter(prefix="/api/accounting", tags=["Journal Entries"])


@router.get("/journal-entries", response_model=ApiResponse[list[JournalEntryResponse]])
async def get_journal_entries(
    start_date: date | None = Query(default=None, description="시작일 (포함)"),
    end_date: date | None = Query(default=None, description="종료일 (포함)"),
    status: JournalStatus | None = Query(default=None, description="상태 필터"),
    db: SQLiteAdapter = Depends(get_db),
) -> ApiResponse[list[JournalEntryResponse]]:
    """분개 목록 조회

    거래일 내림차순, 같은 날은 id 내림차순.
    """
    service = JournalService(db)

    entries = await service.get_entries(
        start_date=start_date,
        end_date=end_date,
        status=status.value if status else None,
    )

    return ApiResponse(data=[JournalEntryResponse(**e) for e in entries])


@router.get("/journal-entries/{entry_id}", response_model=ApiResponse[JournalEntryResponse])
async def get_journal_entry(
    entry_id: int = Path(..., description="분개 id"),
    db: SQLiteAdapter = Depends(get_db),
) -> ApiResponse[JournalEntryResponse]:
    """분개 단건 조회"""
    service = JournalService(db)

    entry = await service.get_entry(entry_id)

    return ApiResponse(data=JournalEntryResponse(**entry))


@router.post(
    "/journal-entries",
    response_model=ApiResponse[CreatedResponse],
    status_code=201,
)
async def create_journal_entry(
    request: JournalEntryCreateRequest,
    actor_id: str = Depends(get_actor_id),
    db: SQLiteAdapter = Depends(get_db_write),
) -> ApiResponse[CreatedResponse]:
    """분개 생성

    차변 합계와 대변 합계가 0.01 넘게 차이 나면 400.
    헤더와 항목은 하나의 트랜잭션으로 저장.
    """
    service = JournalService(db)

    entry_id = await service.create_entry(request.to_entry(created_by=actor_id))

    return ApiResponse(
        data=CreatedResponse(id=entry_id),
        message="Journal entry created successfully",
    )
