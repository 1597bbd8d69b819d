"""
재무제표 라우트

GET /api/accounting/reports/balance-sheet - 기준일 대차대조표
"""

from datetime import date

from fastapi import APIRouter, Depends, Query

from adapters.db.sqlite_adapter import SQLiteAdapter
from web.dependencies import get_db
from web.models.responses import ApiResponse, BalanceSheetResponse
from web.services.report_service import ReportService

router = APIRouter(prefix="/api/accounting/reports", tags=["Reports"])


@router.get("/balance-sheet", response_model=ApiResponse[BalanceSheetResponse])
async def get_balance_sheet(
    as_of_date: date | None = Query(default=None, description="기준일 (미지정 시 오늘)"),
    db: SQLiteAdapter = Depends(get_db),
) -> ApiResponse[BalanceSheetResponse]:
    """대차대조표

    기준일까지 POSTED 분개만 반영.
    """
    service = ReportService(db)

    sheet = await service.get_balance_sheet(as_of_date or date.today())

    return ApiResponse(data=BalanceSheetResponse(**sheet))
