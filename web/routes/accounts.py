"""
계정과목표 라우트

계정 조회/생성/수정 API
"""

from fastapi import APIRouter, Depends, Path

from adapters.db.sqlite_adapter import SQLiteAdapter
from web.dependencies import get_db, get_db_write
from web.models.requests import AccountCreateRequest, AccountUpdateRequest
from web.models.responses import AccountResponse, ApiResponse, CreatedResponse
from web.services.account_service import AccountService

router = APIRouter(prefix="/api/accounting", tags=["Accounts"])


@router.get("/accounts", response_model=ApiResponse[list[AccountResponse]])
async def get_accounts(
    db: SQLiteAdapter = Depends(get_db),
) -> ApiResponse[list[AccountResponse]]:
    """전체 계정 조회

    계정 코드 오름차순. 상위 계정명, 하위 계정 존재 여부 포함.
    """
    service = AccountService(db)

    accounts = await service.get_accounts()

    return ApiResponse(data=[AccountResponse(**a) for a in accounts])


@router.get("/accounts/{account_id}", response_model=ApiResponse[AccountResponse])
async def get_account(
    account_id: int = Path(..., description="계정 id"),
    db: SQLiteAdapter = Depends(get_db),
) -> ApiResponse[AccountResponse]:
    """계정 단건 조회"""
    service = AccountService(db)

    account = await service.get_account(account_id)

    return ApiResponse(data=AccountResponse(**account))


@router.post(
    "/accounts",
    response_model=ApiResponse[CreatedResponse],
    status_code=201,
)
async def create_account(
    request: AccountCreateRequest,
    db: SQLiteAdapter = Depends(get_db_write),
) -> ApiResponse[CreatedResponse]:
    """계정 생성

    계정 코드가 이미 있으면 400.
    """
    service = AccountService(db)

    account_id = await service.create_account(request.to_new_account())

    return ApiResponse(
        data=CreatedResponse(id=account_id),
        message="Account created successfully",
    )


@router.put("/accounts/{account_id}", response_model=ApiResponse)
async def update_account(
    request: AccountUpdateRequest,
    account_id: int = Path(..., description="계정 id"),
    db: SQLiteAdapter = Depends(get_db_write),
) -> ApiResponse:
    """계정 부분 수정

    요청에 포함된 필드만 변경.
    description / parent_id 에 null을 보내면 값을 비움.
    """
    service = AccountService(db)

    await service.update_account(account_id, request.to_patch())

    return ApiResponse(message="Account updated successfully")
