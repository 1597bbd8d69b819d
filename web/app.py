"""
FastAPI 애플리케이션

라우터 등록, 에러 핸들러 및 앱 설정.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.errors import LedgerError
from web.routes import accounts, health, journal_entries, reports

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 생명주기 관리"""
    from adapters.db.sqlite_adapter import SQLiteAdapter
    from core.config.loader import get_settings
    from core.ledger.schema import init_ledger_schema
    from core.logging import setup_logging

    settings = get_settings()

    # 로깅 설정 (콘솔 + 파일)
    setup_logging("web", console_level=settings.log_level, file_level=settings.log_level)

    # 시작 시 - DB 스키마 자동 초기화
    async with SQLiteAdapter(settings.db_path) as db:
        await init_ledger_schema(db)

    logger.info(f"Web: DB 준비 완료 ({settings.db_path})")

    yield


app = FastAPI(
    title="Ledger API",
    description="복식부기 원장 API (계정과목표, 분개, 대차대조표)",
    version=health.API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS 설정 (개발용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =========================================================================
# 에러 핸들러 ({success: false, message} 형태)
# =========================================================================


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


@app.exception_handler(LedgerError)
async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
    """원장 에러 → 4xx/5xx envelope"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} 실패: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} 거부 ({exc.status_code}): {exc.message}")
    return _error_response(exc.status_code, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """라우팅 에러 (없는 경로 404, 허용되지 않은 메서드 405 등)"""
    response = _error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 검증 실패 → 400"""
    errors = jsonable_encoder(exc.errors())
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = f"Invalid request: {location}: {first.get('msg', 'invalid value')}" if first else "Invalid request"
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": message, "errors": errors},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """예상하지 못한 에러 → 500 (내부 정보 노출 금지)"""
    logger.exception(f"{request.method} {request.url.path} 처리 중 예외 발생")
    return _error_response(500, "Internal server error")


# =========================================================================
# API 라우터 등록
# =========================================================================

app.include_router(health.router)
app.include_router(accounts.router)
app.include_router(journal_entries.router)
app.include_router(reports.router)
