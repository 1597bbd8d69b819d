"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from decimal import Decimal
from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → 프로젝트 루트)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class Defaults:
    """기본값 상수"""

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 8000

    LOG_LEVEL: str = "INFO"

    # 인증은 외부 담당, 식별자가 없으면 이 값으로 기록
    ACTOR_ID: str = "web:admin"


class LedgerLimits:
    """원장 검증 임계값"""

    # 차변/대변 합계 허용 오차 (이 값을 초과하면 불균형)
    BALANCE_TOLERANCE: Decimal = Decimal("0.01")

    # 금액 자릿수 상한 (전체 유효 자릿수 / 소수점 이하 자릿수)
    # 합계는 Decimal 기본 정밀도(28자리) 안에서 계산됨
    AMOUNT_MAX_DIGITS: int = 20
    AMOUNT_DECIMAL_PLACES: int = 8

    # 계정 계층 최대 깊이 (순환 방지 상한)
    MAX_HIERARCHY_DEPTH: int = 64

    # IN (...) 조회 시 한 번에 바인딩할 최대 id 수
    ID_CHUNK_SIZE: int = 500


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    WEB_LOGS_DIR: Path = LOGS_DIR / "web"

    # 설정 파일
    SETTINGS_FILE: Path = CONFIG_DIR / "settings.yaml"

    # DB 파일
    DEFAULT_DB: Path = DATA_DIR / "ledger.db"
