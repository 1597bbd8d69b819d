"""
설정 로더

settings.yaml 로드 및 DB/Web 설정 생성
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from core.constants import PROJECT_ROOT, Defaults, Paths


@dataclass(frozen=True)
class LedgerConfig:
    """애플리케이션 설정 (settings.yaml에서 로드)

    불변 데이터 구조로 설정 변경 방지
    """

    db_path: Path
    web_host: str = Defaults.WEB_HOST
    web_port: int = Defaults.WEB_PORT
    log_level: str = Defaults.LOG_LEVEL

    @property
    def log_level_no(self) -> int:
        """logging 모듈 레벨 값"""
        return logging.getLevelName(self.log_level)


class ConfigLoadError(Exception):
    """설정 로드 실패 예외"""

    pass


def _resolve_db_path(raw: str | None) -> Path:
    """DB 경로 해석 (상대 경로는 프로젝트 루트 기준)"""
    if not raw:
        return Paths.DEFAULT_DB

    path = Path(raw)
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path


def load_config(path: Path | None = None) -> LedgerConfig:
    """settings.yaml 파일 로드

    Args:
        path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        LedgerConfig 인스턴스

    Raises:
        ConfigLoadError: 파일이 없거나 형식이 잘못된 경우
    """
    if path is None:
        path = Paths.SETTINGS_FILE

    if not path.exists():
        raise ConfigLoadError(f"settings.yaml 파일을 찾을 수 없습니다: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"settings.yaml 파싱 실패: {e}") from e

    if data is None:
        raise ConfigLoadError("settings.yaml이 비어 있습니다")

    if not isinstance(data, dict):
        raise ConfigLoadError("settings.yaml 최상위는 매핑이어야 합니다")

    database = data.get("database") or {}
    web = data.get("web") or {}
    logging_config = data.get("logging") or {}

    port = web.get("port", Defaults.WEB_PORT)
    try:
        port = int(port)
    except (TypeError, ValueError) as e:
        raise ConfigLoadError(f"web.port 값이 올바르지 않습니다: {port!r}") from e

    log_level = str(logging_config.get("level", Defaults.LOG_LEVEL)).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigLoadError(f"logging.level 값이 올바르지 않습니다: {log_level!r}")

    return LedgerConfig(
        db_path=_resolve_db_path(database.get("path")),
        web_host=str(web.get("host", Defaults.WEB_HOST)),
        web_port=port,
        log_level=log_level,
    )


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    settings.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _config: LedgerConfig | None = None

    def __new__(cls, settings_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, settings_path: Path | None = None) -> None:
        if self._config is None:
            self._config = load_config(settings_path)

    @property
    def db_path(self) -> Path:
        """DB 파일 경로"""
        assert self._config is not None
        return self._config.db_path

    @property
    def web_host(self) -> str:
        """Web 바인드 호스트"""
        assert self._config is not None
        return self._config.web_host

    @property
    def web_port(self) -> int:
        """Web 포트"""
        assert self._config is not None
        return self._config.web_port

    @property
    def log_level(self) -> int:
        """로그 레벨"""
        assert self._config is not None
        return self._config.log_level_no

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._config = None


def get_settings(settings_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        settings_path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(settings_path)
