"""
타입 정의 모듈

레이어 공통으로 사용하는 타입 정의
"""

from typing import Any


class _Unset:
    """부분 업데이트에서 "값 없음"과 "null 지정"을 구분하기 위한 마커

    싱글턴. `value is UNSET` 으로 비교.
    """

    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()
