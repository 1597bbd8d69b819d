"""
core/types.py 테스트

UNSET 마커가 None과 구분되는지 확인
"""

import copy

from core.types import UNSET, _Unset


class TestUnset:
    """UNSET 마커 테스트"""

    def test_singleton(self) -> None:
        """항상 같은 인스턴스"""
        assert _Unset() is UNSET

    def test_not_none(self) -> None:
        """None과 구분됨"""
        assert UNSET is not None
        assert UNSET != None  # noqa: E711

    def test_falsy(self) -> None:
        assert not UNSET

    def test_repr(self) -> None:
        assert repr(UNSET) == "UNSET"

    def test_copy_keeps_identity(self) -> None:
        """dataclass 복사 후에도 `is UNSET` 비교 유지"""
        assert copy.copy(UNSET) is UNSET
        assert copy.deepcopy(UNSET) is UNSET
