"""
원장 에러 정의

검증 에러(4xx)는 메시지를 그대로 호출자에게 전달.
StoreFailure(5xx)는 고정 메시지만 노출하고 원인은 로그로 남김.
"""


class LedgerError(Exception):
    """원장 에러 기본 클래스

    Args:
        message: 호출자에게 노출되는 메시지
    """

    status_code: int = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(LedgerError):
    """계정/분개 등 참조 대상 없음"""

    status_code = 404


class DuplicateCodeError(LedgerError):
    """계정 코드 중복"""

    def __init__(self, account_code: str):
        self.account_code = account_code
        super().__init__("Account code already exists")


class UnbalancedEntryError(LedgerError):
    """차변 합계 ≠ 대변 합계 (허용 오차 초과)"""

    def __init__(self, total_debit, total_credit):
        self.total_debit = total_debit
        self.total_credit = total_credit
        super().__init__("Debits and credits must be equal")


class InvalidRequestError(LedgerError):
    """입력값 검증 실패"""
    pass


class InvalidParentError(InvalidRequestError):
    """상위 계정 지정 오류 (자기 자신 또는 하위 계정을 상위로 지정)"""
    pass


class StoreFailure(LedgerError):
    """저장소 에러 (연결, 제약조건, 타임아웃 등)

    원본 예외 내용은 노출하지 않음.
    """

    status_code = 500
