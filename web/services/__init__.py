"""
Web 서비스 패키지

비즈니스 로직 처리
"""

from web.services.account_service import AccountService
from web.services.journal_service import JournalService
from web.services.report_service import ReportService

__all__ = [
    "AccountService",
    "JournalService",
    "ReportService",
]
