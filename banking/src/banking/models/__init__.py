"""
뱅킹 세션에서 사용하는 Pydantic 기반 도메인 모델 패키지.
Pydantic-based domain models used by the banking session.
"""

from .model_account import (
    Account,
    Amount,
    ConfirmationNumber,
    SessionID,
    UserCredentials,
)

__all__ = [
    "Account",
    "Amount",
    "ConfirmationNumber",
    "SessionID",
    "UserCredentials",
]
