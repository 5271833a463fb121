from dataclasses import dataclass
from enum import Enum

from project_core import Result


class BankingErrorCode(str, Enum):
    """
    뱅킹 세션(로그인/계좌 조회/이체)에서 발생하는 에러 코드.
    Error codes for the banking session (login / account list / transfer).
    """

    INVALID_CREDENTIALS = "invalid_credentials"
    NETWORK_UNAVAILABLE = "network_unavailable"
    ACCOUNT_NOT_FOUND = "account_not_found"
    INVALID_AMOUNT = "invalid_amount"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    INTERNAL_ERROR = "internal_error"


@dataclass(slots=True, frozen=True)
class BankingError:
    """
    뱅킹 세션 도메인 에러 표현.
    Domain error representation for the banking session.
    """

    code: BankingErrorCode
    message: str

    def __str__(self) -> str:
        return self.message


type BankingResult[T] = Result[T, BankingError]


def format_banking_error(error: BankingError) -> str:
    """
    BankingError 를 터미널 출력용 문자열로 변환한다.
    Render a BankingError as a terminal-friendly message.
    """
    match error.code:
        case BankingErrorCode.INVALID_CREDENTIALS:
            return f"Login failed: {error.message}"
        case BankingErrorCode.NETWORK_UNAVAILABLE:
            return f"Service unavailable: {error.message}"
        case BankingErrorCode.ACCOUNT_NOT_FOUND | BankingErrorCode.INVALID_AMOUNT:
            return f"Invalid request: {error.message}"
        case BankingErrorCode.INSUFFICIENT_FUNDS:
            return f"Transfer rejected: {error.message}"
        case _:
            # INTERNAL_ERROR 또는 알 수 없는 코드
            # INTERNAL_ERROR or unknown error code
            return f"Internal error: {error.message}"
