"""
원격 뱅킹 서비스 포트와 세션 컨텍스트를 품은 모의 구현을 제공합니다.

Provides the remote banking services port and a mock implementation that
carries the session context baked in at login. Nothing here performs real
I/O; it stands in for a network or persistence layer.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Final, Protocol, Self
from uuid import uuid4

from project_core import Err, Ok

from banking.errors import BankingError, BankingErrorCode, BankingResult
from banking.models import Account, Amount, ConfirmationNumber, SessionID, UserCredentials


# 모의 서비스가 항상 돌려주는 계좌 목록 / Fixed account list served by the mock
_MOCK_ACCOUNTS: Final[tuple[Account, ...]] = (
    Account(account_id="1", balance=Decimal("50.00")),
    Account(account_id="2", balance=Decimal("2730.00")),
)


class RemoteServices(Protocol):
    """
    로그인 이후 세션이 "구워진" 원격 서비스 기능 집합.
    Capability set of remote services with the session baked in after login.
    """

    @classmethod
    def login(cls, credentials: UserCredentials) -> BankingResult[Self]: ...

    def retrieve_account_list(self) -> BankingResult[list[Account]]: ...

    def transfer_funds(
        self,
        amount: Amount,
        from_account: Account,
        to_account: Account,
    ) -> BankingResult[ConfirmationNumber]: ...


def _retrieve_session_id(credentials: UserCredentials) -> BankingResult[SessionID]:
    """
    자격 증명으로 세션 ID 를 발급받는다(모의).
    Obtain a session ID for the given credentials (simulated).
    """
    if not credentials.user_id or not credentials.password:
        return Err(
            BankingError(
                code=BankingErrorCode.INVALID_CREDENTIALS,
                message="user id and password must not be empty.",
            )
        )
    return Ok(str(uuid4()))


@dataclass(slots=True, frozen=True)
class RemoteServicesWithSessionContext:
    """
    세션 ID 를 보관하는 RemoteServices 의 유일한 모의 구현.
    The single mock RemoteServices implementation, holding the session ID.
    """

    session_id: SessionID
    simulate_network_down: bool = False

    @classmethod
    def login(
        cls,
        credentials: UserCredentials,
        *,
        simulate_network_down: bool = False,
    ) -> BankingResult["RemoteServicesWithSessionContext"]:
        """
        로그인에 성공하면 세션이 담긴 서비스 핸들을 돌려준다.
        Log in and return a service handle with the session baked in.
        """
        return _retrieve_session_id(credentials).map(
            lambda session_id: cls(
                session_id=session_id,
                simulate_network_down=simulate_network_down,
            )
        )

    def retrieve_account_list(self) -> BankingResult[list[Account]]:
        if self.simulate_network_down:
            return Err(
                BankingError(
                    code=BankingErrorCode.NETWORK_UNAVAILABLE,
                    message="Network down. Could not retrieve accounts",
                )
            )

        accounts = list(_MOCK_ACCOUNTS)
        listing = "; ".join(str(account) for account in accounts)
        print(f"[INFO] I'm sessionID: {self.session_id}. Retrieved account list: [{listing}]")
        return Ok(accounts)

    def transfer_funds(
        self,
        amount: Amount,
        from_account: Account,
        to_account: Account,
    ) -> BankingResult[ConfirmationNumber]:
        """
        잔액을 검사한 뒤 이체를 흉내내고 확인 번호를 발급한다.
        잔액은 저장되지 않는다.

        Check the balance, simulate the transfer and issue a confirmation
        number. Balances are not persisted.
        """
        if not amount.is_finite() or amount <= 0:
            return Err(
                BankingError(
                    code=BankingErrorCode.INVALID_AMOUNT,
                    message=f"amount to withdraw must be a positive number, got: {amount}",
                )
            )

        if amount > from_account.balance:
            return Err(
                BankingError(
                    code=BankingErrorCode.INSUFFICIENT_FUNDS,
                    message=(
                        f"amount to withdraw: {amount} is greater than "
                        f"the from account balance: {from_account.balance}"
                    ),
                )
            )

        print(
            f"[INFO] I'm sessionID: {self.session_id}. "
            f"Transferred {amount} from account:{from_account.account_id} "
            f"to account:{to_account.account_id}. "
            f"New balances fromAccount:{from_account.balance - amount} "
            f"toAccount:{to_account.balance + amount}"
        )
        return Ok(str(uuid4()))
