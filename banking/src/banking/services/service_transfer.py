"""
계좌 이체 유즈케이스.

계좌 목록 조회 → 이체 대상 선택 → 이체를 bind 로 이어 붙이고,
어느 단계에서든 실패하면 이후 단계는 실행되지 않는다.

Transfer-funds use case. Account retrieval, account selection and the
transfer itself are chained with `bind`; a failure at any step skips every
later step.
"""

from collections.abc import Sequence
from decimal import Decimal

from project_core import Err, Ok

from banking.errors import BankingError, BankingErrorCode, BankingResult, format_banking_error
from banking.models import Account, Amount, ConfirmationNumber, UserCredentials
from banking.services.service_remote import RemoteServices, RemoteServicesWithSessionContext


def select_transfer_accounts(
    accounts: Sequence[Account],
    from_index: int = 0,
    to_index: int = 1,
) -> BankingResult[tuple[Account, Account]]:
    """
    계좌 목록에서 출금/입금 계좌를 고른다.
    Pick the source and destination accounts from the account list.
    """
    for index in (from_index, to_index):
        if not 0 <= index < len(accounts):
            return Err(
                BankingError(
                    code=BankingErrorCode.ACCOUNT_NOT_FOUND,
                    message=f"no account at index {index} (have {len(accounts)} accounts).",
                )
            )
    return Ok((accounts[from_index], accounts[to_index]))


def transfer_funds(
    remote_services: RemoteServices,
    amount: Amount,
    from_index: int = 0,
    to_index: int = 1,
) -> BankingResult[ConfirmationNumber]:
    """
    계좌 목록 조회부터 이체까지 한 번에 수행하고 확인 번호를 돌려준다.
    Run the whole retrieve-select-transfer chain and return the confirmation number.
    """
    return (
        remote_services.retrieve_account_list()
        .bind(lambda accounts: select_transfer_accounts(accounts, from_index, to_index))
        .bind(lambda pair: remote_services.transfer_funds(amount, pair[0], pair[1]))
    )


def _report_success(confirmation_number: ConfirmationNumber) -> None:
    print(f"[INFO] Successfully transferred funds. Confirmation number: {confirmation_number}")


def _report_failure(error: BankingError) -> None:
    print(f"[ERROR] Could not transfer funds. Got error: {format_banking_error(error)}")


def transfer_funds_use_case(
    remote_services: RemoteServices,
    amount: Amount = Decimal("50"),
    from_index: int = 0,
    to_index: int = 1,
) -> None:
    """
    이체 체인의 최종 소비자. 결과를 출력만 하고 아무것도 반환하지 않는다.
    Terminal consumer of the transfer chain: prints the outcome, returns nothing.
    """
    (
        transfer_funds(remote_services, amount, from_index, to_index)
        .map(_report_success)
        .map_error(_report_failure)
    )


def remote_services_invocation_error_handler(error: BankingError) -> None:
    """
    로그인 등 원격 서비스 호출 자체가 실패했을 때 출력한다.
    Print a failure of the remote services invocation itself (e.g. login).
    """
    print(f"[ERROR] 😟: {format_banking_error(error)}")


def run_session(
    credentials: UserCredentials,
    amount: Amount = Decimal("50"),
    from_index: int = 0,
    to_index: int = 1,
    *,
    simulate_network_down: bool = False,
) -> BankingResult[ConfirmationNumber]:
    """
    로그인 → 이체 유즈케이스를 실행하고, 호출자가 종료 코드를 정할 수 있도록
    최종 Result 를 돌려준다.

    Log in and run the transfer, printing each outcome along the way, and
    return the final Result so callers (the CLI) can pick an exit status.
    """
    login_result = RemoteServicesWithSessionContext.login(
        credentials,
        simulate_network_down=simulate_network_down,
    )

    match login_result:
        case Ok(value=remote_services):
            pass
        case Err(error=error):
            remote_services_invocation_error_handler(error)
            return Err(error)
        case _:
            return Err(
                BankingError(
                    code=BankingErrorCode.INTERNAL_ERROR,
                    message="Unexpected result type from login.",
                )
            )

    result = transfer_funds(remote_services, amount, from_index, to_index)
    result.map(_report_success).map_error(_report_failure)
    return result


def start_session(credentials: UserCredentials, amount: Amount = Decimal("50")) -> None:
    """
    로그인 결과에 유즈케이스와 에러 핸들러를 바로 연결한다.
    Wire the login result straight into the use case and the error handler.
    """
    (
        RemoteServicesWithSessionContext.login(credentials)
        .map(lambda remote_services: transfer_funds_use_case(remote_services, amount))
        .map_error(remote_services_invocation_error_handler)
    )
