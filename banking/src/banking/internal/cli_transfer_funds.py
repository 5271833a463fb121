"""
이 모듈은 모의 원격 서비스에 로그인해 계좌 이체를 수행하고
결과를 터미널에 출력하는 CLI 유틸입니다.

This module provides a CLI utility that logs in to the mock remote services,
runs a funds transfer and prints the outcome on the terminal.
"""

import argparse
import sys
from decimal import Decimal, InvalidOperation
from typing import Sequence

from project_core import Err, Ok

from banking.config import get_settings
from banking.models import UserCredentials
from banking.services.service_transfer import run_session


def _parse_amount(value: str) -> Decimal:
    """명령행 금액 문자열을 Decimal 로 변환한다.
    Convert an amount string from the command line into a Decimal.
    """
    try:
        amount = Decimal(value)
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(f"invalid amount: {value!r}") from exc

    # NaN / Infinity 는 비교 연산이 불가능하거나 의미가 없다.
    # NaN and Infinity cannot be ordered meaningfully against balances.
    if not amount.is_finite():
        raise argparse.ArgumentTypeError(f"amount must be finite: {value!r}")
    return amount


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """명령행 인자를 파싱한다.
    Parse command-line arguments.
    """
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description=(
            "모의 원격 서비스에 로그인해 첫 번째 계좌에서 두 번째 계좌로 이체합니다.\n"
            "Log in to the mock remote services and transfer funds between accounts."
        ),
    )

    parser.add_argument(
        "--user-id",
        type=str,
        default=settings.default_user_id,
        help=(
            "로그인 사용자 ID (기본: BANKING_DEFAULT_USER_ID).\n"
            "User ID to log in with (default: BANKING_DEFAULT_USER_ID)."
        ),
    )
    parser.add_argument(
        "--password",
        type=str,
        default=settings.default_password,
        help="로그인 비밀번호 / Password to log in with.",
    )
    parser.add_argument(
        "--amount",
        type=_parse_amount,
        default=settings.default_transfer_amount,
        help=(
            "이체 금액 (기본: BANKING_DEFAULT_TRANSFER_AMOUNT 또는 50).\n"
            "Amount to transfer (default: BANKING_DEFAULT_TRANSFER_AMOUNT or 50)."
        ),
    )
    parser.add_argument(
        "--from-index",
        type=int,
        default=0,
        help="출금 계좌 인덱스 (기본: 0) / Index of the source account (default: 0).",
    )
    parser.add_argument(
        "--to-index",
        type=int,
        default=1,
        help="입금 계좌 인덱스 (기본: 1) / Index of the destination account (default: 1).",
    )
    parser.add_argument(
        "--simulate-network-down",
        action=argparse.BooleanOptionalAction,
        default=settings.simulate_network_down,
        help=(
            "계좌 목록 조회 시 네트워크 장애를 흉내냅니다.\n"
            "Simulate a network outage when retrieving the account list."
        ),
    )

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 엔트리 포인트. 성공하면 0, 실패하면 1을 반환한다.
    CLI entry point. Returns 0 on success and 1 on failure.
    """
    args = parse_args(argv)
    credentials = UserCredentials(user_id=args.user_id, password=args.password)

    print(f"[INFO] Transferring {args.amount} as user: {credentials.user_id}")
    result = run_session(
        credentials,
        args.amount,
        args.from_index,
        args.to_index,
        simulate_network_down=args.simulate_network_down,
    )

    match result:
        case Ok():
            return 0
        case Err():
            return 1


if __name__ == "__main__":
    sys.exit(main())
