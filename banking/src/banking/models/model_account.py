"""
뱅킹 세션의 자격 증명/계좌 모델을 정의합니다.

Defines credential and account models for the banking session.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


type SessionID = str
type ConfirmationNumber = str
type Amount = Decimal


class UserCredentials(BaseModel):
    """
    로그인에 사용하는 사용자 자격 증명입니다.

    User credentials used to log in.
    """

    model_config = ConfigDict(frozen=True)

    user_id: Annotated[str, Field(
        description="사용자 ID / User ID.",
    )]

    password: Annotated[str, Field(
        repr=False,
        description="비밀번호 / Password.",
    )]


class Account(BaseModel):
    """
    원격 서비스가 돌려주는 단일 계좌입니다.

    A single account as returned by the remote services.
    """

    model_config = ConfigDict(frozen=True)

    account_id: Annotated[str, Field(
        description="계좌 ID / Account ID.",
    )]

    balance: Annotated[Decimal, Field(
        description=(
            "현재 잔액. 이체 후에도 모의 서비스에서는 갱신되지 않습니다.\n"
            "Current balance. The mock service never persists updates."
        ),
    )]

    def __str__(self) -> str:
        return f"ID: {self.account_id}, balance: {self.balance}"
