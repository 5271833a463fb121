from decimal import Decimal
from functools import lru_cache
from typing import Final

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_TITLE_DEFAULT: Final[str] = "Banking Session Playground"
DEFAULT_USER_ID: Final[str] = "myUserID"
DEFAULT_PASSWORD: Final[str] = "myPassword"
DEFAULT_TRANSFER_AMOUNT: Final[Decimal] = Decimal("50")


class Settings(BaseSettings):
    """
    뱅킹 세션 전역 설정.
    Global settings for the banking session.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BANKING_",
        extra="ignore",
    )

    app_title: str = APP_TITLE_DEFAULT

    environment: str = Field(
        default="local",
        description=(
            "실행 환경(local/dev/prod 등) / "
            "Runtime environment (local/dev/prod, etc.)."
        ),
    )
    debug: bool = Field(
        default=False,
        description="디버그 모드 활성화 여부 / Whether to enable debug mode.",
    )

    default_user_id: str = Field(
        default=DEFAULT_USER_ID,
        description="CLI 기본 사용자 ID / Default user ID for the CLI.",
    )
    default_password: str = Field(
        default=DEFAULT_PASSWORD,
        description="CLI 기본 비밀번호 / Default password for the CLI.",
    )
    default_transfer_amount: Decimal = Field(
        default=DEFAULT_TRANSFER_AMOUNT,
        description="기본 이체 금액 / Default amount to transfer.",
    )
    simulate_network_down: bool = Field(
        default=False,
        description=(
            "계좌 목록 조회 시 네트워크 장애를 흉내낼지 여부.\n"
            "Whether account list retrieval should simulate a network outage."
        ),
    )


@lru_cache
def get_settings() -> Settings:
    """
    환경 변수 및 .env 파일에서 설정을 로드한다.
    Load settings from environment variables and .env file (cached).
    """
    return Settings()
