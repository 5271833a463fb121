"""
성공/실패를 값으로 표현하는 공용 Result 타입과 합성 연산자를 제공합니다.

Shared Result type that represents success or failure as data, together with
the composition operators (map / bind and their error-side counterparts) used
to chain fallible steps without branching at every call site.

    >>> Ok(5).map(lambda x: x * 2)
    Ok(value=10)
    >>> Err("bad input").map(lambda x: x * 2)
    Err(error='bad input')
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal


@dataclass(slots=True, frozen=True)
class Ok[T]:
    """
    성공 결과 값을 담는 래퍼입니다.

    Wrapper type that represents the successful branch of a Result.
    """

    # match Ok(value) 구문에서 위치 인자로 매칭될 필드 정의
    # Define which field is used positionally in `match Ok(value)`
    __match_args__ = ("value",)

    value: T

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def map[U](self, transform: Callable[[T], U]) -> Ok[U]:
        """
        성공 값에 transform 을 적용한 새 Ok 를 반환합니다.

        Return a new Ok holding `transform(value)`.
        """
        return Ok(transform(self.value))

    def bind[U, F](self, transform: Callable[[T], Result[U, F]]) -> Result[U, F]:
        """
        transform 이 돌려준 Result 를 감싸지 않고 그대로 반환합니다.

        Return exactly the Result produced by `transform(value)` (flattened,
        never nested).
        """
        return transform(self.value)

    def success_value(self) -> T:
        return self.value

    def map_error(self, transform: Callable[[Any], object]) -> Ok[T]:
        """
        Ok 에서는 transform 을 호출하지 않고 값을 그대로 전달합니다.

        The transform is never invoked on Ok; the value passes through.
        """
        return Ok(self.value)

    def bind_error(self, transform: Callable[[Any], object]) -> Ok[T]:
        return Ok(self.value)

    def error_value(self) -> None:
        return None


@dataclass(slots=True, frozen=True)
class Err[E]:
    """
    실패(에러) 정보를 담는 래퍼입니다.

    Wrapper type that represents the error branch of a Result.
    """
    # match Err(error) 구문에서 위치 인자로 매칭될 필드 정의
    # Define which field is used positionally in `match Err(error)`
    __match_args__ = ("error",)

    error: E

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def map(self, transform: Callable[[Any], object]) -> Err[E]:
        """
        Err 에서는 transform 을 호출하지 않고 에러를 그대로 전달합니다.

        The transform is never invoked on Err; the error passes through.
        """
        return Err(self.error)

    def bind(self, transform: Callable[[Any], object]) -> Err[E]:
        """
        체인을 단락(short-circuit)시킵니다. 이후 단계는 실행되지 않습니다.

        Short-circuit the chain: no later step runs.
        """
        return Err(self.error)

    def success_value(self) -> None:
        return None

    def map_error[F](self, transform: Callable[[E], F]) -> Err[F]:
        """
        에러 값에 transform 을 적용한 새 Err 를 반환합니다.

        Return a new Err holding `transform(error)`.
        """
        return Err(transform(self.error))

    def bind_error[U, F](self, transform: Callable[[E], Result[U, F]]) -> Result[U, F]:
        """
        에러를 보고 새 Result 로 복구(recover)할 수 있게 합니다.

        Let the caller recover by replacing the failure with whatever Result
        `transform(error)` produces, possibly an Ok.
        """
        return transform(self.error)

    def error_value(self) -> E:
        return self.error


type Result[T, E] = Ok[T] | Err[E]
"""
도메인/서비스 계층에서 사용하는 공용 Result 타입입니다.

Generic Result type used as the shared error/value representation
across domain and service boundaries.

- T: 성공 시 반환되는 값의 타입 (success type)
- E: 실패(에러) 시 반환되는 정보의 타입 (error type)
"""


def is_ok[T, E](result: Result[T, E]) -> bool:
    """
    Result가 Ok 인지 여부를 반환합니다.

    Return True if the given Result is an Ok value.
    """
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> bool:
    """
    Result가 Err 인지 여부를 반환합니다.

    Return True if the given Result is an Err value.
    """
    return isinstance(result, Err)


__all__ = [
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
]
