"""
project_core 패키지.

성공/실패를 값으로 다루는 Result 타입과 그 합성 연산자(map, bind, map_error,
bind_error)를 제공합니다.

The `project_core` package.

Provides the Result type (Ok / Err) and its composition operators
(map, bind, map_error, bind_error) used by every fallible operation in the
project.
"""

from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
]
