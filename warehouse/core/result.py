"""Result objects for expected failures (duplicate key, not found, bad quantity).

A repository call returns either `Success(value)` or `Failure(error)`; the
caller checks `is_success` instead of catching exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from warehouse.core.exceptions import AppException

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def error(self) -> None:
        return None

    def flat_map(self, func: Callable[[T], "Result[U]"]) -> "Result[U]":
        return func(self.value)


@dataclass(frozen=True)
class Failure:
    error: AppException

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def code(self) -> str:
        return self.error.code

    def flat_map(self, func: Callable) -> "Failure":
        return self


Result = Union[Success[T], Failure]
