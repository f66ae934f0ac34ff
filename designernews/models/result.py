"""Outcome of a data source call: either a value or the reason there is none."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    def __str__(self):
        return f"Success[data={self.value}]"


@dataclass(frozen=True)
class Error:
    exception: Exception

    def __str__(self):
        return f"Error[exception={self.exception}]"


Result = Union[Success[T], Error]
