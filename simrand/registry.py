"""
Registered-function table.

An append-only list of zero-argument callbacks addressed by integer handle. Handles stay
valid for the lifetime of the table. Every entry records the type it promises to return,
and `call()` checks both the promise and the actual result against what the caller expects.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, Type, TypeVar

from .errors import TypeMismatch, UnknownFunction

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class RegisteredFunction:
    func: Callable[[], Any]
    result_type: type


class FunctionRegistry:
    def __init__(self):
        self._entries: list[RegisteredFunction] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def register(self, func: Callable[[], Any], result_type: type = object) -> int:
        """Append `func` and return its handle."""
        if not callable(func):
            raise TypeError(f"expected a callable, got {type(func).__name__}")
        with self._lock:
            self._entries.append(RegisteredFunction(func=func, result_type=result_type))
            return len(self._entries) - 1

    def call(self, handle: int, expected_type: Type[T] = object) -> T:
        """
        Invoke the function at `handle`, checking its result is an `expected_type`.

        Both the recorded result type and `expected_type` must be plain classes; anything
        `issubclass()` cannot compare (e.g. `list[int]`) is a TypeMismatch.
        """
        if not isinstance(handle, int) or not 0 <= handle < len(self._entries):
            raise UnknownFunction(f"no registered function with handle {handle!r}")
        entry = self._entries[handle]

        try:
            related = issubclass(entry.result_type, expected_type) or issubclass(expected_type, entry.result_type)
        except TypeError as e:
            raise TypeMismatch(
                f"function {handle} result type {entry.result_type!r} cannot be checked against {expected_type!r}"
            ) from e
        if not related:
            raise TypeMismatch(
                f"function {handle} returns {entry.result_type.__name__}, not {expected_type.__name__}"
            )
        result = entry.func()

        if not isinstance(result, expected_type):
            raise TypeMismatch(
                f"function {handle} returned {type(result).__name__}, expected {expected_type.__name__}"
            )
        return result
