"""Validation protocols for type checking.

Callable protocols for the handlers a chain dispatches to, plus a generic
validator protocol for type hints.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T", contravariant=True)
V = TypeVar("V")


@runtime_checkable
class SuccessHandler(Protocol[T]):
    """Callback invoked with the wrapped value when validation passes."""

    def __call__(self, value: T, /) -> None: ...


@runtime_checkable
class ErrorHandler(Protocol[T]):
    """Callback invoked with the wrapped value and error message on failure."""

    def __call__(self, value: T, message: str, /) -> None: ...


@runtime_checkable
class ValidatorProtocol(Protocol[V]):
    """Protocol for validation chains.

    Use this for type hints when accepting any validator.
    Generic over V, the type of value being validated.
    """

    @property
    def is_valid(self) -> bool:
        """Whether no error has been recorded."""
        ...

    def validate(self, success_handler: SuccessHandler[V], error_handler: ErrorHandler[V]) -> None:
        """Dispatch to one of the handlers."""
        ...
