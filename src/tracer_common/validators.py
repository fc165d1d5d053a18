"""Fluent validation chain over a single value.

Provides AbstractValidator, which holds the value and the error state, and
AcceptableValidator, the concrete chain that runs predicate checks and
dispatches to a success or error handler.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic_core import PydanticCustomError

from tracer_common.events import (
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
    ValidationObserver,
)
from tracer_common.protocols import ErrorHandler, SuccessHandler
from tracer_common.results import NO_ERROR_CODE, ValidationError

__all__ = [
    "NULL_ERROR_CODE_MESSAGE",
    "NULL_VALUE_MESSAGE",
    "AbstractValidator",
    "AcceptableValidator",
    "ValidatorOptions",
]

T = TypeVar("T")

NULL_ERROR_CODE_MESSAGE = "The null value error code must not be None."
NULL_VALUE_MESSAGE = "The value must not be None."


class ValidatorOptions(BaseModel):
    """Per-chain configuration.

    Attributes:
        null_value_code: Error code recorded when the wrapped value is None.
        fast_validate: If True, the first failing check wins and later
            checks become no-ops.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    null_value_code: str = NO_ERROR_CODE
    fast_validate: bool = False


class AbstractValidator(ObservableMixin, ABC, Generic[T]):
    """Abstract base class for validation chains.

    Holds the wrapped value, the chain options and the single error the chain
    keeps. Subclasses add the checks and the terminal dispatch.

    The error state only moves forward: a failing check overwrites it and
    nothing clears it. With fast_validate enabled the first recorded error is
    kept and every later check is skipped.
    """

    def __init__(self, value: T, options: ValidatorOptions) -> None:
        self._value = value
        self._options = options
        self._error: ValidationError | None = None
        self._check_value()

    @property
    def value(self) -> T:
        """The wrapped value."""
        return self._value

    @property
    def options(self) -> ValidatorOptions:
        return self._options

    @property
    def fast_validate(self) -> bool:
        return self._options.fast_validate

    @property
    def null_value_code(self) -> str:
        return self._options.null_value_code

    @property
    def error(self) -> ValidationError | None:
        """The currently recorded error, if any."""
        return self._error

    @property
    def error_code(self) -> str | None:
        return self._error.code if self._error is not None else None

    @property
    def error_message(self) -> str | None:
        return self._error.message if self._error is not None else None

    @property
    def is_valid(self) -> bool:
        """Check if no error has been recorded."""
        return self._error is None

    @classmethod
    def _create_error(
        cls,
        error_type: str,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> Exception:
        """Create an error for misuse of the chain API.

        Override in subclasses for custom error types. Default implementation
        returns PydanticCustomError.

        Args:
            error_type: Type/category of the error.
            message: Error message describing the issue.
            context: Additional context dict (optional).

        Returns:
            Exception instance to be raised.
        """
        return PydanticCustomError(error_type, message, context or {})

    def _keep_validating(self) -> bool:
        """Check if the next check body may run.

        Checks never run against a None value. Otherwise they run unless
        fast_validate is on and an error is already recorded.
        """
        if self._value is None:
            return False
        return not self._options.fast_validate or self._error is None

    def _check_value(self) -> None:
        """Record the null error if the wrapped value is None."""
        if self._value is not None:
            return
        if self._options.fast_validate and self._error is not None:
            return

        code = self._options.null_value_code
        message = code if code != NO_ERROR_CODE else NULL_VALUE_MESSAGE
        self._error = ValidationError(code=code, message=message)
        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.NULL_VALUE,
                source=self,
                data={"code": code, "message": message},
            )
        )

    def _set_error(self, check: str, error_code: str, error_msg: str) -> None:
        """Record a failed check, replacing any earlier error."""
        replaced = self._error
        self._error = ValidationError(code=error_code, message=error_msg)
        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.CHECK_FAILED,
                source=self,
                data={
                    "check": check,
                    "code": error_code,
                    "message": error_msg,
                    "replaced": replaced,
                },
            )
        )

    def _mark_passed(self, check: str) -> None:
        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.CHECK_PASSED,
                source=self,
                data={"check": check},
            )
        )

    def _mark_skipped(self, check: str, reason: str) -> None:
        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.CHECK_SKIPPED,
                source=self,
                data={"check": check, "reason": reason},
            )
        )

    def _skip_reason(self) -> str:
        return "null_value" if self._value is None else "fast_validate"

    @abstractmethod
    def validate(self, success_handler: SuccessHandler[T], error_handler: ErrorHandler[T]) -> None:
        """Dispatch to the success or error handler.

        Args:
            success_handler: Called with the value when no error is recorded.
            error_handler: Called with the value and the error message otherwise.
        """
        ...

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(value={self._value!r}, "
            f"fast_validate={self._options.fast_validate}, error={self._error!r})"
        )


class AcceptableValidator(AbstractValidator[T], Generic[T]):
    """Validation chain that ends by calling a success or error handler.

    Handlers return nothing; all output of the chain flows through their
    side effects. A chain is meant to be consumed by a single validate()
    call.

    Example:
        from tracer_common import AcceptableValidator

        (
            AcceptableValidator.of(span, "E_SPAN_NULL", fast_validate=True)
            .not_null(lambda s: s.trace_id, "trace id is required", "E_TRACE_ID")
            .on(lambda s: s.duration_ms >= 0, "duration cannot be negative")
            .on_if(
                lambda s: s.parent_id != s.span_id,
                "span cannot be its own parent",
                lambda s: s.parent_id is not None,
            )
            .validate(store_span, lambda s, msg: rejected.append((s, msg)))
        )
    """

    @classmethod
    def of(
        cls,
        value: T,
        null_value_code: str | None = NO_ERROR_CODE,
        fast_validate: bool = False,
    ) -> AcceptableValidator[T]:
        """Create a chain wrapping a value.

        Args:
            value: Value to validate. May be None.
            null_value_code: Error code recorded when the value is None.
                Omit it to fall back to NO_ERROR_CODE.
            fast_validate: If True, stop checking after the first failure.

        Returns:
            A new chain with no error recorded.

        Raises:
            PydanticCustomError: If null_value_code is None.
        """
        if null_value_code is None:
            raise cls._create_error(
                error_type="null_error_code",
                message=NULL_ERROR_CODE_MESSAGE,
                context={"argument": "null_value_code"},
            )
        options = ValidatorOptions(null_value_code=null_value_code, fast_validate=fast_validate)
        return cls(value, options)

    def with_observer(self, observer: ValidationObserver) -> AcceptableValidator[T]:
        """Attach an observer.

        Returns:
            Self for method chaining.
        """
        self.add_observer(observer)
        return self

    def not_null(
        self,
        mapper: Callable[[T], Any],
        error_msg: str,
        error_code: str = NO_ERROR_CODE,
    ) -> AcceptableValidator[T]:
        """Fail when the mapped value is None.

        Args:
            mapper: Function extracting the value to test from the wrapped value.
            error_msg: Message recorded on failure.
            error_code: Code recorded on failure.

        Returns:
            Self for method chaining.
        """
        self._check_value()
        if not self._keep_validating():
            self._mark_skipped("not_null", self._skip_reason())
        elif mapper(self._value) is None:
            self._set_error("not_null", error_code, error_msg)
        else:
            self._mark_passed("not_null")
        return self

    def on(
        self,
        predicate: Callable[[T], bool],
        error_msg: str,
        error_code: str = NO_ERROR_CODE,
    ) -> AcceptableValidator[T]:
        """Fail when the predicate does not hold for the wrapped value.

        Args:
            predicate: Check that must return True to pass.
            error_msg: Message recorded on failure.
            error_code: Code recorded on failure.

        Returns:
            Self for method chaining.
        """
        self._check_value()
        if not self._keep_validating():
            self._mark_skipped("on", self._skip_reason())
        elif not predicate(self._value):
            self._set_error("on", error_code, error_msg)
        else:
            self._mark_passed("on")
        return self

    def on_if(
        self,
        predicate: Callable[[T], bool],
        error_msg: str,
        condition: Callable[[T], bool],
        error_code: str = NO_ERROR_CODE,
    ) -> AcceptableValidator[T]:
        """Like on(), but only checked when the condition holds.

        A false condition skips the check without touching the error state.

        Args:
            predicate: Check that must return True to pass.
            error_msg: Message recorded on failure.
            condition: Gate deciding whether the predicate is evaluated.
            error_code: Code recorded on failure.

        Returns:
            Self for method chaining.
        """
        self._check_value()
        if not self._keep_validating():
            self._mark_skipped("on_if", self._skip_reason())
        elif not condition(self._value):
            self._mark_skipped("on_if", "condition")
        elif not predicate(self._value):
            self._set_error("on_if", error_code, error_msg)
        else:
            self._mark_passed("on_if")
        return self

    def validate(self, success_handler: SuccessHandler[T], error_handler: ErrorHandler[T]) -> None:
        """Run the final null check and dispatch to one handler.

        Args:
            success_handler: Called with the value when no error is recorded.
            error_handler: Called with the value and the error message otherwise.

        Raises:
            PydanticCustomError: If either handler is None.

        Note:
            Emits a VALIDATION_COMPLETED event before the chosen handler runs.
        """
        if success_handler is None:
            raise self._create_error(
                error_type="null_handler",
                message="The success handler must not be None.",
                context={"argument": "success_handler"},
            )
        if error_handler is None:
            raise self._create_error(
                error_type="null_handler",
                message="The error handler must not be None.",
                context={"argument": "error_handler"},
            )

        self._check_value()
        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.VALIDATION_COMPLETED,
                source=self,
                data={
                    "is_valid": self.is_valid,
                    "code": self.error_code,
                    "message": self.error_message,
                },
            )
        )

        if self._error is None:
            success_handler(self._value)
        else:
            error_handler(self._value, self._error.message)
