"""Common helpers for the tracer codebase: sequence access and fluent validation."""

from tracer_common.events import (
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
    ValidationObserver,
)
from tracer_common.list_utils import get_first
from tracer_common.process_log import ProcessEntry, ProcessLog, ProcessLogObserver
from tracer_common.protocols import ErrorHandler, SuccessHandler, ValidatorProtocol
from tracer_common.results import NO_ERROR_CODE, ValidationError
from tracer_common.rich_observers import RichConsoleObserver
from tracer_common.validators import (
    AbstractValidator,
    AcceptableValidator,
    ValidatorOptions,
)

__all__ = [
    # Sequence helpers
    "get_first",
    # Validation chain
    "AbstractValidator",
    "AcceptableValidator",
    "ValidatorOptions",
    "ValidatorProtocol",
    "SuccessHandler",
    "ErrorHandler",
    # Validation results
    "NO_ERROR_CODE",
    "ValidationError",
    # Observer pattern
    "ObservableMixin",
    "ValidationEvent",
    "ValidationEventType",
    "ValidationObserver",
    # Process tracking
    "ProcessEntry",
    "ProcessLog",
    "ProcessLogObserver",
    # Rich observers
    "RichConsoleObserver",
]

__version__ = "0.1.0"
