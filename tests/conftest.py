"""Shared fixtures and Hypothesis strategies for tests."""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import strategies as st

from tracer_common.events import ValidationEvent, ValidationEventType

# -----------------------------------------------------------------------------
# Hypothesis Strategies
# -----------------------------------------------------------------------------

# Strategy for error codes (non-empty, so they never collide with NO_ERROR_CODE)
error_codes = st.text(
    min_size=1,
    max_size=20,
    alphabet=st.characters(categories=("Lu", "Nd")),
)

# Strategy for messages
messages = st.text(min_size=1, max_size=200)

# Strategy for non-null values a chain can wrap
values = st.one_of(
    st.integers(),
    st.text(max_size=50),
    st.booleans(),
    st.lists(st.integers(), max_size=5),
)


# -----------------------------------------------------------------------------
# Test Helpers
# -----------------------------------------------------------------------------


class RecordingObserver:
    """Observer that records all events."""

    def __init__(self) -> None:
        self.events: list[ValidationEvent] = []

    def on_event(self, event: ValidationEvent) -> None:
        self.events.append(event)

    @property
    def event_types(self) -> list[ValidationEventType]:
        return [e.event_type for e in self.events]


class HandlerRecorder:
    """Pair of success/error handlers that remember how they were called."""

    def __init__(self) -> None:
        self.successes: list[Any] = []
        self.errors: list[tuple[Any, str]] = []

    def success(self, value: Any) -> None:
        self.successes.append(value)

    def error(self, value: Any, message: str) -> None:
        self.errors.append((value, message))


@pytest.fixture
def recorder() -> HandlerRecorder:
    """Create a fresh HandlerRecorder."""
    return HandlerRecorder()


@pytest.fixture
def recording_observer() -> RecordingObserver:
    """Create a fresh RecordingObserver."""
    return RecordingObserver()
