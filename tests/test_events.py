"""Tests for observer pattern and events."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from tracer_common import (
    AcceptableValidator,
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
    ValidationObserver,
)

from .conftest import RecordingObserver

# =============================================================================
# Test Observers
# =============================================================================


class CountingObserver:
    """Observer that counts events by type."""

    def __init__(self) -> None:
        self.counts: dict[ValidationEventType, int] = {}

    def on_event(self, event: ValidationEvent) -> None:
        if event.event_type not in self.counts:
            self.counts[event.event_type] = 0
        self.counts[event.event_type] += 1


class Emitter(ObservableMixin):
    """Bare observable without an __init__ of its own."""


# =============================================================================
# ValidationEventType Tests
# =============================================================================


class TestValidationEventType:
    """Tests for ValidationEventType enum."""

    def test_event_types_are_distinct(self) -> None:
        types = list(ValidationEventType)

        assert len(types) == len({t.value for t in types})

    def test_expected_members(self) -> None:
        assert {t.name for t in ValidationEventType} == {
            "CHECK_PASSED",
            "CHECK_FAILED",
            "CHECK_SKIPPED",
            "NULL_VALUE",
            "VALIDATION_COMPLETED",
        }


# =============================================================================
# ValidationEvent Tests
# =============================================================================


class TestValidationEvent:
    """Tests for ValidationEvent dataclass."""

    def test_default_data(self) -> None:
        event = ValidationEvent(event_type=ValidationEventType.CHECK_PASSED, source=None)

        assert event.data == {}

    def test_default_data_not_shared(self) -> None:
        first = ValidationEvent(event_type=ValidationEventType.CHECK_PASSED, source=None)
        second = ValidationEvent(event_type=ValidationEventType.CHECK_PASSED, source=None)

        first.data["check"] = "on"

        assert second.data == {}


# =============================================================================
# ObservableMixin Tests
# =============================================================================


class TestObservableMixin:
    """Tests for ObservableMixin."""

    def test_recording_observer_matches_protocol(self) -> None:
        assert isinstance(RecordingObserver(), ValidationObserver)

    def test_add_observer_once(self) -> None:
        emitter = Emitter()
        observer = RecordingObserver()

        emitter.add_observer(observer)
        emitter.add_observer(observer)

        assert emitter.observers == [observer]

    def test_remove_observer(self) -> None:
        emitter = Emitter()
        observer = RecordingObserver()
        emitter.add_observer(observer)

        emitter.remove_observer(observer)

        assert emitter.observers == []

    def test_remove_unknown_observer_is_noop(self) -> None:
        emitter = Emitter()

        emitter.remove_observer(RecordingObserver())

        assert emitter.observers == []

    def test_observers_returns_copy(self) -> None:
        emitter = Emitter()
        emitter.add_observer(RecordingObserver())

        emitter.observers.clear()

        assert len(emitter.observers) == 1

    def test_clear_observers(self) -> None:
        emitter = Emitter()
        emitter.add_observer(RecordingObserver())
        emitter.add_observer(CountingObserver())

        emitter.clear_observers()

        assert emitter.observers == []

    def test_notify_reaches_all_observers(self) -> None:
        emitter = Emitter()
        first, second = RecordingObserver(), RecordingObserver()
        emitter.add_observer(first)
        emitter.add_observer(second)
        event = ValidationEvent(event_type=ValidationEventType.CHECK_FAILED, source=emitter)

        emitter.notify(event)

        assert first.events == [event]
        assert second.events == [event]

    def test_removed_observer_not_notified(self) -> None:
        chain = AcceptableValidator.of(-1)
        observer = RecordingObserver()
        chain.add_observer(observer)
        chain.remove_observer(observer)

        chain.on(lambda x: x > 0, "must be positive")

        assert observer.events == []


class TestObserverProperties:
    """Property-based tests for chain event emission."""

    @given(results=st.lists(st.booleans(), max_size=20))
    @settings(max_examples=50)
    def test_one_check_event_per_operation(self, results: list[bool]) -> None:
        counter = CountingObserver()
        chain = AcceptableValidator.of(1).with_observer(counter)

        for result in results:
            chain.on(lambda x, r=result: r, "failed")
        chain.validate(lambda v: None, lambda v, m: None)

        check_events = sum(
            counter.counts.get(t, 0)
            for t in (
                ValidationEventType.CHECK_PASSED,
                ValidationEventType.CHECK_FAILED,
                ValidationEventType.CHECK_SKIPPED,
            )
        )
        assert check_events == len(results)
        assert counter.counts.get(ValidationEventType.CHECK_FAILED, 0) == results.count(False)
        assert counter.counts[ValidationEventType.VALIDATION_COMPLETED] == 1
