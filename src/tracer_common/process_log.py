"""Process logging for validation chains.

Provides Pydantic models for an audit trail of checks and outcomes, and an
observer that fills it from chain events.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from tracer_common.events import ValidationEvent, ValidationEventType

__all__ = ["ProcessEntry", "ProcessLog", "ProcessLogObserver"]

EntryType = Literal["passed", "failed", "skipped", "null", "outcome"]

_ENTRY_TYPES: dict[ValidationEventType, EntryType] = {
    ValidationEventType.CHECK_PASSED: "passed",
    ValidationEventType.CHECK_FAILED: "failed",
    ValidationEventType.CHECK_SKIPPED: "skipped",
    ValidationEventType.NULL_VALUE: "null",
    ValidationEventType.VALIDATION_COMPLETED: "outcome",
}


class ProcessEntry(BaseModel):
    """A single audit trail record.

    Attributes:
        entry_type: What happened - a check passed, failed or was skipped,
            the null pre-check fired, or the chain dispatched its outcome.
        check: Name of the chain operation (not_null, on, on_if, validate).
        code: Error code involved, if any.
        message: Error message involved, if any.
        timestamp: ISO format timestamp of when the entry was recorded.
        context: Additional event-specific metadata.
    """

    entry_type: EntryType
    check: str
    code: str | None = None
    message: str | None = None
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())
    context: dict[str, Any] = Field(default_factory=dict)


class ProcessLog(BaseModel):
    """Ordered audit trail of one or more validation chains."""

    entries: list[ProcessEntry] = Field(default_factory=list)

    @property
    def failures(self) -> list[ProcessEntry]:
        """Entries for failed checks and null pre-check errors."""
        return [e for e in self.entries if e.entry_type in ("failed", "null")]


class ProcessLogObserver:
    """Observer recording chain events into a ProcessLog.

    The chain itself keeps only its latest error; attach this observer to
    keep every step.

    Example:
        observer = ProcessLogObserver()
        AcceptableValidator.of(5).with_observer(observer).on(...).validate(s, e)
        rows = observer.audit_log(source="span_ingest")
    """

    def __init__(self, process_log: ProcessLog | None = None) -> None:
        self.process_log = process_log if process_log is not None else ProcessLog()

    def on_event(self, event: ValidationEvent) -> None:
        entry_type = _ENTRY_TYPES.get(event.event_type)
        if entry_type is None:
            return

        data = event.data
        if entry_type == "outcome":
            entry = ProcessEntry(
                entry_type=entry_type,
                check="validate",
                code=data.get("code"),
                message=data.get("message"),
                context={"is_valid": data.get("is_valid")},
            )
        elif entry_type == "null":
            entry = ProcessEntry(
                entry_type=entry_type,
                check="null_value",
                code=data.get("code"),
                message=data.get("message"),
            )
        else:
            context: dict[str, Any] = {}
            if "reason" in data:
                context["reason"] = data["reason"]
            entry = ProcessEntry(
                entry_type=entry_type,
                check=data.get("check", ""),
                code=data.get("code"),
                message=data.get("message"),
                context=context,
            )
        self.process_log.entries.append(entry)

    def audit_log(self, source: str | None = None) -> list[dict[str, Any]]:
        """Export entries as dicts in recording order.

        Args:
            source: Optional source identifier to add to each entry.

        Returns:
            List of plain dicts, one per entry.
        """
        rows: list[dict[str, Any]] = []
        for entry in self.process_log.entries:
            d = entry.model_dump()
            if source:
                d["source"] = source
            rows.append(d)
        return rows

    def clear(self) -> None:
        self.process_log.entries.clear()
