"""Validation error container.

Holds the single error a validation chain keeps at any time.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["NO_ERROR_CODE", "ValidationError"]

NO_ERROR_CODE = ""
"""Sentinel error code used when a check or chain was given no code."""


@dataclass(frozen=True)
class ValidationError:
    """A single validation error."""

    code: str
    message: str

    @property
    def has_code(self) -> bool:
        """Check if a real error code (not the sentinel) was supplied."""
        return self.code != NO_ERROR_CODE
