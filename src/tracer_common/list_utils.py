"""Helpers for working with sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

__all__ = ["get_first"]

T = TypeVar("T")


def get_first(sequence: Sequence[T] | None) -> T | None:
    """Return the first element of a sequence.

    Args:
        sequence: Source sequence, may be None.

    Returns:
        The element at index 0, or None if the sequence is None or empty.
    """
    if sequence is None or len(sequence) == 0:
        return None
    return sequence[0]
