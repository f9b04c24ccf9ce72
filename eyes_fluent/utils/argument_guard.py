"""Precondition helpers."""

from __future__ import annotations

from typing import Any


class InvalidStateError(RuntimeError):
    """Raised when an object is used before it reached the required state."""


def not_none(value: Any, name: str) -> None:
    if value is None:
        raise ValueError(f"{name} is None")


def greater_than_zero(value: float, name: str) -> None:
    if value is None or value <= 0:
        raise ValueError(f"{name} should be > 0 (got {value})")


def greater_than_or_equal_to_zero(value: float, name: str) -> None:
    if value is None or value < 0:
        raise ValueError(f"{name} should be >= 0 (got {value})")


def is_valid_state(condition: bool, message: str) -> None:
    if not condition:
        raise InvalidStateError(message)
