"""Exceptions raised by the sizing engine."""

from __future__ import annotations

import numbers
from decimal import Decimal
from typing import Any


class InvalidInputError(ValueError):
    """A sizing parameter lies outside its documented domain.

    Parameters
    ----------
    field : str
        Name of the offending parameter (e.g. ``"power_factor"``).
    value : Any
        The rejected value.
    constraint : str
        Human-readable domain, e.g. ``"in (0, 1]"`` or ``"> 0"``.
    """

    def __init__(self, field: str, value: Any, constraint: str) -> None:
        self.field = field
        self.value = value
        self.constraint = constraint
        super().__init__(f"{field} must be {constraint}, got {value!r}")


def _as_real(field: str, value: Any) -> float:
    # numpy scalars, Decimal and Fraction are accepted; bool is not
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        raise InvalidInputError(field, value, "a real number")
    return float(value)


def require_non_negative(field: str, value: float) -> float:
    # NaN fails every comparison, so it is rejected here too
    number = _as_real(field, value)
    if not number >= 0:
        raise InvalidInputError(field, value, ">= 0")
    return number


def require_positive(field: str, value: float) -> float:
    number = _as_real(field, value)
    if not number > 0:
        raise InvalidInputError(field, value, "> 0")
    return number


def require_fraction(field: str, value: float) -> float:
    """Accept values in the half-open interval (0, 1]."""
    number = _as_real(field, value)
    if not 0 < number <= 1:
        raise InvalidInputError(field, value, "in (0, 1]")
    return number


def require_at_least_one(field: str, value: float) -> float:
    number = _as_real(field, value)
    if not number >= 1:
        raise InvalidInputError(field, value, ">= 1")
    return number
