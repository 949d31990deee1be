"""Shared sizing configuration and error types."""

from .config import (
    DAY_PERIOD_HOURS,
    FORMULA_VERSION,
    NIGHT_PERIOD_HOURS,
    SizingConfig,
)
from .errors import InvalidInputError

__all__ = [
    "DAY_PERIOD_HOURS",
    "FORMULA_VERSION",
    "NIGHT_PERIOD_HOURS",
    "SizingConfig",
    "InvalidInputError",
]
