"""
Household load aggregation.

Reduces a list of appliances to the three quantities the sizers need:

- instantaneous load of appliances that run during the day (inverter sizing),
- energy drawn during the day period (07:00-18:00),
- energy drawn during the night period (18:00-07:00, battery sizing).

The aggregator is total: malformed entries (missing or negative power,
negative quantity or hours) contribute nothing instead of raising.  Deciding
whether an appliance is usable belongs to the caller.
"""

from __future__ import annotations

import numbers
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

import numpy as np
from numpy.typing import NDArray


@dataclass
class Appliance:
    """One appliance line as entered by the user.

    Parameters
    ----------
    power_watts : float or None
        Rated power draw of a single unit (W).  ``None`` means unknown.
    quantity : float
        Number of identical units.
    day_hours : float
        Hours of operation within the day period.
    night_hours : float
        Hours of operation within the night period.
    name : str
        Display label, not used by the formulas.
    """

    power_watts: float | None
    quantity: float = 1
    day_hours: float = 0.0
    night_hours: float = 0.0
    name: str = ""

    @property
    def instantaneous_load_w(self) -> float:
        return (self.power_watts or 0.0) * self.quantity

    @property
    def daily_energy_wh(self) -> float:
        return self.instantaneous_load_w * (self.day_hours + self.night_hours)


@dataclass(frozen=True)
class LoadSummary:
    """Aggregate household load."""

    total_instantaneous_load_w: float
    day_energy_wh: float
    night_energy_wh: float

    @property
    def daily_energy_wh(self) -> float:
        return self.day_energy_wh + self.night_energy_wh

    @property
    def daily_energy_kwh(self) -> float:
        return self.daily_energy_wh / 1000.0

    def to_dict(self) -> dict[str, float]:
        return {
            "total_instantaneous_load_w": self.total_instantaneous_load_w,
            "day_energy_wh": self.day_energy_wh,
            "night_energy_wh": self.night_energy_wh,
            "daily_energy_wh": self.daily_energy_wh,
        }


def _as_float(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        return np.nan
    return float(value)


def _column(values: list[object]) -> NDArray[np.float64]:
    # Missing or non-numeric fields become NaN and fall out of the validity mask
    return np.array([_as_float(v) for v in values], dtype=np.float64)


def compute_load_summary(appliances: Iterable[Appliance]) -> LoadSummary:
    """Aggregate an appliance list into a :class:`LoadSummary`.

    For each valid appliance ``p = power_watts * quantity``:

    - ``total_instantaneous_load_w += p`` only when ``day_hours > 0``;
      night-only appliances do not add to the daytime peak,
    - ``day_energy_wh += p * day_hours``,
    - ``night_energy_wh += p * night_hours``.

    Parameters
    ----------
    appliances : iterable of Appliance
        May be empty.

    Returns
    -------
    LoadSummary
        All-zero for an empty or entirely malformed list.
    """
    items = list(appliances)
    if not items:
        return LoadSummary(0.0, 0.0, 0.0)

    power = _column([a.power_watts for a in items])
    quantity = _column([a.quantity for a in items])
    day_h = _column([a.day_hours for a in items])
    night_h = _column([a.night_hours for a in items])

    columns = np.vstack([power, quantity, day_h, night_h])
    valid = np.all(np.isfinite(columns) & (columns >= 0.0), axis=0)

    p = np.where(valid, power * quantity, 0.0)
    day_h = np.where(valid, day_h, 0.0)
    night_h = np.where(valid, night_h, 0.0)

    return LoadSummary(
        total_instantaneous_load_w=float(np.sum(np.where(day_h > 0.0, p, 0.0))),
        day_energy_wh=float(np.sum(p * day_h)),
        night_energy_wh=float(np.sum(p * night_h)),
    )
