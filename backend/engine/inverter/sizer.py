"""
Inverter capacity sizing.

The inverter must carry the peak concurrent daytime load with headroom for
motor-starting surges.  Apparent power follows from real power through the
load power factor::

    kVA = (P_peak * surge_margin) / (power_factor * 1000)

The result is continuous; rounding up to an offered capacity tier is the
catalog matcher's job (see :mod:`engine.catalog.matching`).
"""

from __future__ import annotations

from dataclasses import dataclass

from engine.sizing.errors import (
    require_at_least_one,
    require_fraction,
    require_non_negative,
)

# Upper kVA bound of each DC bus voltage tier, ascending
_BUS_VOLTAGE_TIERS: tuple[tuple[float, float], ...] = (
    (1.5, 12.0),
    (3.5, 24.0),
)
_HIGH_POWER_BUS_VOLTAGE = 48.0


@dataclass(frozen=True)
class InverterSpec:
    """Required inverter rating."""

    required_kva: float
    peak_load_w: float
    power_factor: float
    surge_margin: float

    @property
    def required_va(self) -> float:
        return self.required_kva * 1000.0

    def to_dict(self) -> dict[str, float]:
        return {
            "required_kva": self.required_kva,
            "peak_load_w": self.peak_load_w,
            "power_factor": self.power_factor,
            "surge_margin": self.surge_margin,
        }


def size_inverter(
    peak_load_w: float,
    power_factor: float = 0.8,
    surge_margin: float = 1.2,
) -> InverterSpec:
    """Compute the apparent-power rating needed for ``peak_load_w``.

    Parameters
    ----------
    peak_load_w : float
        Peak concurrent daytime load (W), >= 0.
    power_factor : float
        Load power factor in (0, 1].
    surge_margin : float
        Headroom multiplier, >= 1.

    Returns
    -------
    InverterSpec
        ``required_kva == 0`` for zero load; callers reject empty
        configurations upstream.

    Raises
    ------
    InvalidInputError
        If any parameter is outside its domain.
    """
    peak_load_w = require_non_negative("peak_load_w", peak_load_w)
    power_factor = require_fraction("power_factor", power_factor)
    surge_margin = require_at_least_one("surge_margin", surge_margin)

    required_kva = (peak_load_w * surge_margin) / (power_factor * 1000.0)
    return InverterSpec(
        required_kva=required_kva,
        peak_load_w=peak_load_w,
        power_factor=power_factor,
        surge_margin=surge_margin,
    )


def default_bus_voltage(required_kva: float) -> float:
    """DC bus voltage conventionally paired with an inverter of this size.

    12 V up to 1.5 kVA, 24 V up to 3.5 kVA, 48 V above.
    """
    required_kva = require_non_negative("required_kva", required_kva)
    for max_kva, voltage in _BUS_VOLTAGE_TIERS:
        if required_kva <= max_kva:
            return voltage
    return _HIGH_POWER_BUS_VOLTAGE
