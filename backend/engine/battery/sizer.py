"""
Battery bank sizing.

The bank must carry the whole night-period energy with no help from the
panels.  Capacity at the DC bus voltage is::

    Ah = (E_night * safety_margin) / (DoD * eta_rt * V_sys)

``V_sys`` is the inverter's bus voltage (12/24/48 V), so the inverter must be
chosen first.  Zero night energy yields zero capacity, meaning no battery is
needed; callers decide how to present that.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from engine.sizing.errors import (
    require_at_least_one,
    require_fraction,
    require_non_negative,
    require_positive,
)

from .chemistry import CHEMISTRIES, get_chemistry


@dataclass(frozen=True)
class BatterySpec:
    """Required battery capacity at a given bus voltage."""

    required_capacity_ah: float
    system_voltage: float
    night_energy_wh: float
    depth_of_discharge: float
    round_trip_efficiency: float
    safety_margin: float

    @property
    def required_energy_wh(self) -> float:
        """Nameplate energy of the bank (Ah x V)."""
        return self.required_capacity_ah * self.system_voltage

    @property
    def battery_needed(self) -> bool:
        return self.required_capacity_ah > 0.0

    def to_dict(self) -> dict[str, float | bool]:
        return {
            "required_capacity_ah": self.required_capacity_ah,
            "required_energy_wh": self.required_energy_wh,
            "system_voltage": self.system_voltage,
            "night_energy_wh": self.night_energy_wh,
            "depth_of_discharge": self.depth_of_discharge,
            "round_trip_efficiency": self.round_trip_efficiency,
            "safety_margin": self.safety_margin,
            "battery_needed": self.battery_needed,
        }


def size_battery(
    night_energy_wh: float,
    system_voltage: float,
    depth_of_discharge: float = 0.8,
    round_trip_efficiency: float = 0.9,
    safety_margin: float = 1.3,
) -> BatterySpec:
    """Compute the bank capacity (Ah) needed to ride through the night.

    Parameters
    ----------
    night_energy_wh : float
        Night-period energy demand (Wh), >= 0.
    system_voltage : float
        DC bus voltage (V), > 0.
    depth_of_discharge : float
        Usable fraction of capacity, in (0, 1].
    round_trip_efficiency : float
        Battery round-trip efficiency, in (0, 1].
    safety_margin : float
        Capacity headroom multiplier, >= 1.

    Raises
    ------
    InvalidInputError
        If any parameter is outside its domain.
    """
    night_energy_wh = require_non_negative("night_energy_wh", night_energy_wh)
    system_voltage = require_positive("system_voltage", system_voltage)
    depth_of_discharge = require_fraction("depth_of_discharge", depth_of_discharge)
    round_trip_efficiency = require_fraction("round_trip_efficiency", round_trip_efficiency)
    safety_margin = require_at_least_one("safety_margin", safety_margin)

    capacity_ah = (night_energy_wh * safety_margin) / (
        depth_of_discharge * round_trip_efficiency * system_voltage
    )
    return BatterySpec(
        required_capacity_ah=capacity_ah,
        system_voltage=system_voltage,
        night_energy_wh=night_energy_wh,
        depth_of_discharge=depth_of_discharge,
        round_trip_efficiency=round_trip_efficiency,
        safety_margin=safety_margin,
    )


def size_battery_by_chemistry(
    night_energy_wh: float,
    system_voltage: float,
    chemistries: Iterable[str] | None = None,
    safety_margin: float = 1.3,
) -> dict[str, BatterySpec]:
    """Evaluate :func:`size_battery` once per chemistry for comparison.

    ``chemistries`` defaults to every entry of :data:`CHEMISTRIES`.
    """
    names = list(CHEMISTRIES) if chemistries is None else list(chemistries)
    results: dict[str, BatterySpec] = {}
    for name in names:
        chem = get_chemistry(name)
        results[chem.name] = size_battery(
            night_energy_wh,
            system_voltage,
            depth_of_discharge=chem.depth_of_discharge,
            round_trip_efficiency=chem.round_trip_efficiency,
            safety_margin=safety_margin,
        )
    return results
