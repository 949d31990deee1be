"""
PV array sizing.

The array has to meet two requirements at once and is sized for the larger:

1. carry the daytime load directly while the sun is up, and
2. put back the night-period energy within the available sun hours::

       P_recharge = E_night / (PSH * eta_sys)

Then::

    W_required = max(P_day, P_recharge) * headroom
    N_panels   = ceil(W_required / (W_panel * derating))

``ceil`` guarantees the derated array never falls short of ``W_required``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from engine.sizing.errors import (
    require_at_least_one,
    require_fraction,
    require_non_negative,
    require_positive,
)


@dataclass(frozen=True)
class PanelSpec:
    """Required array wattage and panel count."""

    required_wattage: float
    panel_count: int
    recharge_power_w: float
    daytime_load_w: float
    unit_panel_rated_w: float
    derating_factor: float

    @property
    def installed_wattage(self) -> float:
        """Nameplate wattage of ``panel_count`` panels."""
        return self.panel_count * self.unit_panel_rated_w

    def to_dict(self) -> dict[str, float | int]:
        return {
            "required_wattage": self.required_wattage,
            "panel_count": self.panel_count,
            "recharge_power_w": self.recharge_power_w,
            "daytime_load_w": self.daytime_load_w,
            "unit_panel_rated_w": self.unit_panel_rated_w,
            "derating_factor": self.derating_factor,
            "installed_wattage": self.installed_wattage,
        }


def size_panels(
    daytime_load_w: float,
    night_energy_wh: float,
    peak_sun_hours: float,
    system_efficiency: float = 0.75,
    headroom_factor: float = 1.2,
    unit_panel_rated_w: float = 400.0,
    derating_factor: float = 0.8,
) -> PanelSpec:
    """Size the array for daytime load and overnight battery recharge.

    Parameters
    ----------
    daytime_load_w : float
        Concurrent daytime load the panels must carry (W), >= 0.
    night_energy_wh : float
        Night-period energy to recharge during the day (Wh), >= 0.
    peak_sun_hours : float
        Equivalent full-sun hours per day at the site, > 0.
    system_efficiency : float
        Charge-path efficiency, in (0, 1].
    headroom_factor : float
        Array headroom multiplier, >= 1.
    unit_panel_rated_w : float
        Nameplate rating of one panel (W), > 0.
    derating_factor : float
        Field-to-nameplate power ratio, in (0, 1].

    Returns
    -------
    PanelSpec
        ``panel_count == 0`` when both loads are zero.

    Raises
    ------
    InvalidInputError
        If any parameter is outside its domain.
    """
    daytime_load_w = require_non_negative("daytime_load_w", daytime_load_w)
    night_energy_wh = require_non_negative("night_energy_wh", night_energy_wh)
    peak_sun_hours = require_positive("peak_sun_hours", peak_sun_hours)
    system_efficiency = require_fraction("system_efficiency", system_efficiency)
    headroom_factor = require_at_least_one("headroom_factor", headroom_factor)
    unit_panel_rated_w = require_positive("unit_panel_rated_w", unit_panel_rated_w)
    derating_factor = require_fraction("derating_factor", derating_factor)

    recharge_power_w = night_energy_wh / (peak_sun_hours * system_efficiency)
    required_wattage = max(daytime_load_w, recharge_power_w) * headroom_factor
    panel_count = math.ceil(required_wattage / (unit_panel_rated_w * derating_factor))

    return PanelSpec(
        required_wattage=required_wattage,
        panel_count=int(panel_count),
        recharge_power_w=recharge_power_w,
        daytime_load_w=daytime_load_w,
        unit_panel_rated_w=unit_panel_rated_w,
        derating_factor=derating_factor,
    )


def daily_generation_kwh(
    total_watts: float,
    peak_sun_hours: float,
    derating_factor: float = 0.8,
) -> float:
    """Expected daily array output (kWh) under derated conditions."""
    total_watts = require_non_negative("total_watts", total_watts)
    peak_sun_hours = require_positive("peak_sun_hours", peak_sun_hours)
    derating_factor = require_fraction("derating_factor", derating_factor)
    return total_watts * peak_sun_hours * derating_factor / 1000.0
