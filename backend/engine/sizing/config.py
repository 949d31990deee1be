"""
Canonical formula set for residential solar sizing.

Every constant the sizers use lives on :class:`SizingConfig` so that one
record, not scattered literals, decides the result.  Defaults follow the most
recent calculation revision: 0.8 power factor, 20 % inverter surge headroom,
30 % battery safety margin, 20 % panel headroom and 80 % panel derating.

    Inverter:  kVA = (P_peak * surge_margin) / (power_factor * 1000)
    Battery:   Ah  = (E_night * safety_margin) / (DoD * eta_rt * V_sys)
    Panels:    W   = max(P_day, E_night / (PSH * eta_sys)) * headroom
               N   = ceil(W / (W_panel * derating))
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from .errors import (
    InvalidInputError,
    require_at_least_one,
    require_fraction,
    require_positive,
)

FORMULA_VERSION = "2024.3"

# Usage periods assumed by the appliance wizard
DAY_PERIOD_HOURS = 11.0    # 07:00-18:00
NIGHT_PERIOD_HOURS = 13.0  # 18:00-07:00


@dataclass(frozen=True)
class SizingConfig:
    """Named constants for one sizing run.

    Parameters
    ----------
    power_factor : float
        Load power factor in (0, 1].  Default 0.8 (mixed household loads).
    surge_margin : float
        Inverter headroom multiplier (>= 1) for motor-starting surges.
    depth_of_discharge : float
        Usable battery fraction in (0, 1].  Default 0.8 (lithium).
    round_trip_efficiency : float
        Battery round-trip efficiency in (0, 1].
    safety_margin : float
        Battery capacity headroom multiplier (>= 1).
    peak_sun_hours : float
        Fallback equivalent full-sun hours per day when no region is given.
    system_efficiency : float
        Charge-path efficiency used for battery recharge, in (0, 1].
    headroom_factor : float
        Panel array headroom multiplier (>= 1).
    derating_factor : float
        Fraction of nameplate panel power delivered in the field, in (0, 1].
    unit_panel_rated_w : float
        Nameplate rating of a single panel (W).
    system_voltage : float or None
        DC bus voltage.  ``None`` lets the advisor take it from the chosen
        inverter.
    """

    power_factor: float = 0.8
    surge_margin: float = 1.2
    depth_of_discharge: float = 0.8
    round_trip_efficiency: float = 0.9
    safety_margin: float = 1.3
    peak_sun_hours: float = 5.0
    system_efficiency: float = 0.75
    headroom_factor: float = 1.2
    derating_factor: float = 0.8
    unit_panel_rated_w: float = 400.0
    system_voltage: float | None = None

    def __post_init__(self) -> None:
        require_fraction("power_factor", self.power_factor)
        require_at_least_one("surge_margin", self.surge_margin)
        require_fraction("depth_of_discharge", self.depth_of_discharge)
        require_fraction("round_trip_efficiency", self.round_trip_efficiency)
        require_at_least_one("safety_margin", self.safety_margin)
        require_positive("peak_sun_hours", self.peak_sun_hours)
        require_fraction("system_efficiency", self.system_efficiency)
        require_at_least_one("headroom_factor", self.headroom_factor)
        require_fraction("derating_factor", self.derating_factor)
        require_positive("unit_panel_rated_w", self.unit_panel_rated_w)
        if self.system_voltage is not None:
            require_positive("system_voltage", self.system_voltage)

    def replace(self, **overrides: float | None) -> SizingConfig:
        """Return a validated copy with ``overrides`` applied.

        ``None`` values keep the current setting.
        """
        known = {f.name for f in dataclasses.fields(self)}
        for name in overrides:
            if name not in known:
                raise InvalidInputError(name, overrides[name], "a SizingConfig field")
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict[str, float | None]:
        return dataclasses.asdict(self)
