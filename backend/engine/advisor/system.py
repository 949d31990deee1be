"""
Complete home solar system recommendation.

Runs the sizers in their fixed order and, when a catalog is supplied, picks
concrete equipment for each requirement:

1. aggregate the appliance list,
2. size the inverter from the daytime peak; its bus voltage fixes the DC
   system voltage,
3. size the battery bank from night energy at that voltage,
4. size the array from the daytime peak and the night energy to recharge.

Degenerate inputs (no load, no night load) produce zero-sized specs and an
explanatory note rather than an error.  Pure arithmetic, no I/O.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from engine.battery.chemistry import get_chemistry
from engine.battery.sizer import BatterySpec, size_battery
from engine.catalog.matching import (
    BatteryOption,
    InverterOption,
    PanelOption,
    match_battery_options,
    match_inverter,
    match_panel_options,
)
from engine.catalog.products import DEFAULT_CATALOG, EquipmentCatalog
from engine.inverter.sizer import InverterSpec, default_bus_voltage, size_inverter
from engine.load.aggregator import Appliance, LoadSummary, compute_load_summary
from engine.sizing.config import FORMULA_VERSION, SizingConfig
from engine.solar.panels import PanelSpec, size_panels
from engine.solar.sun_hours import canonical_state, get_peak_sun_hours

logger = logging.getLogger(__name__)


@dataclass
class SystemRecommendation:
    load_summary: LoadSummary
    inverter: InverterSpec
    battery: BatterySpec
    panels: PanelSpec
    peak_sun_hours: float
    system_voltage: float
    state: str | None
    config: SizingConfig
    inverter_options: list[InverterOption] = field(default_factory=list)
    battery_options: list[BatteryOption] = field(default_factory=list)
    panel_options: list[PanelOption] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)
    formula_version: str = FORMULA_VERSION

    @property
    def selected_inverter(self) -> InverterOption | None:
        return next((o for o in self.inverter_options if o.recommended), None)

    @property
    def selected_battery(self) -> BatteryOption | None:
        return next((o for o in self.battery_options if o.is_optimal), None)

    @property
    def selected_panels(self) -> PanelOption | None:
        return next((o for o in self.panel_options if o.recommended), None)

    @property
    def total_system_cost(self) -> float:
        return sum(
            o.total_cost
            for o in (self.selected_inverter, self.selected_battery, self.selected_panels)
            if o is not None
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {
            "formula_version": self.formula_version,
            "state": self.state,
            "peak_sun_hours": self.peak_sun_hours,
            "system_voltage": self.system_voltage,
            "load_summary": {
                **self.load_summary.to_dict(),
                "daily_energy_kwh": round(self.load_summary.daily_energy_kwh, 3),
            },
            "inverter": self.inverter.to_dict(),
            "battery": self.battery.to_dict(),
            "panels": self.panels.to_dict(),
            "inverter_options": [_option_dict(o) for o in self.inverter_options],
            "battery_options": [_option_dict(o) for o in self.battery_options],
            "panel_options": [_option_dict(o) for o in self.panel_options],
            "total_system_cost": self.total_system_cost,
            "config": self.config.to_dict(),
            "notes": self.notes,
        }


def _option_dict(option: InverterOption | BatteryOption | PanelOption) -> dict[str, Any]:
    data = dict(vars(option))
    data.pop("spec", None)
    return data


def recommend_system(
    appliances: Iterable[Appliance],
    config: SizingConfig | None = None,
    *,
    state: str | None = None,
    chemistry: str | None = None,
    catalog: EquipmentCatalog | None = DEFAULT_CATALOG,
) -> SystemRecommendation:
    """Size inverter, battery bank and array for an appliance list.

    Parameters
    ----------
    appliances : iterable of Appliance
        Household load.
    config : SizingConfig, optional
        Formula constants; defaults to :class:`SizingConfig()`.
    state : str, optional
        Nigerian state; selects peak sun hours from the regional table.
        Without it ``config.peak_sun_hours`` is used.
    chemistry : str, optional
        Battery chemistry whose depth of discharge and efficiency replace the
        config values; also restricts battery options to that chemistry.
    catalog : EquipmentCatalog or None
        Equipment to match against.  ``None`` skips product matching.

    Returns
    -------
    SystemRecommendation
    """
    config = config or SizingConfig()
    summary = compute_load_summary(appliances)
    notes: list[str] = []

    if state is not None:
        state = canonical_state(state)
        peak_sun_hours = get_peak_sun_hours(state)
    else:
        peak_sun_hours = config.peak_sun_hours

    depth_of_discharge = config.depth_of_discharge
    round_trip_efficiency = config.round_trip_efficiency
    chem_name: str | None = None
    if chemistry is not None:
        chem = get_chemistry(chemistry)
        chem_name = chem.name
        depth_of_discharge = chem.depth_of_discharge
        round_trip_efficiency = chem.round_trip_efficiency

    inverter = size_inverter(
        summary.total_instantaneous_load_w,
        power_factor=config.power_factor,
        surge_margin=config.surge_margin,
    )
    inverter_options: list[InverterOption] = []
    if catalog is not None:
        inverter_options = match_inverter(inverter.required_kva, catalog)
    if inverter.required_kva == 0.0:
        notes.append("No daytime load: inverter requirement is zero.")
    elif catalog is not None and not inverter_options:
        notes.append(
            f"No catalog inverter configuration covers {inverter.required_kva:.2f} kVA."
        )

    if config.system_voltage is not None:
        system_voltage = config.system_voltage
    elif inverter_options:
        system_voltage = inverter_options[0].voltage_bus
    else:
        system_voltage = default_bus_voltage(inverter.required_kva)

    battery = size_battery(
        summary.night_energy_wh,
        system_voltage,
        depth_of_discharge=depth_of_discharge,
        round_trip_efficiency=round_trip_efficiency,
        safety_margin=config.safety_margin,
    )
    battery_options: list[BatteryOption] = []
    if catalog is not None:
        battery_options = match_battery_options(
            summary.night_energy_wh,
            system_voltage,
            catalog,
            safety_margin=config.safety_margin,
        )
        if chem_name is not None:
            battery_options = [o for o in battery_options if o.chemistry == chem_name]
            for i, option in enumerate(battery_options):
                option.is_optimal = i == 0
    if not battery.battery_needed:
        notes.append("No night-time load: no battery bank is needed.")
    elif catalog is not None and not battery_options:
        notes.append(f"No catalog battery can be strung to a {system_voltage:g} V bus.")

    panels = size_panels(
        summary.total_instantaneous_load_w,
        summary.night_energy_wh,
        peak_sun_hours,
        system_efficiency=config.system_efficiency,
        headroom_factor=config.headroom_factor,
        unit_panel_rated_w=config.unit_panel_rated_w,
        derating_factor=config.derating_factor,
    )
    panel_options = (
        match_panel_options(
            summary.total_instantaneous_load_w,
            summary.night_energy_wh,
            peak_sun_hours,
            catalog,
            config,
        )
        if catalog is not None
        else []
    )
    if panels.panel_count == 0:
        notes.append("No load to supply: panel count is zero.")

    logger.debug(
        "Sized system: %.0f W peak, %.0f Wh day, %.0f Wh night -> "
        "%.3f kVA, %.1f Ah @ %g V, %d panels (PSH %.1f)",
        summary.total_instantaneous_load_w,
        summary.day_energy_wh,
        summary.night_energy_wh,
        inverter.required_kva,
        battery.required_capacity_ah,
        system_voltage,
        panels.panel_count,
        peak_sun_hours,
    )

    return SystemRecommendation(
        load_summary=summary,
        inverter=inverter,
        battery=battery,
        panels=panels,
        peak_sun_hours=peak_sun_hours,
        system_voltage=system_voltage,
        state=state,
        config=config,
        inverter_options=inverter_options,
        battery_options=battery_options,
        panel_options=panel_options,
        notes=notes,
    )
