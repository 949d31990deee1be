"""
Match computed requirements against purchasable equipment.

The sizers return continuous requirements (kVA, Ah at a bus voltage, array
watts).  These helpers turn them into concrete product configurations:

- inverters: smallest single unit that meets the kVA requirement, or several
  identical units in parallel when no single unit is large enough,
- batteries: series strings to reach the bus voltage, parallel strings to
  reach the capacity, evaluated per chemistry,
- panels: panel count per module model using that model's rating and
  derating.

Options are sorted by total cost; the first one is the recommendation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from engine.battery.chemistry import get_chemistry
from engine.battery.sizer import BatterySpec, size_battery
from engine.sizing.config import SizingConfig
from engine.sizing.errors import require_non_negative, require_positive
from engine.solar.panels import PanelSpec, daily_generation_kwh, size_panels

from .products import DEFAULT_CATALOG, EquipmentCatalog

_VOLTAGE_TOL = 1e-6


@dataclass
class InverterOption:
    model_name: str
    kva_rating: float
    voltage_bus: float
    surge_capacity: str
    unit_cost: float
    quantity: int
    total_kva: float
    total_cost: float
    va_requirement: float
    is_merged: bool
    merge_configuration: str
    recommended: bool = False


@dataclass
class BatteryOption:
    model_name: str
    chemistry: str
    voltage: float
    capacity_kwh: float
    series_count: int
    parallel_count: int
    recommended_quantity: int
    total_capacity_kwh: float
    usable_capacity_kwh: float
    total_cost: float
    configuration: str
    spec: BatterySpec
    is_optimal: bool = False


@dataclass
class PanelOption:
    model_name: str
    rated_power: float
    derating_factor: float
    recommended_quantity: int
    total_watts: float
    total_cost: float
    daily_generation_kwh: float
    spec: PanelSpec
    recommended: bool = False


def match_inverter(
    required_kva: float,
    catalog: EquipmentCatalog = DEFAULT_CATALOG,
    max_parallel_units: int = 4,
) -> list[InverterOption]:
    """List inverter configurations able to supply ``required_kva``.

    Models that meet the requirement alone are offered as single units.
    Models that fall short are offered as ``n`` identical units in parallel
    when ``n <= max_parallel_units``.  Zero requirement returns ``[]``.
    """
    required_kva = require_non_negative("required_kva", required_kva)
    if required_kva == 0.0:
        return []

    options: list[InverterOption] = []
    for product in catalog.available_inverters():
        if product.kva_rating <= 0:
            continue
        quantity = max(1, math.ceil(required_kva / product.kva_rating))
        if quantity > max_parallel_units:
            continue
        merged = quantity > 1
        options.append(
            InverterOption(
                model_name=product.model_name,
                kva_rating=product.kva_rating,
                voltage_bus=float(product.voltage_bus),
                surge_capacity=product.surge_capacity,
                unit_cost=product.unit_cost,
                quantity=quantity,
                total_kva=product.kva_rating * quantity,
                total_cost=product.unit_cost * quantity,
                va_requirement=required_kva * 1000.0,
                is_merged=merged,
                merge_configuration=(
                    f"{quantity} x {product.model_name} in parallel" if merged else ""
                ),
            )
        )

    # Prefer a single unit over a merged bank at equal cost
    options.sort(key=lambda o: (o.total_cost, o.quantity, o.total_kva))
    if options:
        options[0].recommended = True
    return options


def match_battery_options(
    night_energy_wh: float,
    system_voltage: float,
    catalog: EquipmentCatalog = DEFAULT_CATALOG,
    safety_margin: float = 1.3,
) -> list[BatteryOption]:
    """Battery bank configurations for the night-period energy.

    Only units whose voltage divides ``system_voltage`` can be strung to the
    bus.  Capacity per product uses its own chemistry's depth of discharge
    and efficiency.  Zero night energy returns ``[]`` (no battery needed).
    """
    night_energy_wh = require_non_negative("night_energy_wh", night_energy_wh)
    system_voltage = require_positive("system_voltage", system_voltage)
    if night_energy_wh == 0.0:
        return []

    options: list[BatteryOption] = []
    for product in catalog.available_batteries():
        if product.voltage <= 0 or product.capacity_kwh <= 0:
            continue
        ratio = system_voltage / product.voltage
        series = round(ratio)
        if series < 1 or abs(ratio - series) > _VOLTAGE_TOL:
            continue

        chem = get_chemistry(product.chemistry)
        spec = size_battery(
            night_energy_wh,
            system_voltage,
            depth_of_discharge=chem.depth_of_discharge,
            round_trip_efficiency=chem.round_trip_efficiency,
            safety_margin=safety_margin,
        )
        parallel = max(1, math.ceil(spec.required_capacity_ah / product.capacity_ah))
        quantity = series * parallel
        total_kwh = product.capacity_kwh * quantity

        options.append(
            BatteryOption(
                model_name=product.model_name,
                chemistry=chem.name,
                voltage=float(product.voltage),
                capacity_kwh=product.capacity_kwh,
                series_count=series,
                parallel_count=parallel,
                recommended_quantity=quantity,
                total_capacity_kwh=total_kwh,
                usable_capacity_kwh=total_kwh * chem.depth_of_discharge,
                total_cost=product.unit_cost * quantity,
                configuration=(
                    f"{quantity} x {product.model_name} "
                    f"({series}S{parallel}P @ {system_voltage:g}V)"
                ),
                spec=spec,
            )
        )

    options.sort(key=lambda o: (o.total_cost, o.recommended_quantity))
    if options:
        options[0].is_optimal = True
    return options


def match_panel_options(
    daytime_load_w: float,
    night_energy_wh: float,
    peak_sun_hours: float,
    catalog: EquipmentCatalog = DEFAULT_CATALOG,
    config: SizingConfig | None = None,
) -> list[PanelOption]:
    """Panel array per module model, cheapest first.

    Each model is sized with its own rating and derating factor; the
    remaining constants come from ``config``.  Zero load returns ``[]``.
    """
    config = config or SizingConfig()
    options: list[PanelOption] = []
    for product in catalog.available_panels():
        spec = size_panels(
            daytime_load_w,
            night_energy_wh,
            peak_sun_hours,
            system_efficiency=config.system_efficiency,
            headroom_factor=config.headroom_factor,
            unit_panel_rated_w=product.rated_power,
            derating_factor=product.derating_factor,
        )
        if spec.panel_count == 0:
            continue
        total_watts = spec.installed_wattage
        options.append(
            PanelOption(
                model_name=product.model_name,
                rated_power=product.rated_power,
                derating_factor=product.derating_factor,
                recommended_quantity=spec.panel_count,
                total_watts=total_watts,
                total_cost=product.unit_cost * spec.panel_count,
                daily_generation_kwh=daily_generation_kwh(
                    total_watts, peak_sun_hours, product.derating_factor
                ),
                spec=spec,
            )
        )

    options.sort(key=lambda o: (o.total_cost, o.recommended_quantity))
    if options:
        options[0].recommended = True
    return options
