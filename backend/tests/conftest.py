"""Shared test fixtures for sizing engine and API tests."""

from __future__ import annotations

import pytest

from engine.catalog.products import (
    BatteryProduct,
    EquipmentCatalog,
    InverterProduct,
    PanelProduct,
)
from engine.load.aggregator import Appliance
from engine.sizing.config import SizingConfig


# ======================================================================
# Appliance fixtures
# ======================================================================

@pytest.fixture
def scenario_a_appliances() -> list[Appliance]:
    """10 LED bulbs (10 W, 5 h daytime) plus a 150 W fridge split 12 h/12 h."""
    return [
        Appliance(power_watts=10, quantity=10, day_hours=5, night_hours=0, name="LED Bulb"),
        Appliance(power_watts=150, quantity=1, day_hours=12, night_hours=12, name="Fridge"),
    ]


@pytest.fixture
def evening_appliances() -> list[Appliance]:
    """Night-only household: TV and fans after sunset."""
    return [
        Appliance(power_watts=85, quantity=1, day_hours=0, night_hours=4, name="TV"),
        Appliance(power_watts=75, quantity=2, day_hours=0, night_hours=8, name="Ceiling Fan"),
    ]


@pytest.fixture
def large_household() -> list[Appliance]:
    """Household with air conditioning and a pump; several kVA of daytime load."""
    return [
        Appliance(power_watts=1350, quantity=2, day_hours=6, night_hours=4, name="AC 1.5HP"),
        Appliance(power_watts=750, quantity=1, day_hours=1, night_hours=0, name="Water Pump"),
        Appliance(power_watts=250, quantity=1, day_hours=11, night_hours=13, name="Fridge"),
        Appliance(power_watts=10, quantity=20, day_hours=2, night_hours=6, name="LED Bulb"),
    ]


# ======================================================================
# Config / catalog fixtures
# ======================================================================

@pytest.fixture
def default_config() -> SizingConfig:
    return SizingConfig()


@pytest.fixture
def small_catalog() -> EquipmentCatalog:
    """Compact catalog with round numbers for matching tests."""
    return EquipmentCatalog(
        inverters=(
            InverterProduct("Inv 1kVA", 1.0, 12, 50_000),
            InverterProduct("Inv 3kVA", 3.0, 24, 140_000),
            InverterProduct("Inv 5kVA (out of stock)", 5.0, 48, 200_000, available=False),
        ),
        batteries=(
            BatteryProduct("Li 24V 2.4kWh", "lithium", 24, 2.4, 120_000),
            BatteryProduct("AGM 12V 1.2kWh", "agm", 12, 1.2, 50_000),
            BatteryProduct("Li 48V 5kWh", "lithium", 48, 5.0, 200_000),
        ),
        panels=(
            PanelProduct("Mono 400W", 400, 60_000),
            PanelProduct("Poly 300W", 300, 40_000, derating_factor=0.75),
        ),
    )
