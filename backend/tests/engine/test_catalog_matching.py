"""Tests for engine.catalog — matching requirements to products."""

from __future__ import annotations

import pytest

from engine.catalog.matching import (
    match_battery_options,
    match_inverter,
    match_panel_options,
)
from engine.catalog.products import DEFAULT_CATALOG, catalog_to_dict
from engine.sizing.config import SizingConfig
from engine.sizing.errors import InvalidInputError


# ======================================================================
# Inverters
# ======================================================================


class TestMatchInverter:
    def test_cheapest_single_unit_recommended(self, small_catalog):
        options = match_inverter(0.375, small_catalog)
        assert [o.model_name for o in options] == ["Inv 1kVA", "Inv 3kVA"]
        assert options[0].recommended
        assert not options[1].recommended
        assert options[0].quantity == 1
        assert not options[0].is_merged
        assert options[0].va_requirement == pytest.approx(375.0)

    def test_unavailable_products_skipped(self, small_catalog):
        options = match_inverter(0.5, small_catalog)
        assert all("out of stock" not in o.model_name for o in options)

    def test_single_unit_beats_merge_on_cost(self, small_catalog):
        options = match_inverter(2.5, small_catalog)
        assert options[0].model_name == "Inv 3kVA"
        merged = next(o for o in options if o.model_name == "Inv 1kVA")
        assert merged.quantity == 3
        assert merged.is_merged

    def test_merged_bank_recommended_when_cheaper(self, small_catalog):
        options = match_inverter(3.5, small_catalog)
        best = options[0]
        assert best.recommended
        assert best.model_name == "Inv 1kVA"
        assert best.quantity == 4
        assert best.total_kva == pytest.approx(4.0)
        assert best.total_cost == 200_000
        assert best.merge_configuration == "4 x Inv 1kVA in parallel"

    def test_parallel_limit(self, small_catalog):
        options = match_inverter(4.5, small_catalog)
        assert [o.model_name for o in options] == ["Inv 3kVA"]
        assert match_inverter(4.5, small_catalog, max_parallel_units=1) == []

    def test_requirement_too_large(self, small_catalog):
        assert match_inverter(20.0, small_catalog) == []

    def test_zero_requirement(self, small_catalog):
        assert match_inverter(0.0, small_catalog) == []

    def test_negative_requirement_raises(self):
        with pytest.raises(InvalidInputError):
            match_inverter(-1.0)

    def test_every_option_covers_requirement(self):
        for option in match_inverter(6.2, DEFAULT_CATALOG):
            assert option.total_kva >= 6.2


# ======================================================================
# Batteries
# ======================================================================


class TestMatchBatteryOptions:
    def test_strings_to_bus_voltage(self, small_catalog):
        options = match_battery_options(1800, 24, small_catalog)
        # The 48 V unit cannot be strung down to a 24 V bus
        assert {o.model_name for o in options} == {"Li 24V 2.4kWh", "AGM 12V 1.2kWh"}

        lithium = next(o for o in options if o.chemistry == "lithium")
        assert lithium.series_count == 1
        assert lithium.parallel_count == 2  # 128.3 Ah needed, 100 Ah units
        assert lithium.recommended_quantity == 2
        assert lithium.configuration == "2 x Li 24V 2.4kWh (1S2P @ 24V)"

        agm = next(o for o in options if o.chemistry == "agm")
        assert agm.series_count == 2
        assert agm.parallel_count == 3  # 216.7 Ah needed, 100 Ah units
        assert agm.recommended_quantity == 6

    def test_cheapest_is_optimal(self, small_catalog):
        options = match_battery_options(1800, 24, small_catalog)
        assert options[0].is_optimal
        assert options[0].total_cost == 240_000
        assert sum(o.is_optimal for o in options) == 1

    def test_bank_covers_requirement(self, small_catalog):
        for option in match_battery_options(5000, 48, small_catalog):
            bank_ah = option.parallel_count * option.capacity_kwh * 1000 / option.voltage
            assert bank_ah >= option.spec.required_capacity_ah
            assert option.usable_capacity_kwh <= option.total_capacity_kwh

    def test_zero_energy(self, small_catalog):
        assert match_battery_options(0.0, 24, small_catalog) == []

    def test_invalid_voltage_raises(self, small_catalog):
        with pytest.raises(InvalidInputError):
            match_battery_options(1000, 0, small_catalog)


# ======================================================================
# Panels
# ======================================================================


class TestMatchPanelOptions:
    def test_scenario_d_per_model(self, small_catalog):
        options = match_panel_options(250, 1800, 5, small_catalog)
        by_name = {o.model_name: o for o in options}
        assert by_name["Mono 400W"].recommended_quantity == 2
        assert by_name["Poly 300W"].recommended_quantity == 3  # 576 / 225
        # Equal cost: fewer panels wins
        assert options[0].model_name == "Mono 400W"
        assert options[0].recommended

    def test_daily_generation(self, small_catalog):
        best = match_panel_options(250, 1800, 5, small_catalog)[0]
        assert best.total_watts == 800
        assert best.daily_generation_kwh == pytest.approx(3.2)

    def test_config_headroom_applies(self, small_catalog):
        tight = match_panel_options(1000, 0, 5, small_catalog, SizingConfig(headroom_factor=1.0))
        loose = match_panel_options(1000, 0, 5, small_catalog, SizingConfig(headroom_factor=1.5))
        assert tight[0].spec.required_wattage < loose[0].spec.required_wattage

    def test_zero_load(self, small_catalog):
        assert match_panel_options(0, 0, 5, small_catalog) == []


class TestCatalogSerialization:
    def test_battery_capacity_ah(self):
        data = catalog_to_dict(DEFAULT_CATALOG)
        lithium = next(b for b in data["batteries"] if b["model_name"] == "Lithium 100Ah 24V")
        assert lithium["capacity_ah"] == 100.0
        assert len(data["inverters"]) == 4
        assert len(data["panels"]) == 3
