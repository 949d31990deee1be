"""Tests for engine.advisor — end-to-end system recommendation."""

from __future__ import annotations

import pytest

from engine.advisor.system import recommend_system
from engine.load.aggregator import Appliance
from engine.sizing.config import FORMULA_VERSION, SizingConfig
from engine.sizing.errors import InvalidInputError


class TestRecommendSystem:
    """Tests for recommend_system()."""

    def test_scenario_a_pipeline(self, scenario_a_appliances):
        rec = recommend_system(scenario_a_appliances)

        assert rec.load_summary.total_instantaneous_load_w == pytest.approx(250.0)
        assert rec.load_summary.night_energy_wh == pytest.approx(1800.0)
        assert rec.inverter.required_kva == pytest.approx(0.375)
        # Smallest catalog inverter is a 12 V unit
        assert rec.system_voltage == 12.0
        assert rec.battery.required_capacity_ah == pytest.approx(2340 / (0.8 * 0.9 * 12))
        assert rec.panels.required_wattage == pytest.approx(576.0)
        assert rec.panels.panel_count == 2
        assert rec.formula_version == FORMULA_VERSION
        assert rec.notes == []

    def test_selected_equipment(self, scenario_a_appliances):
        rec = recommend_system(scenario_a_appliances)
        assert rec.selected_inverter.model_name == "Felicity 1.5kVA Inverter"
        assert rec.selected_battery is not None
        assert rec.selected_battery.voltage == 12.0
        assert rec.selected_panels.model_name == "Monocrystalline 400W"
        assert rec.total_system_cost == pytest.approx(
            rec.selected_inverter.total_cost
            + rec.selected_battery.total_cost
            + rec.selected_panels.total_cost
        )

    def test_without_catalog(self, scenario_a_appliances):
        rec = recommend_system(scenario_a_appliances, catalog=None)
        assert rec.inverter_options == []
        assert rec.battery_options == []
        assert rec.panel_options == []
        assert rec.total_system_cost == 0
        assert rec.system_voltage == 12.0
        assert rec.notes == []

    def test_configured_voltage_wins(self, scenario_a_appliances):
        config = SizingConfig(system_voltage=24)
        rec = recommend_system(scenario_a_appliances, config)
        assert rec.system_voltage == 24
        assert rec.battery.required_capacity_ah == pytest.approx(135.4167, rel=1e-4)

    def test_state_sets_sun_hours(self, scenario_a_appliances):
        rec = recommend_system(scenario_a_appliances, state="katsina")
        assert rec.state == "Katsina"
        assert rec.peak_sun_hours == 6.0
        assert rec.panels.recharge_power_w == pytest.approx(1800 / (6.0 * 0.75))

    def test_state_default_sun_hours(self, scenario_a_appliances):
        rec = recommend_system(scenario_a_appliances, state="Abuja")
        assert rec.state == "FCT"
        assert rec.peak_sun_hours == 5.2

    def test_unknown_state_raises(self, scenario_a_appliances):
        with pytest.raises(InvalidInputError):
            recommend_system(scenario_a_appliances, state="Gotham")

    def test_chemistry_overrides_battery_constants(self, scenario_a_appliances):
        rec = recommend_system(scenario_a_appliances, chemistry="AGM")
        assert rec.battery.depth_of_discharge == 0.5
        assert rec.battery.round_trip_efficiency == 0.9
        assert rec.battery_options
        assert {o.chemistry for o in rec.battery_options} == {"agm"}
        assert rec.battery_options[0].is_optimal
        assert sum(o.is_optimal for o in rec.battery_options) == 1

    def test_night_only_load(self, evening_appliances):
        rec = recommend_system(evening_appliances)
        assert rec.inverter.required_kva == 0.0
        assert rec.inverter_options == []
        assert "No daytime load: inverter requirement is zero." in rec.notes
        assert rec.battery.battery_needed
        # Array still has to recharge the bank
        assert rec.panels.panel_count > 0

    def test_empty_load(self):
        rec = recommend_system([])
        assert rec.inverter.required_kva == 0.0
        assert rec.battery.required_capacity_ah == 0.0
        assert rec.panels.panel_count == 0
        assert len(rec.notes) == 3

    def test_day_only_load_needs_no_battery(self):
        rec = recommend_system([Appliance(500, 1, day_hours=6, night_hours=0)])
        assert not rec.battery.battery_needed
        assert rec.battery_options == []
        assert "No night-time load: no battery bank is needed." in rec.notes

    def test_large_household_merges_inverters(self, large_household):
        rec = recommend_system(large_household)
        assert rec.inverter.required_kva == pytest.approx(3900 * 1.2 / 800)
        selected = rec.selected_inverter
        assert selected.total_kva >= rec.inverter.required_kva
        assert selected.is_merged
        assert rec.system_voltage == selected.voltage_bus

    def test_no_catalog_match_noted(self, small_catalog):
        rec = recommend_system(
            [Appliance(14_000, 1, day_hours=4, night_hours=0)], catalog=small_catalog
        )
        assert rec.inverter_options == []
        assert any("No catalog inverter" in n for n in rec.notes)
        assert rec.system_voltage == 48.0

    def test_to_dict_is_serializable(self, scenario_a_appliances):
        data = recommend_system(scenario_a_appliances, state="Lagos").to_dict()
        assert data["state"] == "Lagos"
        assert data["load_summary"]["daily_energy_kwh"] == pytest.approx(4.1)
        assert "spec" not in data["battery_options"][0]
        assert "spec" not in data["panel_options"][0]
        assert data["config"]["power_factor"] == 0.8
