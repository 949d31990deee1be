"""Tests for engine.solar — panel sizing and regional sun hours."""

from __future__ import annotations

import numpy as np
import pytest

from engine.sizing.errors import InvalidInputError
from engine.solar.panels import daily_generation_kwh, size_panels
from engine.solar.sun_hours import (
    DEFAULT_PEAK_SUN_HOURS,
    NIGERIAN_STATES,
    canonical_state,
    get_peak_sun_hours,
    sun_hours_table,
)


# ======================================================================
# Panel sizing
# ======================================================================


class TestSizePanels:
    """Tests for size_panels()."""

    def test_scenario_d(self):
        """Recharge (480 W) dominates the 250 W day load: 576 W -> 2 panels."""
        spec = size_panels(250, 1800, 5, 0.75, 1.2, 400, 0.8)
        assert spec.recharge_power_w == pytest.approx(480.0)
        assert spec.required_wattage == pytest.approx(576.0)
        assert spec.panel_count == 2
        assert spec.installed_wattage == 800

    def test_daytime_load_dominates(self):
        spec = size_panels(2000, 1000, 5, 0.75, 1.2, 400, 0.8)
        assert spec.required_wattage == pytest.approx(2400.0)
        assert spec.panel_count == 8  # 2400 / 320 = 7.5

    def test_zero_loads_zero_panels(self):
        spec = size_panels(0, 0, 5)
        assert spec.required_wattage == 0.0
        assert spec.panel_count == 0

    def test_panel_count_is_int(self):
        assert isinstance(size_panels(250, 1800, 5).panel_count, int)

    @pytest.mark.parametrize(
        "day_w, night_wh",
        [(1, 0), (250, 1800), (333.3, 0), (0, 4321), (5000, 20_000), (799.9, 1)],
    )
    def test_never_under_provisions(self, day_w, night_wh):
        spec = size_panels(day_w, night_wh, 4.5, 0.75, 1.2, 400, 0.8)
        assert spec.panel_count >= spec.required_wattage / (400 * 0.8)
        assert spec.panel_count * 400 * 0.8 >= spec.required_wattage

    def test_monotonic_in_both_loads(self):
        counts_day = [size_panels(d, 1000, 5).panel_count for d in (0, 300, 900, 3000)]
        counts_night = [size_panels(300, n, 5).panel_count for n in (0, 1000, 4000, 9000)]
        assert counts_day == sorted(counts_day)
        assert counts_night == sorted(counts_night)

    def test_fewer_sun_hours_more_panels(self):
        assert size_panels(100, 5000, 4.2).panel_count >= size_panels(100, 5000, 6.0).panel_count

    @pytest.mark.parametrize(
        "kwargs, field",
        [
            ({"peak_sun_hours": 0}, "peak_sun_hours"),
            ({"system_efficiency": 0}, "system_efficiency"),
            ({"headroom_factor": 0.9}, "headroom_factor"),
            ({"unit_panel_rated_w": 0}, "unit_panel_rated_w"),
            ({"derating_factor": 1.5}, "derating_factor"),
            ({"daytime_load_w": -5}, "daytime_load_w"),
        ],
    )
    def test_invalid_inputs_raise(self, kwargs, field):
        args = {"daytime_load_w": 250, "night_energy_wh": 1800, "peak_sun_hours": 5}
        args.update(kwargs)
        with pytest.raises(InvalidInputError) as excinfo:
            size_panels(**args)
        assert excinfo.value.field == field

    def test_numpy_inputs(self):
        """A numpy-summed day load sizes the same as plain floats."""
        spec = size_panels(np.sum(np.array([100, 150])), np.int64(1800), np.float32(5))
        assert spec.required_wattage == pytest.approx(576.0)
        assert spec.panel_count == 2


class TestDailyGeneration:
    def test_generation(self):
        assert daily_generation_kwh(2400, 4.5, 0.8) == pytest.approx(8.64)

    def test_zero_watts(self):
        assert daily_generation_kwh(0, 5) == 0.0


# ======================================================================
# Regional sun hours
# ======================================================================


class TestSunHours:
    def test_measured_state(self):
        assert get_peak_sun_hours("Kano") == 5.8
        assert get_peak_sun_hours("lagos") == 4.5

    def test_unmeasured_state_uses_default(self):
        assert get_peak_sun_hours("Enugu") == DEFAULT_PEAK_SUN_HOURS

    def test_abuja_alias(self):
        assert canonical_state("Abuja") == "FCT"
        assert get_peak_sun_hours("abuja") == 5.2

    def test_unknown_state_raises(self):
        with pytest.raises(InvalidInputError, match="Nigerian state"):
            get_peak_sun_hours("Atlantis")

    def test_table_covers_all_states(self):
        table = sun_hours_table()
        assert len(NIGERIAN_STATES) == 37
        assert set(table) == set(NIGERIAN_STATES)
        assert all(v > 0 for v in table.values())
