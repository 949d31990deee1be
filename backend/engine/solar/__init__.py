"""
PV array sizing and regional solar resource.

Provides the panel sizer (daytime load vs. overnight recharge) and the
peak-sun-hours table for Nigerian states.
"""

from .panels import PanelSpec, daily_generation_kwh, size_panels
from .sun_hours import (
    DEFAULT_PEAK_SUN_HOURS,
    NIGERIAN_STATES,
    PEAK_SUN_HOURS,
    canonical_state,
    get_peak_sun_hours,
    sun_hours_table,
)

__all__ = [
    # panels
    "PanelSpec",
    "daily_generation_kwh",
    "size_panels",
    # sun_hours
    "DEFAULT_PEAK_SUN_HOURS",
    "NIGERIAN_STATES",
    "PEAK_SUN_HOURS",
    "canonical_state",
    "get_peak_sun_hours",
    "sun_hours_table",
]
