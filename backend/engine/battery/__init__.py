"""Battery bank sizing and chemistry constants."""

from .chemistry import CHEMISTRIES, Chemistry, get_chemistry
from .sizer import BatterySpec, size_battery, size_battery_by_chemistry

__all__ = [
    "CHEMISTRIES",
    "Chemistry",
    "get_chemistry",
    "BatterySpec",
    "size_battery",
    "size_battery_by_chemistry",
]
