"""Household load aggregation and reference appliance ratings."""

from .aggregator import Appliance, LoadSummary, compute_load_summary
from .appliances import STANDARD_APPLIANCES, find_standard_power, standard_power_rating

__all__ = [
    "Appliance",
    "LoadSummary",
    "compute_load_summary",
    "STANDARD_APPLIANCES",
    "find_standard_power",
    "standard_power_rating",
]
