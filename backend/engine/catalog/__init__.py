"""Equipment catalog and requirement-to-product matching."""

from .matching import (
    BatteryOption,
    InverterOption,
    PanelOption,
    match_battery_options,
    match_inverter,
    match_panel_options,
)
from .products import (
    DEFAULT_CATALOG,
    BatteryProduct,
    EquipmentCatalog,
    InverterProduct,
    PanelProduct,
    catalog_to_dict,
)

__all__ = [
    "BatteryOption",
    "InverterOption",
    "PanelOption",
    "match_battery_options",
    "match_inverter",
    "match_panel_options",
    "DEFAULT_CATALOG",
    "BatteryProduct",
    "EquipmentCatalog",
    "InverterProduct",
    "PanelProduct",
    "catalog_to_dict",
]
