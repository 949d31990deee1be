"""Reference power ratings for common Nigerian household appliances.

Values are typical nameplate draws in watts, used when a user picks an
appliance by name without entering its rating.
"""

from __future__ import annotations

from engine.sizing.errors import InvalidInputError

STANDARD_APPLIANCES: dict[str, float] = {
    # Lighting
    "LED Bulb": 10,
    "CFL Bulb": 18,
    "Incandescent Bulb": 60,
    # Cooling
    "Ceiling Fan": 75,
    "Table Fan": 50,
    "Standing Fan": 65,
    "Air Conditioner (1HP)": 900,
    "Air Conditioner (1.5HP)": 1350,
    # Refrigeration
    "Refrigerator (Single Door)": 150,
    "Refrigerator (Double Door)": 250,
    "Freezer (Small)": 200,
    "Freezer (Large)": 350,
    # Entertainment and office
    "TV (32\" LED)": 65,
    "TV (43\" LED)": 85,
    "TV (55\" LED)": 120,
    "Home Theater": 150,
    "Radio": 20,
    "Laptop": 65,
    "Desktop Computer": 200,
    "Phone Charger": 10,
    "Router/Modem": 15,
    "Security Camera": 12,
    # Kitchen and laundry
    "Microwave": 800,
    "Blender": 400,
    "Electric Kettle": 1500,
    "Rice Cooker": 300,
    "Iron": 1200,
    "Washing Machine": 500,
    # Utility
    "Water Pump": 750,
}

_BY_LOWER = {name.lower(): watts for name, watts in STANDARD_APPLIANCES.items()}


def find_standard_power(name: str) -> float | None:
    """Reference rating (W) of a standard appliance, ignoring case; ``None`` if unknown."""
    watts = _BY_LOWER.get(name.strip().lower())
    return None if watts is None else float(watts)


def standard_power_rating(name: str) -> float:
    """Like :func:`find_standard_power` but raises for unknown names."""
    watts = find_standard_power(name)
    if watts is None:
        raise InvalidInputError("appliance", name, "a standard appliance name")
    return watts
