"""Peak sun hours by Nigerian state.

Measured values exist for the states below; every other state uses the
national average of 5.0 h.
"""

from __future__ import annotations

from engine.sizing.errors import InvalidInputError

DEFAULT_PEAK_SUN_HOURS = 5.0

NIGERIAN_STATES: tuple[str, ...] = (
    "Abia", "Adamawa", "Akwa Ibom", "Anambra", "Bauchi", "Bayelsa", "Benue",
    "Borno", "Cross River", "Delta", "Ebonyi", "Edo", "Ekiti", "Enugu", "FCT",
    "Gombe", "Imo", "Jigawa", "Kaduna", "Kano", "Katsina", "Kebbi", "Kogi",
    "Kwara", "Lagos", "Nasarawa", "Niger", "Ogun", "Ondo", "Osun", "Oyo",
    "Plateau", "Rivers", "Sokoto", "Taraba", "Yobe", "Zamfara",
)

PEAK_SUN_HOURS: dict[str, float] = {
    "Lagos": 4.5,
    "Kano": 5.8,
    "Kaduna": 5.5,
    "FCT": 5.2,
    "Rivers": 4.2,
    "Ogun": 4.8,
    "Plateau": 5.5,
    "Katsina": 6.0,
    "Bauchi": 5.7,
}

_CANONICAL = {state.lower(): state for state in NIGERIAN_STATES}
_CANONICAL["abuja"] = "FCT"


def canonical_state(state: str) -> str:
    """Return the table spelling of ``state`` (case-insensitive)."""
    try:
        return _CANONICAL[state.strip().lower()]
    except KeyError:
        raise InvalidInputError("state", state, "a Nigerian state or FCT") from None


def get_peak_sun_hours(state: str) -> float:
    """Peak sun hours for ``state``, falling back to the national default."""
    return PEAK_SUN_HOURS.get(canonical_state(state), DEFAULT_PEAK_SUN_HOURS)


def sun_hours_table() -> dict[str, float]:
    """Every state with its effective peak sun hours."""
    return {state: get_peak_sun_hours(state) for state in NIGERIAN_STATES}
