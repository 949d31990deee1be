"""Translate wizard appliance payloads into engine ``Appliance`` records.

Earlier clients named the same data differently (``power`` vs
``power_rating`` vs ``power_w``; a single ``hours`` figure plus a
Day / Night / Both flag instead of per-period hours).  All of that is
reconciled here so the engine only sees one shape.
"""

import logging
from collections.abc import Sequence

from app.schemas.sizing import ApplianceInput
from engine.load.aggregator import Appliance
from engine.load.appliances import find_standard_power
from engine.sizing.config import DAY_PERIOD_HOURS, NIGHT_PERIOD_HOURS
from engine.sizing.errors import InvalidInputError

logger = logging.getLogger(__name__)

_DAY = {"day"}
_NIGHT = {"night"}
_BOTH = {"both", "day and night", "day/night"}


def _label(payload: ApplianceInput, index: int) -> str:
    return payload.name or payload.type or f"appliance {index + 1}"


def _resolve_power(payload: ApplianceInput, index: int) -> float:
    """First non-zero rating, else the standard rating for the appliance name.

    Zero counts as "not entered", as in the wizard.  An explicit 0 with no
    standard rating to fall back on is kept as 0 W.
    """
    given = [
        value
        for value in (payload.power_watts, payload.power, payload.power_rating, payload.power_w)
        if value is not None
    ]
    for value in given:
        if value > 0:
            return value

    name = payload.type or payload.name
    watts = find_standard_power(name) if name else None
    if watts is not None:
        return watts
    if given:
        return 0.0
    raise InvalidInputError(
        f"appliances[{index}].power_watts",
        None,
        "given explicitly or implied by a standard appliance name",
    )


def _resolve_hours(payload: ApplianceInput, index: int) -> tuple[float, float]:
    if payload.day_hours is not None or payload.night_hours is not None:
        return payload.day_hours or 0.0, payload.night_hours or 0.0

    hours = payload.hours if payload.hours is not None else payload.hours_per_day
    hours = hours or 0.0
    time_of_use = (payload.time_of_use or payload.period or "both").strip().lower()

    if time_of_use in _DAY:
        return hours, 0.0
    if time_of_use in _NIGHT:
        return 0.0, hours
    if time_of_use in _BOTH:
        return hours / 2, hours / 2
    raise InvalidInputError(
        f"appliances[{index}].time_of_use", time_of_use, "one of Day, Night, Both"
    )


def to_appliance(payload: ApplianceInput, index: int = 0) -> Appliance:
    """Build the canonical appliance for one payload entry.

    Raises
    ------
    InvalidInputError
        If no power rating can be resolved or the time-of-use flag is unknown.
    """
    day_hours, night_hours = _resolve_hours(payload, index)
    return Appliance(
        power_watts=_resolve_power(payload, index),
        quantity=payload.quantity,
        day_hours=day_hours,
        night_hours=night_hours,
        name=_label(payload, index),
    )


def period_warnings(appliance: Appliance) -> list[str]:
    """Usage that does not fit the 11 h day or 13 h night period."""
    warnings = []
    label = appliance.name or "appliance"
    if appliance.day_hours > DAY_PERIOD_HOURS:
        warnings.append(
            f"{label}: {appliance.day_hours:g} day hours exceed the "
            f"{DAY_PERIOD_HOURS:g} h day period (07:00-18:00)"
        )
    if appliance.night_hours > NIGHT_PERIOD_HOURS:
        warnings.append(
            f"{label}: {appliance.night_hours:g} night hours exceed the "
            f"{NIGHT_PERIOD_HOURS:g} h night period (18:00-07:00)"
        )
    return warnings


def adapt_appliances(
    payloads: Sequence[ApplianceInput],
) -> tuple[list[Appliance], list[str]]:
    """Convert a payload list, collecting period-length warnings."""
    appliances = [to_appliance(p, i) for i, p in enumerate(payloads)]
    warnings = [w for a in appliances for w in period_warnings(a)]
    if warnings:
        logger.info("Appliance hours exceed period lengths: %d warning(s)", len(warnings))
    return appliances, warnings
