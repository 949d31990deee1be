"""Battery chemistry constants.

Only depth of discharge and round-trip efficiency enter the capacity
formula; the sizer itself is chemistry-agnostic.
"""

from __future__ import annotations

from dataclasses import dataclass

from engine.sizing.errors import InvalidInputError


@dataclass(frozen=True)
class Chemistry:
    name: str
    depth_of_discharge: float
    round_trip_efficiency: float
    description: str = ""


CHEMISTRIES: dict[str, Chemistry] = {
    "lithium": Chemistry(
        name="lithium",
        depth_of_discharge=0.8,
        round_trip_efficiency=0.95,
        description="Long-lasting, maintenance-free, best value over time",
    ),
    "agm": Chemistry(
        name="agm",
        depth_of_discharge=0.5,
        round_trip_efficiency=0.9,
        description="Sealed, no maintenance required, good performance",
    ),
    "flooded": Chemistry(
        name="flooded",
        depth_of_discharge=0.5,
        round_trip_efficiency=0.85,
        description="Most affordable option, requires regular maintenance",
    ),
}


def get_chemistry(name: str) -> Chemistry:
    """Case-insensitive lookup in :data:`CHEMISTRIES`."""
    try:
        return CHEMISTRIES[name.strip().lower()]
    except KeyError:
        raise InvalidInputError(
            "chemistry", name, f"one of {sorted(CHEMISTRIES)}"
        ) from None
