from fastapi import APIRouter

from app.config import settings

from engine.battery.chemistry import CHEMISTRIES
from engine.load.appliances import STANDARD_APPLIANCES
from engine.sizing.config import DAY_PERIOD_HOURS, FORMULA_VERSION, NIGHT_PERIOD_HOURS
from engine.solar.sun_hours import (
    DEFAULT_PEAK_SUN_HOURS,
    canonical_state,
    get_peak_sun_hours,
    sun_hours_table,
)

router = APIRouter()


@router.get(
    "/sun-hours",
    summary="List peak sun hours",
    description="Peak sun hours for every Nigerian state. States without measurements use the national default.",
)
async def list_sun_hours():
    return {
        "default_peak_sun_hours": DEFAULT_PEAK_SUN_HOURS,
        "states": sun_hours_table(),
    }


@router.get("/sun-hours/{state}", summary="Peak sun hours for one state")
async def state_sun_hours(state: str):
    name = canonical_state(state)
    return {"state": name, "peak_sun_hours": get_peak_sun_hours(name)}


@router.get("/chemistries", summary="List battery chemistries")
async def list_chemistries():
    return [
        {
            "name": c.name,
            "depth_of_discharge": c.depth_of_discharge,
            "round_trip_efficiency": c.round_trip_efficiency,
            "description": c.description,
        }
        for c in CHEMISTRIES.values()
    ]


@router.get("/appliances", summary="List standard appliance ratings")
async def list_appliances():
    return [{"name": name, "power_watts": watts} for name, watts in STANDARD_APPLIANCES.items()]


@router.get("/formula", summary="Active formula constants")
async def formula():
    return {
        "formula_version": FORMULA_VERSION,
        "day_period_hours": DAY_PERIOD_HOURS,
        "night_period_hours": NIGHT_PERIOD_HOURS,
        "defaults": settings.sizing_config().to_dict(),
    }
