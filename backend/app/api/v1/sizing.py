from fastapi import APIRouter, Request

from app.config import settings
from app.core.rate_limit import recommend_limiter
from app.schemas.sizing import (
    BatteryComparisonRequest,
    BatteryComparisonResponse,
    BatteryRequest,
    BatterySpecResponse,
    InverterRequest,
    InverterSpecResponse,
    LoadSummaryRequest,
    LoadSummaryResponse,
    PanelRequest,
    PanelSpecResponse,
    RecommendRequest,
    RecommendResponse,
)
from app.services.appliance_adapter import adapt_appliances

from engine.advisor.system import recommend_system
from engine.battery.chemistry import get_chemistry
from engine.battery.sizer import size_battery, size_battery_by_chemistry
from engine.catalog.products import DEFAULT_CATALOG
from engine.inverter.sizer import size_inverter
from engine.load.aggregator import compute_load_summary
from engine.solar.panels import size_panels
from engine.solar.sun_hours import get_peak_sun_hours

router = APIRouter()


def _pick(value: float | None, default: float) -> float:
    return default if value is None else value


@router.post(
    "/load-summary",
    response_model=LoadSummaryResponse,
    summary="Aggregate appliance load",
)
async def load_summary(body: LoadSummaryRequest):
    appliances, warnings = adapt_appliances(body.appliances)
    summary = compute_load_summary(appliances)
    return LoadSummaryResponse(**summary.to_dict(), warnings=warnings)


@router.post(
    "/inverter",
    response_model=InverterSpecResponse,
    summary="Size inverter",
    description="Required apparent power (kVA) for a peak daytime load. "
    "The value is continuous; matching to an offered tier is done by the catalog.",
)
async def inverter(body: InverterRequest):
    defaults = settings.sizing_config()
    spec = size_inverter(
        body.peak_load_w,
        power_factor=_pick(body.power_factor, defaults.power_factor),
        surge_margin=_pick(body.surge_margin, defaults.surge_margin),
    )
    return InverterSpecResponse(**spec.to_dict())


@router.post(
    "/battery",
    response_model=BatterySpecResponse,
    summary="Size battery bank",
)
async def battery(body: BatteryRequest):
    defaults = settings.sizing_config()
    depth_of_discharge = defaults.depth_of_discharge
    round_trip_efficiency = defaults.round_trip_efficiency
    if body.chemistry is not None:
        chem = get_chemistry(body.chemistry)
        depth_of_discharge = chem.depth_of_discharge
        round_trip_efficiency = chem.round_trip_efficiency

    spec = size_battery(
        body.night_energy_wh,
        body.system_voltage,
        depth_of_discharge=_pick(body.depth_of_discharge, depth_of_discharge),
        round_trip_efficiency=_pick(body.round_trip_efficiency, round_trip_efficiency),
        safety_margin=_pick(body.safety_margin, defaults.safety_margin),
    )
    return BatterySpecResponse(**spec.to_dict())


@router.post(
    "/battery/chemistries",
    response_model=BatteryComparisonResponse,
    summary="Compare battery chemistries",
    description="Evaluate the battery formula once per chemistry for side-by-side comparison.",
)
async def battery_by_chemistry(body: BatteryComparisonRequest):
    defaults = settings.sizing_config()
    specs = size_battery_by_chemistry(
        body.night_energy_wh,
        body.system_voltage,
        chemistries=body.chemistries,
        safety_margin=_pick(body.safety_margin, defaults.safety_margin),
    )
    return BatteryComparisonResponse(
        options={name: BatterySpecResponse(**spec.to_dict()) for name, spec in specs.items()}
    )


@router.post(
    "/panels",
    response_model=PanelSpecResponse,
    summary="Size PV array",
)
async def panels(body: PanelRequest):
    defaults = settings.sizing_config()
    if body.peak_sun_hours is not None:
        peak_sun_hours = body.peak_sun_hours
    elif body.state is not None:
        peak_sun_hours = get_peak_sun_hours(body.state)
    else:
        peak_sun_hours = defaults.peak_sun_hours

    spec = size_panels(
        body.daytime_load_w,
        body.night_energy_wh,
        peak_sun_hours,
        system_efficiency=_pick(body.system_efficiency, defaults.system_efficiency),
        headroom_factor=_pick(body.headroom_factor, defaults.headroom_factor),
        unit_panel_rated_w=_pick(body.unit_panel_rated_w, defaults.unit_panel_rated_w),
        derating_factor=_pick(body.derating_factor, defaults.derating_factor),
    )
    return PanelSpecResponse(**spec.to_dict())


@router.post(
    "/recommend",
    response_model=RecommendResponse,
    summary="Recommend a complete system",
    description="Aggregate the appliance list, size inverter, battery bank and array, "
    "and match each requirement against the equipment catalog.",
)
async def recommend(body: RecommendRequest, request: Request):
    recommend_limiter.check(request)

    appliances, warnings = adapt_appliances(body.appliances)
    config = settings.sizing_config().replace(**body.overrides.model_dump())

    result = recommend_system(
        appliances,
        config,
        state=body.state,
        chemistry=body.chemistry,
        catalog=DEFAULT_CATALOG if body.match_catalog else None,
    )
    return RecommendResponse(**result.to_dict(), warnings=warnings)
