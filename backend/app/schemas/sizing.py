from pydantic import BaseModel, ConfigDict, Field


class ApplianceInput(BaseModel):
    """Appliance line as sent by the wizard.

    Accepts the canonical fields and the legacy spellings used by earlier
    clients (``power`` / ``power_rating`` / ``power_w``, ``hours`` /
    ``hoursPerDay`` with ``timeOfUse`` / ``period``).
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    type: str | None = None
    power_watts: float | None = Field(default=None, ge=0)
    power: float | None = Field(default=None, ge=0)
    power_rating: float | None = Field(default=None, ge=0)
    power_w: float | None = Field(default=None, ge=0)
    quantity: float = Field(default=1, ge=0)
    day_hours: float | None = Field(default=None, ge=0, le=24)
    night_hours: float | None = Field(default=None, ge=0, le=24)
    hours: float | None = Field(default=None, ge=0, le=24)
    hours_per_day: float | None = Field(default=None, ge=0, le=24, alias="hoursPerDay")
    time_of_use: str | None = Field(default=None, alias="timeOfUse")
    period: str | None = None


class SizingOverrides(BaseModel):
    """Per-request replacements for the configured formula constants."""

    power_factor: float | None = None
    surge_margin: float | None = None
    depth_of_discharge: float | None = None
    round_trip_efficiency: float | None = None
    safety_margin: float | None = None
    peak_sun_hours: float | None = None
    system_efficiency: float | None = None
    headroom_factor: float | None = None
    derating_factor: float | None = None
    unit_panel_rated_w: float | None = None
    system_voltage: float | None = None


# --- Load summary ---

class LoadSummaryRequest(BaseModel):
    appliances: list[ApplianceInput]


class LoadSummaryResponse(BaseModel):
    total_instantaneous_load_w: float
    day_energy_wh: float
    night_energy_wh: float
    daily_energy_wh: float
    warnings: list[str] = Field(default_factory=list)


# --- Individual sizers ---

class InverterRequest(BaseModel):
    peak_load_w: float
    power_factor: float | None = None
    surge_margin: float | None = None


class InverterSpecResponse(BaseModel):
    required_kva: float
    peak_load_w: float
    power_factor: float
    surge_margin: float


class BatteryRequest(BaseModel):
    night_energy_wh: float
    system_voltage: float
    chemistry: str | None = None
    depth_of_discharge: float | None = None
    round_trip_efficiency: float | None = None
    safety_margin: float | None = None


class BatterySpecResponse(BaseModel):
    required_capacity_ah: float
    required_energy_wh: float
    system_voltage: float
    night_energy_wh: float
    depth_of_discharge: float
    round_trip_efficiency: float
    safety_margin: float
    battery_needed: bool


class BatteryComparisonRequest(BaseModel):
    night_energy_wh: float
    system_voltage: float
    chemistries: list[str] | None = None
    safety_margin: float | None = None


class BatteryComparisonResponse(BaseModel):
    options: dict[str, BatterySpecResponse]


class PanelRequest(BaseModel):
    daytime_load_w: float
    night_energy_wh: float
    state: str | None = None
    peak_sun_hours: float | None = None
    system_efficiency: float | None = None
    headroom_factor: float | None = None
    unit_panel_rated_w: float | None = None
    derating_factor: float | None = None


class PanelSpecResponse(BaseModel):
    required_wattage: float
    panel_count: int
    recharge_power_w: float
    daytime_load_w: float
    unit_panel_rated_w: float
    derating_factor: float
    installed_wattage: float


# --- Complete recommendation ---

class RecommendRequest(BaseModel):
    appliances: list[ApplianceInput]
    state: str | None = None
    chemistry: str | None = None
    overrides: SizingOverrides = Field(default_factory=SizingOverrides)
    match_catalog: bool = True


class InverterOptionResponse(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_name: str
    kva_rating: float
    voltage_bus: float
    surge_capacity: str
    unit_cost: float
    quantity: int
    total_kva: float
    total_cost: float
    va_requirement: float
    is_merged: bool
    merge_configuration: str
    recommended: bool


class BatteryOptionResponse(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_name: str
    chemistry: str
    voltage: float
    capacity_kwh: float
    series_count: int
    parallel_count: int
    recommended_quantity: int
    total_capacity_kwh: float
    usable_capacity_kwh: float
    total_cost: float
    configuration: str
    is_optimal: bool


class PanelOptionResponse(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_name: str
    rated_power: float
    derating_factor: float
    recommended_quantity: int
    total_watts: float
    total_cost: float
    daily_generation_kwh: float
    recommended: bool


class RecommendLoadSummary(BaseModel):
    total_instantaneous_load_w: float
    day_energy_wh: float
    night_energy_wh: float
    daily_energy_wh: float
    daily_energy_kwh: float


class RecommendResponse(BaseModel):
    formula_version: str
    state: str | None
    peak_sun_hours: float
    system_voltage: float
    load_summary: RecommendLoadSummary
    inverter: InverterSpecResponse
    battery: BatterySpecResponse
    panels: PanelSpecResponse
    inverter_options: list[InverterOptionResponse]
    battery_options: list[BatteryOptionResponse]
    panel_options: list[PanelOptionResponse]
    total_system_cost: float
    config: dict[str, float | None]
    notes: list[str]
    warnings: list[str] = Field(default_factory=list)
