from pydantic_settings import BaseSettings

from engine.sizing.config import SizingConfig


class Settings(BaseSettings):
    model_config = {"env_prefix": "", "case_sensitive": False}

    # App
    environment: str = "development"
    debug: bool = True
    app_name: str = "Solar Sizer"
    cors_origins: str = "http://localhost:5173,http://localhost:8080"
    log_json: bool = False
    log_level: str = "INFO"

    # Rate limiting for full recommendations
    recommend_rate_limit: int = 30
    recommend_rate_window_seconds: int = 60
    recommend_rate_limit_enabled: bool = True

    # Sizing defaults (see engine.sizing.config.SizingConfig)
    sizing_power_factor: float = 0.8
    sizing_surge_margin: float = 1.2
    sizing_depth_of_discharge: float = 0.8
    sizing_round_trip_efficiency: float = 0.9
    sizing_safety_margin: float = 1.3
    sizing_peak_sun_hours: float = 5.0
    sizing_system_efficiency: float = 0.75
    sizing_headroom_factor: float = 1.2
    sizing_derating_factor: float = 0.8
    sizing_unit_panel_rated_w: float = 400.0
    sizing_system_voltage: float | None = None

    def sizing_config(self) -> SizingConfig:
        """Validated default formula constants for requests."""
        return SizingConfig(
            power_factor=self.sizing_power_factor,
            surge_margin=self.sizing_surge_margin,
            depth_of_discharge=self.sizing_depth_of_discharge,
            round_trip_efficiency=self.sizing_round_trip_efficiency,
            safety_margin=self.sizing_safety_margin,
            peak_sun_hours=self.sizing_peak_sun_hours,
            system_efficiency=self.sizing_system_efficiency,
            headroom_factor=self.sizing_headroom_factor,
            derating_factor=self.sizing_derating_factor,
            unit_panel_rated_w=self.sizing_unit_panel_rated_w,
            system_voltage=self.sizing_system_voltage,
        )


settings = Settings()
