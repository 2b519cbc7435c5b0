# autoscaler/config/settings.py

from datetime import timedelta
from functools import lru_cache
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from autoscaler.core.durations import coerce_duration


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Application ---
    app_name: str = "kpa-decider"
    environment: Literal["dev", "test", "prod"] = "dev"
    version: str = "0.1.0"

    # --- Cluster autoscaler defaults (config-autoscaler) ---
    autoscaler_container_concurrency_target_percentage: float = 70.0
    autoscaler_container_concurrency_target_default: float = 100.0
    autoscaler_max_scale_up_rate: float = 10.0
    autoscaler_stable_window: timedelta = timedelta(seconds=60)
    autoscaler_panic_window_percentage: float = 10.0
    autoscaler_panic_threshold_percentage: float = 200.0
    autoscaler_tick_interval: timedelta = timedelta(seconds=2)
    autoscaler_scale_to_zero_grace_period: timedelta = timedelta(seconds=30)
    autoscaler_enable_scale_to_zero: bool = True

    # --- Observability ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator(
        "autoscaler_stable_window",
        "autoscaler_tick_interval",
        "autoscaler_scale_to_zero_grace_period",
        mode="before",
    )
    @classmethod
    def parse_go_duration(cls, v: Any) -> Any:
        return coerce_duration(v)


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
