"""Cluster-wide autoscaler policy. Immutable snapshot, loaded from settings or the config-autoscaler map."""

from datetime import timedelta
from functools import lru_cache
from typing import Any, Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

from autoscaler.config.settings import get_settings
from autoscaler.core.durations import coerce_duration
from autoscaler.domain.exceptions import InvalidConfigError

CONFIG_MAP_NAME = "config-autoscaler"

# Lower bound on aggregation windows; the control loop cannot react faster than this.
WINDOW_MIN = timedelta(seconds=6)

_SETTINGS_PREFIX = "autoscaler_"


class AutoscalerConfig(BaseModel):
    """
    Cluster autoscaler configuration.
    target_concurrency() is the ceiling a workload is believed to sustain per replica.
    """

    model_config = {"frozen": True}

    container_concurrency_target_percentage: float = Field(70.0, gt=0.0, le=100.0)
    container_concurrency_target_default: float = Field(100.0, gt=0.0)
    max_scale_up_rate: float = Field(10.0, gt=1.0)
    stable_window: timedelta = timedelta(seconds=60)
    panic_window_percentage: float = Field(10.0, ge=1.0, le=100.0)
    panic_threshold_percentage: float = Field(200.0, gt=0.0)
    tick_interval: timedelta = timedelta(seconds=2)
    scale_to_zero_grace_period: timedelta = timedelta(seconds=30)
    enable_scale_to_zero: bool = True

    @field_validator(
        "stable_window",
        "tick_interval",
        "scale_to_zero_grace_period",
        mode="before",
    )
    @classmethod
    def parse_go_duration(cls, v: Any) -> Any:
        return coerce_duration(v)

    @field_validator("stable_window", "scale_to_zero_grace_period")
    @classmethod
    def window_at_least_minimum(cls, v: timedelta) -> timedelta:
        if v < WINDOW_MIN:
            raise ValueError(f"must be at least {WINDOW_MIN.total_seconds():g}s, got {v.total_seconds():g}s")
        return v

    @field_validator("tick_interval")
    @classmethod
    def tick_interval_positive(cls, v: timedelta) -> timedelta:
        if v <= timedelta(0):
            raise ValueError("must be positive")
        return v

    @property
    def panic_window(self) -> timedelta:
        return self.stable_window * self.panic_window_percentage / 100.0

    def target_concurrency(self, container_concurrency: int) -> float:
        """
        Per-replica target for a workload with the given container concurrency.
        0 (unbounded) falls back to the cluster default.
        """
        if container_concurrency == 0:
            return self.container_concurrency_target_default
        return container_concurrency * self.container_concurrency_target_percentage / 100.0

    @classmethod
    def from_config_map(cls, data: Mapping[str, str]) -> "AutoscalerConfig":
        """
        Build from config-autoscaler map data (hyphenated keys, e.g. "max-scale-up-rate").
        Unknown keys are ignored. Raises InvalidConfigError naming every invalid field.
        """
        known = cls.model_fields.keys()
        values: dict[str, Any] = {}
        for raw_key, raw_value in data.items():
            field = raw_key.strip().replace("-", "_")
            if field in known:
                values[field] = raw_value.strip() if isinstance(raw_value, str) else raw_value
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            fields = ", ".join(
                f"{'.'.join(str(p) for p in err['loc']).replace('_', '-')}: {err['msg']}"
                for err in e.errors()
            )
            raise InvalidConfigError(f"invalid {CONFIG_MAP_NAME}: {fields}") from e


@lru_cache
def get_autoscaler_config() -> AutoscalerConfig:
    """Default cluster config from AUTOSCALER_* settings."""
    settings = get_settings()
    values = {
        name[len(_SETTINGS_PREFIX):]: value
        for name, value in settings.model_dump().items()
        if name.startswith(_SETTINGS_PREFIX)
    }
    try:
        return AutoscalerConfig.model_validate(values)
    except ValidationError as e:
        raise InvalidConfigError(f"invalid autoscaler settings: {e}") from e
