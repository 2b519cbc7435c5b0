"""Decider: resolved control-loop parameters for one revision."""

from datetime import timedelta

from pydantic import BaseModel

from autoscaler.domain.models.meta import ObjectMeta
from autoscaler.domain.models.metric import MetricSpec


class DeciderSpec(BaseModel):
    """
    Parameters the control loop runs with. target_concurrency and panic_threshold
    are per-replica values and are kept fractional.
    """

    tick_interval: timedelta
    max_scale_up_rate: float
    target_concurrency: float
    panic_threshold: float
    metric_spec: MetricSpec
    service_name: str


class Decider(BaseModel):
    metadata: ObjectMeta
    spec: DeciderSpec

    @property
    def key(self) -> str:
        return self.metadata.key
