"""Domain layer: resource models, annotations, exceptions. Pure logic only."""

from autoscaler.domain.exceptions import DomainError, InvalidConfigError
from autoscaler.domain.models import (
    Decider,
    DeciderSpec,
    Metric,
    MetricSpec,
    ObjectMeta,
    OwnerReference,
    PodAutoscaler,
    PodAutoscalerSpec,
    PodAutoscalerStatus,
)

__all__ = [
    "Decider",
    "DeciderSpec",
    "DomainError",
    "InvalidConfigError",
    "Metric",
    "MetricSpec",
    "ObjectMeta",
    "OwnerReference",
    "PodAutoscaler",
    "PodAutoscalerSpec",
    "PodAutoscalerStatus",
]
