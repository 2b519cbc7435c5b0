"""Domain models. Pure resource types."""

from autoscaler.domain.models.decider import Decider, DeciderSpec
from autoscaler.domain.models.meta import ObjectMeta, OwnerReference
from autoscaler.domain.models.metric import Metric, MetricSpec
from autoscaler.domain.models.pod_autoscaler import (
    PodAutoscaler,
    PodAutoscalerSpec,
    PodAutoscalerStatus,
    ProtocolType,
    ScaleTargetRef,
)

__all__ = [
    "Decider",
    "DeciderSpec",
    "Metric",
    "MetricSpec",
    "ObjectMeta",
    "OwnerReference",
    "PodAutoscaler",
    "PodAutoscalerSpec",
    "PodAutoscalerStatus",
    "ProtocolType",
    "ScaleTargetRef",
]
