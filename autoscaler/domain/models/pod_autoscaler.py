"""PodAutoscaler: declarative scaling intent for a revision. Annotation accessors return None when absent."""

from datetime import timedelta
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from autoscaler.domain import annotations
from autoscaler.domain.models.meta import ObjectMeta


class ProtocolType(str, Enum):
    HTTP1 = "http1"
    H2C = "h2c"


class ScaleTargetRef(BaseModel):
    api_version: str = "apps/v1"
    kind: str = "Deployment"
    name: str


class PodAutoscalerSpec(BaseModel):
    container_concurrency: int = Field(0, ge=0, description="0 means unbounded; cluster policy decides")
    scale_target_ref: Optional[ScaleTargetRef] = None
    service_name: str = ""
    protocol_type: ProtocolType = ProtocolType.HTTP1


class PodAutoscalerStatus(BaseModel):
    service_name: Optional[str] = None


class PodAutoscaler(BaseModel):
    metadata: ObjectMeta
    spec: PodAutoscalerSpec = Field(default_factory=PodAutoscalerSpec)
    status: PodAutoscalerStatus = Field(default_factory=PodAutoscalerStatus)

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    @property
    def name(self) -> str:
        return self.metadata.name

    def class_(self) -> str:
        return self.metadata.annotations.get(annotations.CLASS_ANNOTATION_KEY, annotations.KPA)

    def metric(self) -> str:
        return self.metadata.annotations.get(annotations.METRIC_ANNOTATION_KEY, annotations.CONCURRENCY)

    def target(self) -> Optional[int]:
        """Requested per-replica target concurrency. Not range-checked."""
        return annotations.int_annotation(self.metadata.annotations, annotations.TARGET_ANNOTATION_KEY)

    def panic_threshold_percentage(self) -> Optional[float]:
        return annotations.float_annotation(
            self.metadata.annotations, annotations.PANIC_THRESHOLD_PERCENTAGE_ANNOTATION_KEY
        )

    def panic_window_percentage(self) -> Optional[float]:
        return annotations.float_annotation(
            self.metadata.annotations, annotations.PANIC_WINDOW_PERCENTAGE_ANNOTATION_KEY
        )

    def window(self) -> Optional[timedelta]:
        return annotations.duration_annotation(self.metadata.annotations, annotations.WINDOW_ANNOTATION_KEY)

    def scale_bounds(self) -> tuple[int, int]:
        """(min, max) replica bounds from annotations; 0 when absent."""
        ann = self.metadata.annotations
        min_scale = annotations.int_annotation(ann, annotations.MIN_SCALE_ANNOTATION_KEY) or 0
        max_scale = annotations.int_annotation(ann, annotations.MAX_SCALE_ANNOTATION_KEY) or 0
        return min_scale, max_scale
