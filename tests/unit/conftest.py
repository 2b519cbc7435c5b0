"""Shared fixtures: PodAutoscaler builder and cluster configs with a known target ceiling."""

from datetime import timedelta

import pytest

from autoscaler.config.autoscaler_config import AutoscalerConfig
from autoscaler.domain.annotations import (
    PANIC_THRESHOLD_PERCENTAGE_ANNOTATION_KEY,
    TARGET_ANNOTATION_KEY,
)
from autoscaler.domain.models import ObjectMeta, OwnerReference, PodAutoscaler, PodAutoscalerSpec


def make_pa(
    namespace: str = "test-namespace",
    name: str = "test-revision",
    container_concurrency: int = 10,
    target: str | None = None,
    panic_threshold_percentage: str | None = None,
    annotations: dict[str, str] | None = None,
    labels: dict[str, str] | None = None,
    service_name: str = "test-revision-private",
) -> PodAutoscaler:
    ann = dict(annotations or {})
    if target is not None:
        ann[TARGET_ANNOTATION_KEY] = target
    if panic_threshold_percentage is not None:
        ann[PANIC_THRESHOLD_PERCENTAGE_ANNOTATION_KEY] = panic_threshold_percentage
    return PodAutoscaler(
        metadata=ObjectMeta(
            namespace=namespace,
            name=name,
            labels=labels if labels is not None else {"serving.knative.dev/revision": name},
            annotations=ann,
            owner_references=[
                OwnerReference(
                    api_version="serving.knative.dev/v1alpha1",
                    kind="Revision",
                    name=name,
                    uid="rev-uid-1",
                    controller=True,
                )
            ],
            uid="pa-uid-1",
        ),
        spec=PodAutoscalerSpec(container_concurrency=container_concurrency, service_name=service_name),
    )


@pytest.fixture
def config() -> AutoscalerConfig:
    """cc=10 resolves to a base target of 10; default panic threshold 200%."""
    return AutoscalerConfig(
        container_concurrency_target_percentage=100.0,
        container_concurrency_target_default=100.0,
        max_scale_up_rate=10.0,
        stable_window=timedelta(seconds=60),
        panic_window_percentage=10.0,
        panic_threshold_percentage=200.0,
        tick_interval=timedelta(seconds=2),
    )


@pytest.fixture
def pa_factory():
    return make_pa
