"""Decider construction from a PodAutoscaler and cluster policy. Pure; no I/O, no error channel."""

from autoscaler.config.autoscaler_config import AutoscalerConfig
from autoscaler.core.context import logger_from_context
from autoscaler.domain.models.decider import Decider, DeciderSpec
from autoscaler.domain.models.pod_autoscaler import PodAutoscaler
from autoscaler.resources.metric import make_metric


def make_decider(pa: PodAutoscaler, config: AutoscalerConfig, service_name: str) -> Decider:
    """
    Resolve the PA's container concurrency, target annotation and panic threshold
    annotation against cluster config into a Decider.

    The target annotation can only lower the container-concurrency-based target.
    The logger comes from the current reconcile context.
    """
    logger = logger_from_context()

    target = config.target_concurrency(pa.spec.container_concurrency)
    annotation_target = pa.target()
    if annotation_target is not None:
        if annotation_target > target:
            # More requests per pod than the container can handle; keep the container-based target.
            logger.warning(
                "Ignoring target of %d because it would underprovision the Revision.",
                annotation_target,
            )
        else:
            logger.debug("Using target of %d", annotation_target)
            target = float(annotation_target)

    panic_threshold_percentage = pa.panic_threshold_percentage()
    if panic_threshold_percentage is None:
        panic_threshold_percentage = config.panic_threshold_percentage
    panic_threshold = target * panic_threshold_percentage / 100.0

    metric_spec = make_metric(pa, config).spec
    return Decider(
        metadata=pa.metadata.deep_copy(),
        spec=DeciderSpec(
            tick_interval=config.tick_interval,
            max_scale_up_rate=config.max_scale_up_rate,
            target_concurrency=target,
            panic_threshold=panic_threshold,
            metric_spec=metric_spec,
            service_name=service_name,
        ),
    )
