"""Metric construction: aggregation windows and scrape target for a PodAutoscaler."""

from autoscaler.config.autoscaler_config import AutoscalerConfig
from autoscaler.domain.models.metric import Metric, MetricSpec
from autoscaler.domain.models.pod_autoscaler import PodAutoscaler


def make_metric(pa: PodAutoscaler, config: AutoscalerConfig) -> Metric:
    """
    Stable window from the window annotation or cluster config; panic window is a
    percentage of it. Scrapes the metrics service recorded in status, else the spec's service.
    """
    stable_window = pa.window()
    if stable_window is None:
        stable_window = config.stable_window
    panic_window_percentage = pa.panic_window_percentage()
    if panic_window_percentage is None:
        panic_window_percentage = config.panic_window_percentage
    panic_window = stable_window * panic_window_percentage / 100.0
    return Metric(
        metadata=pa.metadata.deep_copy(),
        spec=MetricSpec(
            stable_window=stable_window,
            panic_window=panic_window,
            scrape_target=pa.status.service_name or pa.spec.service_name,
        ),
    )
