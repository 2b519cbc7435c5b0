"""Resource builders: desired Decider and Metric for a PodAutoscaler."""

from autoscaler.resources.decider import make_decider
from autoscaler.resources.metric import make_metric

__all__ = ["make_decider", "make_metric"]
