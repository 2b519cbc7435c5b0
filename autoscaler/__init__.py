"""Per-revision autoscaler: Decider construction from PodAutoscalers and cluster policy."""
