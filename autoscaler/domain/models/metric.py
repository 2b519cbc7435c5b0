"""Metric resource: which windows the autoscaler aggregates over and where it scrapes."""

from datetime import timedelta

from pydantic import BaseModel

from autoscaler.domain.models.meta import ObjectMeta


class MetricSpec(BaseModel):
    stable_window: timedelta
    panic_window: timedelta
    scrape_target: str


class Metric(BaseModel):
    metadata: ObjectMeta
    spec: MetricSpec
