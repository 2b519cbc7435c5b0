"""Autoscaling annotation keys and parsers. Pure functions; unparseable values read as absent."""

import math
from datetime import timedelta
from typing import Mapping, Optional

from autoscaler.core.durations import parse_duration

GROUP_NAME = "autoscaling.knative.dev"

CLASS_ANNOTATION_KEY = f"{GROUP_NAME}/class"
METRIC_ANNOTATION_KEY = f"{GROUP_NAME}/metric"
TARGET_ANNOTATION_KEY = f"{GROUP_NAME}/target"
MIN_SCALE_ANNOTATION_KEY = f"{GROUP_NAME}/minScale"
MAX_SCALE_ANNOTATION_KEY = f"{GROUP_NAME}/maxScale"
WINDOW_ANNOTATION_KEY = f"{GROUP_NAME}/window"
PANIC_WINDOW_PERCENTAGE_ANNOTATION_KEY = f"{GROUP_NAME}/panicWindowPercentage"
PANIC_THRESHOLD_PERCENTAGE_ANNOTATION_KEY = f"{GROUP_NAME}/panicThresholdPercentage"

KPA = "kpa.autoscaling.knative.dev"
HPA = "hpa.autoscaling.knative.dev"
CONCURRENCY = "concurrency"
CPU = "cpu"


def int_annotation(annotations: Mapping[str, str], key: str) -> Optional[int]:
    """Integer value of annotation, or None when missing or not an integer."""
    raw = annotations.get(key)
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def float_annotation(annotations: Mapping[str, str], key: str) -> Optional[float]:
    """Finite float value of annotation, or None when missing or unparseable."""
    raw = annotations.get(key)
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def duration_annotation(annotations: Mapping[str, str], key: str) -> Optional[timedelta]:
    raw = annotations.get(key)
    if raw is None:
        return None
    try:
        return parse_duration(raw)
    except ValueError:
        return None
