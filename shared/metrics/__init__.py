"""Metrics module using Prometheus."""

from .prometheus_metrics import HTTPMetrics, get_metrics_handler

__all__ = [
    "HTTPMetrics",
    "get_metrics_handler",
]
