"""Metrics a leaderboard can be ranked by."""

from .base import Metric

# Metric registry - import metric modules here to register them
_metrics: list[type[Metric]] = []


class UnknownMetricError(KeyError):
    """Raised when no registered metric has the requested key."""
    pass


def register_metric(metric_class: type[Metric]) -> type[Metric]:
    """Decorator to register a metric class."""
    _metrics.append(metric_class)
    return metric_class


def get_all_metrics() -> list[Metric]:
    """Return instances of all registered metrics, in registration order."""
    return [metric_class() for metric_class in _metrics]


def get_metric(key: str) -> Metric:
    """Return an instance of the registered metric with the given key."""
    for metric in get_all_metrics():
        if metric.key == key:
            return metric
    raise UnknownMetricError(key)
