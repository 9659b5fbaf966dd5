"""Overall score across all five categories."""

from contest.metrics import register_metric
from contest.metrics.base import Metric
from contest.models import AggregatedScore


@register_metric
class OverallMetric(Metric):
    """Sum of the five category totals, or the mean of the category means."""

    @property
    def key(self) -> str:
        return "overall"

    @property
    def label(self) -> str:
        return "Overall"

    def total(self, score: AggregatedScore) -> float:
        return score.overall_total

    def average(self, score: AggregatedScore) -> float:
        return score.overall_average
