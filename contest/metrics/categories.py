"""Single-category metrics, one per scoring dimension."""

from contest.metrics import register_metric
from contest.metrics.base import Metric
from contest.models import CATEGORIES, AggregatedScore, Category

# The overall metric registers first so it leads every list of tabs
from contest.metrics import overall  # noqa: F401


class CategoryMetric(Metric):
    """Ranks by a single category's total or average."""

    category: Category

    @property
    def key(self) -> str:
        return self.category.key

    @property
    def label(self) -> str:
        return self.category.label

    def total(self, score: AggregatedScore) -> float:
        return score.category_total(self.category.index)

    def average(self, score: AggregatedScore) -> float:
        return score.category_average(self.category.index)


@register_metric
class MozzarellaMetric(CategoryMetric):
    category = CATEGORIES[0]


@register_metric
class PomodoroMetric(CategoryMetric):
    category = CATEGORIES[1]


@register_metric
class CrostaMetric(CategoryMetric):
    category = CATEGORIES[2]


@register_metric
class ImpastoMetric(CategoryMetric):
    category = CATEGORIES[3]


@register_metric
class SoddisfazioneMetric(CategoryMetric):
    category = CATEGORIES[4]
