"""Abstract base class for ranking metrics."""

from abc import ABC, abstractmethod

from contest.models import AggregatedScore, ScoreView


class Metric(ABC):
    """Abstract base class for ranking metrics.

    A metric picks one number out of an AggregatedScore to sort by. Each
    metric can project either the summed or the averaged form of that
    number. Metrics are registered via the @register_metric decorator in
    contest/metrics/__init__.py.
    """

    @property
    @abstractmethod
    def key(self) -> str:
        """Short identifier used to select this metric."""
        pass

    @property
    @abstractmethod
    def label(self) -> str:
        """Human-readable name of this metric."""
        pass

    @abstractmethod
    def total(self, score: AggregatedScore) -> float:
        pass

    @abstractmethod
    def average(self, score: AggregatedScore) -> float:
        pass

    def value(self, score: AggregatedScore, view: ScoreView) -> float:
        if view is ScoreView.TOTAL:
            return self.total(score)
        return self.average(score)
