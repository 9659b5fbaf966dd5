"""Tests for the metric registry."""

import pytest

from contest.metrics import UnknownMetricError, get_all_metrics, get_metric
from contest.metrics import categories  # noqa: F401
from contest.metrics.categories import ImpastoMetric
from contest.metrics.overall import OverallMetric
from contest.models import AggregatedScore, ScoreView

SCORE = AggregatedScore(
    entry_id="p1", name="Margherita", contestant_name=None,
    category_totals=(2, 4, 6, 8, 10), vote_count=2,
)


class TestRegistry:
    def test_all_metrics_registered(self):
        keys = [m.key for m in get_all_metrics()]
        assert keys == [
            "overall", "mozzarella", "pomodoro", "crosta", "impasto", "soddisfazione",
        ]

    def test_keys_unique(self):
        keys = [m.key for m in get_all_metrics()]
        assert len(keys) == len(set(keys))

    def test_get_metric(self):
        assert isinstance(get_metric("overall"), OverallMetric)
        assert isinstance(get_metric("impasto"), ImpastoMetric)

    def test_unknown_metric(self):
        with pytest.raises(UnknownMetricError):
            get_metric("ananas")


class TestValues:
    def test_overall(self):
        metric = OverallMetric()
        assert metric.label == "Overall"
        assert metric.value(SCORE, ScoreView.TOTAL) == 30
        assert metric.value(SCORE, ScoreView.AVERAGE) == 3.0

    def test_category(self):
        metric = ImpastoMetric()
        assert metric.label == "Tipo di Impasto"
        assert metric.value(SCORE, ScoreView.TOTAL) == 8
        assert metric.value(SCORE, ScoreView.AVERAGE) == 4.0

    @pytest.mark.parametrize("key", [
        "overall", "mozzarella", "pomodoro", "crosta", "impasto", "soddisfazione",
    ])
    def test_zero_votes_is_zero(self, key):
        empty = AggregatedScore("p1", "Margherita", None, (0, 0, 0, 0, 0), 0)
        metric = get_metric(key)
        assert metric.value(empty, ScoreView.TOTAL) == 0
        assert metric.value(empty, ScoreView.AVERAGE) == 0
