"""Tests for the ranking engine."""

from tests.conftest import ADMIN_VIEWER, PUBLIC_VIEWER, ranking_ids

from contest.metrics.categories import CrostaMetric, MozzarellaMetric
from contest.metrics.overall import OverallMetric
from contest.models import AggregatedScore, ScoreView
from contest.ranking import rank


def score(entry_id, totals, count=1, name=None, contestant=None):
    return AggregatedScore(
        entry_id=entry_id,
        name=name or entry_id.upper(),
        contestant_name=contestant,
        category_totals=tuple(totals),
        vote_count=count,
    )


def flat(entry_id, per_category, count=1, **kwargs):
    return score(entry_id, [per_category * count] * 5, count, **kwargs)


class TestRank:
    def setup_method(self):
        self.metric = OverallMetric()

    def test_descending(self):
        scores = [flat("a", 3), flat("b", 9), flat("c", 6)]
        assert ranking_ids(rank(scores, self.metric)) == ["b", "c", "a"]

    def test_ties_get_distinct_ranks(self):
        """Overall values [9, 9, 5] rank 1, 2, 3."""
        scores = [flat("a", 9), flat("b", 9), flat("c", 5)]
        result = rank(scores, self.metric)
        assert [r.rank for r in result] == [1, 2, 3]
        assert ranking_ids(result) == ["a", "b", "c"]

    def test_ties_keep_arrival_order(self):
        scores = [flat("c", 5), flat("b", 9), flat("z", 5), flat("a", 9)]
        assert ranking_ids(rank(scores, self.metric)) == ["b", "a", "c", "z"]

    def test_ties_not_alphabetical(self):
        scores = [flat("zeta", 7), flat("alpha", 7)]
        assert ranking_ids(rank(scores, self.metric)) == ["zeta", "alpha"]

    def test_idempotent(self):
        scores = [flat("a", 4), flat("b", 4), flat("c", 8), flat("d", 4)]
        first = rank(scores, self.metric)
        for _ in range(5):
            assert rank(scores, self.metric) == first

    def test_zero_vote_entry_included(self):
        scores = [flat("a", 5), score("b", [0] * 5, count=0)]
        result = rank(scores, self.metric)
        assert ranking_ids(result) == ["a", "b"]
        assert result[1].overall_value == 0
        assert result[1].vote_count == 0

    def test_empty(self):
        assert rank([], self.metric) == []

    def test_average_and_total_views_differ(self):
        """Many mediocre votes win on total but lose on average."""
        popular = flat("popular", 5, count=4)
        excellent = flat("excellent", 9, count=1)
        assert ranking_ids(rank([popular, excellent], self.metric, view=ScoreView.AVERAGE)) == [
            "excellent", "popular",
        ]
        assert ranking_ids(rank([popular, excellent], self.metric, view=ScoreView.TOTAL)) == [
            "popular", "excellent",
        ]

    def test_values_follow_view(self):
        result = rank([flat("a", 6, count=2)], self.metric, view=ScoreView.TOTAL)
        assert result[0].overall_value == 60
        assert result[0].category_values == (12, 12, 12, 12, 12)

        result = rank([flat("a", 6, count=2)], self.metric, view=ScoreView.AVERAGE)
        assert result[0].overall_value == 6.0
        assert result[0].category_values == (6.0, 6.0, 6.0, 6.0, 6.0)


class TestCategoryRanking:
    def test_by_single_category(self):
        scores = [
            score("a", [10, 0, 0, 0, 0]),
            score("b", [0, 0, 10, 0, 0]),
        ]
        assert ranking_ids(rank(scores, MozzarellaMetric())) == ["a", "b"]
        assert ranking_ids(rank(scores, CrostaMetric())) == ["b", "a"]

    def test_category_ties_stable(self):
        scores = [score("a", [5, 1, 0, 0, 0]), score("b", [5, 9, 0, 0, 0])]
        result = rank(scores, MozzarellaMetric())
        assert ranking_ids(result) == ["a", "b"]
        assert [r.rank for r in result] == [1, 2]


class TestRedaction:
    def setup_method(self):
        self.scores = [
            flat("p1", 4, name="Margherita", contestant="Mario Rossi"),
            flat("p2", 8, name="Diavola", contestant="Luigi Verdi"),
        ]

    def test_public_sees_labels(self):
        result = rank(self.scores, OverallMetric(), viewer=PUBLIC_VIEWER)
        assert [r.display_name for r in result] == ["Pizza #1", "Pizza #2"]
        assert all(r.contestant_name is None for r in result)

    def test_missing_viewer_is_anonymous(self):
        result = rank(self.scores, OverallMetric())
        assert [r.display_name for r in result] == ["Pizza #1", "Pizza #2"]
        assert all(r.contestant_name is None for r in result)

    def test_admin_sees_names(self):
        result = rank(self.scores, OverallMetric(), viewer=ADMIN_VIEWER)
        assert [r.display_name for r in result] == ["Diavola", "Margherita"]
        assert [r.contestant_name for r in result] == ["Luigi Verdi", "Mario Rossi"]

    def test_custom_label(self):
        result = rank(self.scores, OverallMetric(), anonymous_label="Entry {rank}")
        assert [r.display_name for r in result] == ["Entry 1", "Entry 2"]
