"""Ordering aggregated entries into a leaderboard."""

from typing import Iterable

from contest.metrics.base import Metric
from contest.models import AggregatedScore, RankedEntry, ScoreView, ViewerContext

DEFAULT_ANONYMOUS_LABEL = "Pizza #{rank}"


def rank(
    scores: Iterable[AggregatedScore],
    metric: Metric,
    viewer: ViewerContext | None = None,
    view: ScoreView = ScoreView.AVERAGE,
    anonymous_label: str = DEFAULT_ANONYMOUS_LABEL,
) -> list[RankedEntry]:
    """Rank entries by a metric, highest first.

    Entries with equal values keep the order they arrived in; there is no
    secondary sort key. Ranks are list positions, so tied entries still get
    consecutive ranks (1, 2, 3 rather than 1, 1, 3).

    Only admin viewers see entry and contestant names. Anybody else,
    including a missing viewer, sees `anonymous_label` formatted with the
    entry's rank.
    """
    privileged = viewer is not None and viewer.is_admin
    ordered = sorted(scores, key=lambda s: metric.value(s, view), reverse=True)

    ranked = []
    for position, score in enumerate(ordered, start=1):
        if privileged:
            display_name = score.name
            contestant_name = score.contestant_name
        else:
            display_name = anonymous_label.format(rank=position)
            contestant_name = None
        ranked.append(RankedEntry(
            rank=position,
            entry_id=score.entry_id,
            display_name=display_name,
            category_values=score.category_values(view),
            overall_value=score.overall_value(view),
            vote_count=score.vote_count,
            contestant_name=contestant_name,
        ))
    return ranked
