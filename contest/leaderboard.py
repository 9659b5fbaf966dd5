"""Orchestrator: run the read-side pipeline over a contest snapshot."""

from dataclasses import dataclass
from typing import Any, Iterable

import structlog

from contest.aggregation import aggregate_entries
from contest.completion import completion
from contest.config import settings
from contest.metrics import UnknownMetricError, get_all_metrics, get_metric
from contest.models import (
    CompletionReport,
    Entry,
    RankedEntry,
    ScoreView,
    UnknownEntryError,
    User,
    ViewerContext,
    Vote,
)
from contest.ranking import rank
from contest.visibility import eligible_voters, filter_entries

# Import metrics to register them
from contest.metrics import categories  # noqa: F401
from contest.metrics import overall  # noqa: F401

logger = structlog.get_logger(__name__)


class LeaderboardError(Exception):
    """Error building a leaderboard from the given parameters."""
    pass


@dataclass
class LeaderboardResult:
    """One ranked view of the contest."""
    metric_key: str
    metric_label: str
    view: ScoreView
    viewer: ViewerContext
    rankings: list[RankedEntry]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "metric": self.metric_key,
            "metric_label": self.metric_label,
            "view": self.view.value,
            "is_admin_view": self.viewer.is_admin,
            "rankings": [r.to_dict() for r in self.rankings],
        }


def _parse_view(view: str | ScoreView | None) -> ScoreView:
    if isinstance(view, ScoreView):
        return view
    try:
        return ScoreView(view or settings.default_view)
    except ValueError as e:
        raise LeaderboardError(f"Unknown score view: {view}") from e


def build_leaderboard(
    entries: Iterable[Entry],
    users: Iterable[User],
    votes: Iterable[Vote],
    viewer: ViewerContext,
    metric: str | None = None,
    view: str | ScoreView | None = None,
) -> LeaderboardResult:
    """Filter, aggregate and rank a contest snapshot for one viewer.

    Entries are put in listing order (order_position) before ranking, so
    entries with equal scores are shown in the contest's listing order.
    Each ranked entry carries the per-vote breakdown the viewer may see.

    Raises:
        LeaderboardError: If the metric key or view is unknown
        UnknownEntryError: If a vote refers to an entry not in `entries`
        UnknownUserError: If a vote's caster is not in `users`
        DuplicateVoteError: If two votes share a (user_id, entry_id) pair
    """
    metric_key = metric or settings.default_metric
    try:
        selected = get_metric(metric_key)
    except UnknownMetricError as e:
        raise LeaderboardError(f"Unknown metric: {metric_key}") from e
    score_view = _parse_view(view)

    ordered_entries = sorted(entries, key=lambda e: e.order_position)
    filtered = filter_entries(ordered_entries, votes, users, viewer)
    scores = aggregate_entries(filtered)
    rankings = rank(
        scores,
        selected,
        viewer=viewer,
        view=score_view,
        anonymous_label=settings.anonymous_entry_label,
    )
    breakdowns = {f.entry.id: f.breakdown for f in filtered}
    for ranked in rankings:
        ranked.breakdown = breakdowns[ranked.entry_id]

    logger.debug(
        "leaderboard_built",
        metric=selected.key,
        view=score_view.value,
        is_admin=viewer.is_admin,
        entries=len(rankings),
    )
    return LeaderboardResult(
        metric_key=selected.key,
        metric_label=selected.label,
        view=score_view,
        viewer=viewer,
        rankings=rankings,
    )


def build_all_leaderboards(
    entries: Iterable[Entry],
    users: Iterable[User],
    votes: Iterable[Vote],
    viewer: ViewerContext,
    view: str | ScoreView | None = None,
) -> list[LeaderboardResult]:
    """Build one leaderboard per registered metric (overall and each category)."""
    entries, users, votes = list(entries), list(users), list(votes)
    return [
        build_leaderboard(entries, users, votes, viewer, metric=m.key, view=view)
        for m in get_all_metrics()
    ]


def completion_report(
    entry_id: str,
    entries: Iterable[Entry],
    users: Iterable[User],
    votes: Iterable[Vote],
) -> CompletionReport:
    """Report who has and has not scored an entry.

    Administrators are not tracked. Votes are not visibility-filtered here:
    the report only says whether a vote exists.

    Raises:
        UnknownEntryError: If `entry_id` is not one of `entries`
    """
    if not any(e.id == entry_id for e in entries):
        raise UnknownEntryError(f"Unknown entry: {entry_id}")

    report = completion(
        entry_id,
        eligible_voters(users),
        [v for v in votes if v.entry_id == entry_id],
    )
    logger.debug(
        "completion_built",
        entry_id=entry_id,
        voted=report.total_voted,
        pending=report.total_pending,
    )
    return report
