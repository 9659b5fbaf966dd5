"""Reduce an entry's votes to per-category sums."""

from typing import Iterable

from contest.models import NUM_CATEGORIES, AggregatedScore, Entry, Vote
from contest.visibility import FilteredEntry


def aggregate(entry: Entry, votes: Iterable[Vote]) -> AggregatedScore:
    """Sum each category across the entry's votes.

    Vote order does not matter. With no votes every total is 0, and so is
    every average derived from the result.

    Raises:
        ValueError: If a vote belongs to a different entry
    """
    totals = [0.0] * NUM_CATEGORIES
    count = 0
    for vote in votes:
        if vote.entry_id != entry.id:
            raise ValueError(
                f"Vote for entry {vote.entry_id} passed to aggregate for {entry.id}"
            )
        for i, value in enumerate(vote.scores.as_tuple()):
            totals[i] += value
        count += 1

    return AggregatedScore(
        entry_id=entry.id,
        name=entry.name,
        contestant_name=entry.contestant_name,
        category_totals=tuple(totals),
        vote_count=count,
    )


def aggregate_entries(filtered: Iterable[FilteredEntry]) -> list[AggregatedScore]:
    """Aggregate every filtered entry, keeping input order."""
    return [aggregate(f.entry, f.votes) for f in filtered]
