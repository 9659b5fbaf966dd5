"""Privilege-dependent filtering of entries and votes.

Non-admin viewers never see administrator votes, contestant names, or which
voter gave which score. Admin viewers see everything. The filter only looks
at the viewer's is_admin flag and the casting user's is_admin flag in the
roster it is given.
"""

from dataclasses import dataclass, field, replace
from typing import Iterable

from contest.models import (
    BreakdownRow,
    DuplicateVoteError,
    Entry,
    UnknownEntryError,
    UnknownUserError,
    User,
    ViewerContext,
    Vote,
    index_by_id,
)


@dataclass
class FilteredEntry:
    """An entry with the votes a viewer is allowed to count.

    Attributes:
        entry: The entry, with contestant_name stripped when anonymous
        votes: Votes to aggregate, in arrival order
        breakdown: Per-vote rows for display
        anonymous: True when the viewer is not an admin
    """
    entry: Entry
    votes: list[Vote] = field(default_factory=list)
    breakdown: list[BreakdownRow] = field(default_factory=list)
    anonymous: bool = True


def eligible_voters(users: Iterable[User]) -> list[User]:
    """Return the non-admin users, in roster order."""
    return [u for u in users if not u.is_admin]


def _anonymous_breakdown(votes: list[Vote]) -> list[BreakdownRow]:
    # Sort by score values so that row order says nothing about who voted
    # or when; the sort key has no voter-specific component.
    ordered = sorted(
        (v.scores for v in votes),
        key=lambda s: (s.total, s.as_tuple()),
        reverse=True,
    )
    return [
        BreakdownRow(label=f"Voter {i}", scores=scores)
        for i, scores in enumerate(ordered, start=1)
    ]


def filter_entries(
    entries: Iterable[Entry],
    votes: Iterable[Vote],
    users: Iterable[User],
    viewer: ViewerContext,
) -> list[FilteredEntry]:
    """Group votes by entry and apply the viewer's visibility rules.

    Entries are returned in input order, each with its votes in arrival
    order. Inputs are not modified.

    Raises:
        UnknownEntryError: If a vote refers to an entry not in `entries`
        UnknownUserError: If a vote's caster is not in `users`
        DuplicateVoteError: If two votes share a (user_id, entry_id) pair
    """
    entries = list(entries)
    users_by_id = index_by_id(users)
    votes_by_entry: dict[str, list[Vote]] = {e.id: [] for e in entries}
    seen_keys: set[tuple[str, str]] = set()

    for vote in votes:
        if vote.entry_id not in votes_by_entry:
            raise UnknownEntryError(f"Vote refers to unknown entry: {vote.entry_id}")
        if vote.key in seen_keys:
            raise DuplicateVoteError(
                f"More than one vote by {vote.user_id} for entry {vote.entry_id}"
            )
        seen_keys.add(vote.key)
        caster = users_by_id.get(vote.user_id)
        if caster is None:
            raise UnknownUserError(f"Vote cast by unknown user: {vote.user_id}")
        if caster.is_admin and not viewer.is_admin:
            continue
        votes_by_entry[vote.entry_id].append(vote)

    filtered = []
    for entry in entries:
        entry_votes = votes_by_entry[entry.id]
        if viewer.is_admin:
            filtered.append(FilteredEntry(
                entry=entry,
                votes=entry_votes,
                breakdown=[
                    BreakdownRow(label=users_by_id[v.user_id].username, scores=v.scores)
                    for v in entry_votes
                ],
                anonymous=False,
            ))
        else:
            filtered.append(FilteredEntry(
                entry=replace(entry, contestant_name=None),
                votes=entry_votes,
                breakdown=_anonymous_breakdown(entry_votes),
                anonymous=True,
            ))

    return filtered
