"""Tracking which eligible voters have scored an entry."""

from typing import Iterable

from contest.models import CompletionReport, Entry, UnknownEntryError, User, Vote
from contest.visibility import eligible_voters as non_admin_users


def completion(
    entry_id: str, eligible_voters: Iterable[User], votes_for_entry: Iterable[Vote]
) -> CompletionReport:
    """Split the eligible voters into those who voted on the entry and those
    who have not.

    Only the presence of a vote matters, not its scores. Every eligible
    voter lands in exactly one of the two lists, in roster order.

    Raises:
        ValueError: If an administrator is passed as an eligible voter, or a
            vote for another entry is passed in
    """
    voter_ids = set()
    for vote in votes_for_entry:
        if vote.entry_id != entry_id:
            raise ValueError(
                f"Vote for entry {vote.entry_id} passed to completion for {entry_id}"
            )
        voter_ids.add(vote.user_id)

    report = CompletionReport(entry_id=entry_id)
    for user in eligible_voters:
        if user.is_admin:
            raise ValueError(f"Administrator {user.username} is not an eligible voter")
        if user.id in voter_ids:
            report.voted_usernames.append(user.username)
        else:
            report.pending_usernames.append(user.username)
    return report


def completion_by_entry(
    entries: Iterable[Entry], users: Iterable[User], votes: Iterable[Vote]
) -> dict[str, CompletionReport]:
    """Build a completion report for every entry, keyed by entry id.

    Administrators are left out of the roster before tracking.
    """
    entries = list(entries)
    voters = non_admin_users(users)
    votes_by_entry: dict[str, list[Vote]] = {e.id: [] for e in entries}
    for vote in votes:
        if vote.entry_id not in votes_by_entry:
            raise UnknownEntryError(f"Vote refers to unknown entry: {vote.entry_id}")
        votes_by_entry[vote.entry_id].append(vote)
    return {
        entry.id: completion(entry.id, voters, votes_by_entry[entry.id])
        for entry in entries
    }
