"""Vote submission and the storage contract it relies on."""

from abc import ABC, abstractmethod
from typing import Iterable

import structlog

from contest.models import Scores, User, Vote
from contest.validation import VoteRejected, validate

logger = structlog.get_logger(__name__)


class VoteStore(ABC):
    """Storage for votes, keyed by (user_id, entry_id).

    Implementations must behave as insert-or-replace on that key: however
    many times a user scores an entry, at most one Vote for the pair is ever
    observable. How the uniqueness is enforced is up to the implementation.
    """

    @abstractmethod
    def upsert(self, vote: Vote) -> bool:
        """Insert the vote, or replace the existing vote for its key.

        Returns:
            True if an existing vote was replaced, False if it was inserted
        """
        pass

    @abstractmethod
    def get(self, user_id: str, entry_id: str) -> Vote | None:
        pass

    @abstractmethod
    def all_votes(self) -> list[Vote]:
        """All stored votes in arrival order."""
        pass

    def votes_for_entry(self, entry_id: str) -> list[Vote]:
        return [v for v in self.all_votes() if v.entry_id == entry_id]

    def votes_by_user(self, user_id: str) -> list[Vote]:
        return [v for v in self.all_votes() if v.user_id == user_id]


class InMemoryVoteStore(VoteStore):
    """Dict-backed VoteStore.

    Replacing a vote keeps its original arrival position, so re-scoring an
    entry does not reorder ties in a ranking.
    """

    def __init__(self, votes: Iterable[Vote] = ()):
        self._votes: dict[tuple[str, str], Vote] = {}
        for vote in votes:
            self.upsert(vote)

    def __len__(self) -> int:
        return len(self._votes)

    def upsert(self, vote: Vote) -> bool:
        replaced = vote.key in self._votes
        self._votes[vote.key] = vote
        return replaced

    def get(self, user_id: str, entry_id: str) -> Vote | None:
        return self._votes.get((user_id, entry_id))

    def all_votes(self) -> list[Vote]:
        return list(self._votes.values())


def submit_vote(store: VoteStore, voter: User, entry_id: str, scores: Scores) -> Vote:
    """Validate and store a voter's scores for an entry.

    The stored vote is always owned by `voter`; there is no way to write a
    vote on behalf of somebody else. Nothing is written if validation fails.

    Raises:
        VoteRejected: If any category score is out of range or mis-stepped
    """
    result = validate(scores)
    if not result.ok:
        logger.info(
            "vote_rejected",
            user_id=voter.id,
            entry_id=entry_id,
            reason=result.reason.value,
            category=result.category,
        )
        raise VoteRejected(result)

    vote = Vote(user_id=voter.id, entry_id=entry_id, scores=scores)
    replaced = store.upsert(vote)
    logger.info(
        "vote_stored", user_id=voter.id, entry_id=entry_id, replaced=replaced
    )
    return vote


def prefill_scores(votes: Iterable[Vote], user_id: str, entry_id: str) -> Scores:
    """Return the user's last submission for an entry, or all zeros."""
    for vote in votes:
        if vote.user_id == user_id and vote.entry_id == entry_id:
            return vote.scores
    return Scores.zero()


def voted_entry_ids(votes: Iterable[Vote], user_id: str) -> set[str]:
    """Return the ids of entries the user has already scored."""
    return {v.entry_id for v in votes if v.user_id == user_id}
