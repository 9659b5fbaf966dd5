"""Core data models for contest entries, votes and derived scores."""

import enum
from dataclasses import dataclass, field
from typing import Any, Iterable, Self


NUM_CATEGORIES = 5


@dataclass(frozen=True)
class Category:
    """One of the fixed scoring dimensions.

    Attributes:
        index: 0-based position of the category in a Scores tuple
        field: Attribute name on Scores / key in submitted score mappings
        key: Short key used to select the category as a ranking metric
        label: Human-readable name
        description: What voters are asked to consider
    """
    index: int
    field: str
    key: str
    label: str
    description: str


CATEGORIES: tuple[Category, ...] = (
    Category(0, "category_1", "mozzarella", "Mozzarellosità",
             "Qualità e quantità della mozzarella"),
    Category(1, "category_2", "pomodoro", "Pomodorosità",
             "Qualità e quantità di pomodoro"),
    Category(2, "category_3", "crosta", "Crostosità",
             "Bruciata o no, croccante o morbida"),
    Category(3, "category_4", "impasto", "Tipo di Impasto",
             "Consistenza, cottura, grossa o sottile"),
    Category(4, "category_5", "soddisfazione", "Soddisfazione Complessiva",
             "Zozzosità e quanto ti scalda il cuore"),
)


class UnknownEntryError(LookupError):
    """Raised when an entry id is not present in the entries collection."""
    pass


class UnknownUserError(LookupError):
    """Raised when a vote's caster is not present in the voter roster."""
    pass


class DuplicateVoteError(ValueError):
    """Raised when a snapshot holds more than one vote for a (user, entry) pair."""
    pass


class ScoreView(enum.Enum):
    """Which projection of an AggregatedScore a view displays and ranks by."""
    TOTAL = "total"
    AVERAGE = "average"


@dataclass(frozen=True)
class User:
    id: str
    username: str
    is_admin: bool = False


@dataclass(frozen=True)
class Entry:
    """A contest submission ("pizza").

    `is_active` is checked upstream; entries handed to the engine are
    assumed eligible for scoring.
    """
    id: str
    name: str
    contestant_name: str | None = None
    order_position: int = 0
    is_active: bool = True


@dataclass(frozen=True)
class Scores:
    category_1: float
    category_2: float
    category_3: float
    category_4: float
    category_5: float

    @classmethod
    def zero(cls) -> Self:
        return cls(0, 0, 0, 0, 0)

    @classmethod
    def from_sequence(cls, values: Iterable[float]) -> Self:
        values = tuple(values)
        if len(values) != NUM_CATEGORIES:
            raise ValueError(
                f"Expected {NUM_CATEGORIES} category scores, got {len(values)}"
            )
        return cls(*values)

    def as_tuple(self) -> tuple[float, ...]:
        return (self.category_1, self.category_2, self.category_3,
                self.category_4, self.category_5)

    @property
    def total(self) -> float:
        return sum(self.as_tuple())

    def to_dict(self) -> dict[str, float]:
        return {c.field: value for c, value in zip(CATEGORIES, self.as_tuple())}


@dataclass(frozen=True)
class Vote:
    """One user's five category scores for one entry.

    At most one Vote exists per (user_id, entry_id); see Vote.key.
    """
    user_id: str
    entry_id: str
    scores: Scores

    @property
    def key(self) -> tuple[str, str]:
        return (self.user_id, self.entry_id)


@dataclass(frozen=True)
class ViewerContext:
    """Privilege level of whoever is asking for a view.

    Passed explicitly into every read query; nothing in the engine looks
    up the caller's privileges on its own.
    """
    is_admin: bool = False
    user_id: str | None = None


@dataclass(frozen=True)
class AggregatedScore:
    """Per-entry category sums and vote count.

    Only the raw sums and count are stored. Totals and averages are
    projections of these, so the two presentations cannot drift apart.
    An entry with no votes reports zero for every projection.
    """
    entry_id: str
    name: str
    contestant_name: str | None
    category_totals: tuple[float, ...]
    vote_count: int

    @property
    def category_averages(self) -> tuple[float, ...]:
        if self.vote_count == 0:
            return (0.0,) * NUM_CATEGORIES
        return tuple(total / self.vote_count for total in self.category_totals)

    @property
    def overall_total(self) -> float:
        return sum(self.category_totals)

    @property
    def overall_average(self) -> float:
        if self.vote_count == 0:
            return 0.0
        return self.overall_total / (NUM_CATEGORIES * self.vote_count)

    def category_total(self, index: int) -> float:
        return self.category_totals[index]

    def category_average(self, index: int) -> float:
        return self.category_averages[index]

    def category_values(self, view: ScoreView) -> tuple[float, ...]:
        if view is ScoreView.TOTAL:
            return tuple(self.category_totals)
        return self.category_averages

    def overall_value(self, view: ScoreView) -> float:
        if view is ScoreView.TOTAL:
            return self.overall_total
        return self.overall_average


@dataclass(frozen=True)
class BreakdownRow:
    """One vote in a per-entry breakdown.

    Attributes:
        label: Caster's username for admin viewers, "Voter N" otherwise
        scores: The vote's category scores
    """
    label: str
    scores: Scores

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "scores": self.scores.to_dict()}


@dataclass
class RankedEntry:
    """An aggregated entry placed in a ranking.

    Attributes:
        rank: 1-indexed position in the ranking (ties get distinct ranks)
        entry_id: Id of the ranked entry
        display_name: Entry name, or an anonymous label for non-admin viewers
        category_values: Per-category totals or averages, depending on view
        overall_value: Overall total or average, depending on view
        vote_count: Number of votes that contributed to the scores
        contestant_name: Only set for admin viewers
        breakdown: Per-vote rows, labelled per the viewer's visibility rules
    """
    rank: int
    entry_id: str
    display_name: str
    category_values: tuple[float, ...]
    overall_value: float
    vote_count: int
    contestant_name: str | None = None
    breakdown: list[BreakdownRow] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        result = {
            "rank": self.rank,
            "entry_id": self.entry_id,
            "display_name": self.display_name,
            "category_values": list(self.category_values),
            "overall_value": self.overall_value,
            "vote_count": self.vote_count,
            "breakdown": [row.to_dict() for row in self.breakdown],
        }
        if self.contestant_name is not None:
            result["contestant_name"] = self.contestant_name
        return result


@dataclass
class CompletionReport:
    """Which eligible voters have and have not scored an entry."""
    entry_id: str
    voted_usernames: list[str] = field(default_factory=list)
    pending_usernames: list[str] = field(default_factory=list)

    @property
    def total_voted(self) -> int:
        return len(self.voted_usernames)

    @property
    def total_pending(self) -> int:
        return len(self.pending_usernames)

    @property
    def total_eligible(self) -> int:
        return self.total_voted + self.total_pending

    @property
    def is_complete(self) -> bool:
        return self.total_pending == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "entry_id": self.entry_id,
            "voted_usernames": list(self.voted_usernames),
            "pending_usernames": list(self.pending_usernames),
            "total_voted": self.total_voted,
            "total_pending": self.total_pending,
            "total_eligible": self.total_eligible,
        }


def index_by_id(records: Iterable[Any]) -> dict[str, Any]:
    """Build an id -> record lookup, keeping the first record for each id."""
    index: dict[str, Any] = {}
    for record in records:
        index.setdefault(record.id, record)
    return index
