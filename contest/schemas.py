"""Pydantic schemas for the JSON snapshots accepted by the API handlers."""

from typing import Optional

from pydantic import BaseModel, Field

from contest.models import Entry, Scores, User, ViewerContext, Vote


class ScoresIn(BaseModel):
    """Five category scores as submitted.

    Range and step are not checked here; contest.validation does that so
    the caller gets an OutOfRange / InvalidGranularity reason back.
    """

    category_1: float
    category_2: float
    category_3: float
    category_4: float
    category_5: float

    def to_scores(self) -> Scores:
        return Scores(
            self.category_1, self.category_2, self.category_3,
            self.category_4, self.category_5,
        )


class UserIn(BaseModel):
    id: str
    username: str
    is_admin: bool = False

    def to_user(self) -> User:
        return User(id=self.id, username=self.username, is_admin=self.is_admin)


class EntryIn(BaseModel):
    id: str
    name: str
    contestant_name: Optional[str] = None
    order_position: int = 0
    is_active: bool = True

    def to_entry(self) -> Entry:
        return Entry(
            id=self.id,
            name=self.name,
            contestant_name=self.contestant_name,
            order_position=self.order_position,
            is_active=self.is_active,
        )


class VoteIn(ScoresIn):
    user_id: str
    entry_id: str

    def to_vote(self) -> Vote:
        return Vote(user_id=self.user_id, entry_id=self.entry_id, scores=self.to_scores())


class ViewerIn(BaseModel):
    is_admin: bool = False
    user_id: Optional[str] = None

    def to_viewer(self) -> ViewerContext:
        return ViewerContext(is_admin=self.is_admin, user_id=self.user_id)


class SnapshotIn(BaseModel):
    """Users, entries and votes as fetched from storage."""

    users: list[UserIn] = Field(default_factory=list)
    entries: list[EntryIn] = Field(default_factory=list)
    votes: list[VoteIn] = Field(default_factory=list)

    def to_records(self) -> tuple[list[User], list[Entry], list[Vote]]:
        return (
            [u.to_user() for u in self.users],
            [e.to_entry() for e in self.entries],
            [v.to_vote() for v in self.votes],
        )


class LeaderboardRequest(SnapshotIn):
    viewer: ViewerIn = Field(default_factory=ViewerIn)
    metric: Optional[str] = None
    view: Optional[str] = None
    all_metrics: bool = False


class CompletionRequest(SnapshotIn):
    entry_id: str


class ValidateRequest(BaseModel):
    scores: dict[str, object]
