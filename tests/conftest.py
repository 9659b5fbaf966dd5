"""Shared test helpers."""

import pytest

from contest.models import Entry, Scores, User, ViewerContext, Vote

ADMIN_VIEWER = ViewerContext(is_admin=True, user_id="admin")
PUBLIC_VIEWER = ViewerContext(is_admin=False, user_id="alice")


def make_vote(user_id: str, entry_id: str, *values: float) -> Vote:
    """Build a Vote from five category scores."""
    return Vote(user_id=user_id, entry_id=entry_id, scores=Scores(*values))


def make_votes(table: dict[str, dict[str, tuple]]) -> list[Vote]:
    """Build votes from a compact table.

    Args:
        table: {entry_id: {user_id: (c1, c2, c3, c4, c5)}}

    Returns:
        Votes in table order, entry by entry.
    """
    return [
        make_vote(user_id, entry_id, *values)
        for entry_id, row in table.items()
        for user_id, values in row.items()
    ]


def ranking_ids(rankings) -> list[str]:
    """Extract entry ids from a list of RankedEntry in rank order."""
    return [r.entry_id for r in rankings]


@pytest.fixture
def users():
    """Three voters and one administrator."""
    return [
        User(id="alice", username="alice"),
        User(id="bob", username="bob"),
        User(id="carol", username="carol"),
        User(id="admin", username="boss", is_admin=True),
    ]


@pytest.fixture
def entries():
    return [
        Entry(id="p1", name="Margherita", contestant_name="Mario Rossi", order_position=1),
        Entry(id="p2", name="Diavola", contestant_name="Luigi Verdi", order_position=2),
        Entry(id="p3", name="Marinara", contestant_name="Anna Bianchi", order_position=3),
    ]


@pytest.fixture
def votes():
    """Votes for the users/entries fixtures.

              alice            bob              carol            boss (admin)
    p1   8,8,8,8,8        6,6,6,6,6        -                10,10,10,10,10
    p2   9,9,9,9,9        7,7,7,7,7        8,8,8,8,8        0,0,0,0,0
    p3   -                -                -                -

    Public overall averages: p1=7.0, p2=8.0, p3=0.
    Admin overall averages: p1=8.0, p2=6.0, p3=0.
    """
    return make_votes({
        "p1": {
            "alice": (8, 8, 8, 8, 8),
            "bob": (6, 6, 6, 6, 6),
            "admin": (10, 10, 10, 10, 10),
        },
        "p2": {
            "alice": (9, 9, 9, 9, 9),
            "bob": (7, 7, 7, 7, 7),
            "carol": (8, 8, 8, 8, 8),
            "admin": (0, 0, 0, 0, 0),
        },
    })
