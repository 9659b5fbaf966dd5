"""Generate a fake contest snapshot for trying out the API handlers.

Creates voters, one or more administrators, entries with fake contestant
names, and a random subset of half-point votes, using faker with a fixed
seed so the output is reproducible. The JSON layout matches the request
bodies accepted by api/leaderboard.py and api/completion.py.

Usage:
    python scripts/generate_contest.py
    python scripts/generate_contest.py --voters 20 --entries 8 -o contest.json
"""

import argparse
import json
import random
from pathlib import Path

from faker import Faker

SEED = 20260201

PIZZA_NAMES = [
    "Margherita", "Marinara", "Diavola", "Capricciosa", "Quattro Formaggi",
    "Quattro Stagioni", "Napoletana", "Bufalina", "Ortolana", "Boscaiola",
    "Tonno e Cipolla", "Salsiccia e Friarielli",
]


def _half_point(rng: random.Random) -> float:
    return rng.randint(0, 20) / 2


def generate_contest(
    num_voters: int = 8,
    num_entries: int = 5,
    num_admins: int = 1,
    vote_probability: float = 0.7,
    seed: int = SEED,
) -> dict:
    """Build a contest snapshot as plain JSON-serializable data.

    Every entry gets a unique name, and every (user, entry) pair has at most
    one vote. Administrators vote too, so admin exclusion is visible.
    """
    fake = Faker(["it_IT", "en_US"])
    Faker.seed(seed)
    rng = random.Random(seed)

    usernames: set[str] = set()
    users = []
    for i in range(num_voters + num_admins):
        username = fake.user_name()
        while username in usernames:
            username = fake.user_name()
        usernames.add(username)
        users.append({
            "id": f"u{i + 1}",
            "username": username,
            "is_admin": i >= num_voters,
        })

    entries = []
    for i in range(num_entries):
        base = PIZZA_NAMES[i % len(PIZZA_NAMES)]
        name = base if i < len(PIZZA_NAMES) else f"{base} {i // len(PIZZA_NAMES) + 1}"
        entries.append({
            "id": f"p{i + 1}",
            "name": name,
            "contestant_name": fake.name(),
            "order_position": i + 1,
            "is_active": True,
        })

    votes = []
    for entry in entries:
        for user in users:
            if rng.random() >= vote_probability:
                continue
            vote = {"user_id": user["id"], "entry_id": entry["id"]}
            for c in range(1, 6):
                vote[f"category_{c}"] = _half_point(rng)
            votes.append(vote)

    return {"users": users, "entries": entries, "votes": votes}


def main():
    parser = argparse.ArgumentParser(description="Generate a fake contest snapshot")
    parser.add_argument("--voters", type=int, default=8, help="Number of non-admin voters")
    parser.add_argument("--entries", type=int, default=5, help="Number of entries")
    parser.add_argument("--admins", type=int, default=1, help="Number of administrators")
    parser.add_argument("--seed", type=int, default=SEED, help="Random seed")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Output path (default: stdout)")
    args = parser.parse_args()

    snapshot = generate_contest(
        num_voters=args.voters,
        num_entries=args.entries,
        num_admins=args.admins,
        seed=args.seed,
    )
    text = json.dumps(snapshot, indent=2, ensure_ascii=False)

    if args.output is None:
        print(text)
    else:
        args.output.write_text(text + "\n", encoding="utf-8")
        print(f"Wrote {len(snapshot['votes'])} votes to {args.output}")


if __name__ == "__main__":
    main()
