"""Common utilities for tests."""

from __future__ import annotations

import random
from typing import Any
from unittest.mock import MagicMock

from mockfirestore import MockFirestore

from shuttleboard.core.constants import FEMALE, KIND_GUEST, KIND_MEMBER, MALE


def make_firestore_module(db: MockFirestore) -> MagicMock:
    """Build a stand-in for ``firebase_admin.firestore`` backed by mockfirestore."""
    module = MagicMock()
    module.client.return_value = db
    module.SERVER_TIMESTAMP = "2024-01-01T00:00:00"
    return module


def seed_members(db: MockFirestore, men: int = 0, women: int = 0) -> list[str]:
    """Store members in the mock database and return their ids."""
    ids = []
    for i in range(men):
        member_id = f"m{i}"
        db.collection("members").document(member_id).set(
            {"name": f"Man {i}", "gender": MALE}
        )
        ids.append(member_id)
    for i in range(women):
        member_id = f"w{i}"
        db.collection("members").document(member_id).set(
            {"name": f"Woman {i}", "gender": FEMALE}
        )
        ids.append(member_id)
    return ids


def make_players(men: int = 0, women: int = 0, guests: bool = False) -> list[Any]:
    """Build in-memory participants without touching a database."""
    kind = KIND_GUEST if guests else KIND_MEMBER
    players = [
        {"id": f"m{i}", "name": f"Man {i}", "gender": MALE, "kind": kind}
        for i in range(men)
    ]
    players += [
        {"id": f"w{i}", "name": f"Woman {i}", "gender": FEMALE, "kind": kind}
        for i in range(women)
    ]
    return players


def seeded_rng(seed: int = 7) -> random.Random:
    """A deterministic random source for layout-sensitive tests."""
    return random.Random(seed)
