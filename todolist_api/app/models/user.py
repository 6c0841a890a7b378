from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class User:
    """A registered user.

    Only ``id`` takes part in equality and hashing, so two instances
    loaded separately for the same row compare equal and a set of users
    holds each user at most once.
    """

    id: Optional[int] = None
    email: str = field(default="", compare=False)
    full_name: Optional[str] = field(default=None, compare=False)
