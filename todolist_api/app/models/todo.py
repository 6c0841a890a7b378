from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Set

from .user import User


@dataclass
class ToDo:
    """A task list owned by one user and optionally shared with collaborators.

    ``id`` and ``created_at`` are assigned by the store on insert.  The
    owner is fixed at creation; collaborators change only through
    ``add_collaborator`` and ``remove_collaborator``.
    """

    title: str = ""
    owner: Optional[User] = None
    id: Optional[int] = None
    collaborators: Set[User] = field(default_factory=set)
    created_at: Optional[str] = None

    def is_owned_by(self, user: User) -> bool:
        return self.owner is not None and self.owner == user

    def rename(self, title: str) -> None:
        self.title = title

    def add_collaborator(self, user: User) -> None:
        """Add ``user`` to the collaborators; adding a member again is a no-op."""
        self.collaborators.add(user)

    def remove_collaborator(self, user: User) -> None:
        """Remove ``user`` from the collaborators; non-members are ignored."""
        self.collaborators.discard(user)
