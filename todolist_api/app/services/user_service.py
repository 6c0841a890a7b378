"""
Business logic for users.

Users are only registered and looked up here; they exist so ToDos have
owners and collaborators to point at.
"""

import logging
from typing import List, Optional

from ..core.exceptions import EntityNotFoundException, NullReferenceEntityException
from ..models import User
from ..repositories import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Register and look up users."""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    def create(self, user: Optional[User]) -> User:
        if user is None:
            raise NullReferenceEntityException("Given User cannot be null")
        created = self.user_repository.upsert(user)
        logger.info("Registered user %s (%s)", created.id, created.email)
        return created

    def read_by_id(self, user_id: int) -> User:
        user = self.user_repository.find_by_id(user_id)
        if user is None:
            raise EntityNotFoundException.for_entity("User", user_id)
        return user

    def get_all(self) -> List[User]:
        return list(self.user_repository.find_all())
