"""User store interface and the in-memory implementation."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from user_directory.models.user import User

logger = logging.getLogger(__name__)


class UserStore(ABC):
    """Abstract interface for the read-only user directory."""

    @abstractmethod
    def list_usernames(self) -> list[str]:
        """List the name of every user, in insertion order."""
        pass

    @abstractmethod
    def find_by_id(self, user_id: int) -> User | None:
        """Get a user by ID.

        Args:
            user_id: Numeric identifier to look up

        Returns:
            The matching User, or None if no user has that ID
        """
        pass

    @abstractmethod
    def list_users(self) -> list[User]:
        """List all users, in insertion order."""
        pass

    def __len__(self) -> int:
        return len(self.list_users())


class InMemoryUserStore(UserStore):
    """UserStore backed by a fixed, ordered sequence of users."""

    def __init__(self, users: Iterable[User]) -> None:
        """Initialize the store.

        Args:
            users: Seed users. Copied, so later changes to the caller's
                collection are not seen by the store.
        """
        self._users: tuple[User, ...] = tuple(users)
        logger.debug("InMemoryUserStore initialized with %d users", len(self._users))

    def list_usernames(self) -> list[str]:
        return [user.name for user in self._users]

    def find_by_id(self, user_id: int) -> User | None:
        return next((user for user in self._users if user.id == user_id), None)

    def list_users(self) -> list[User]:
        return list(self._users)

    def __len__(self) -> int:
        return len(self._users)
