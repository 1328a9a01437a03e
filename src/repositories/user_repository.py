"""
Abstract base class for user store repositories.
Defines the contract the user credential validator depends on.
"""
from abc import ABC, abstractmethod
from typing import Optional


class UserRepository(ABC):
    """Abstract repository interface for user account lookups."""

    @abstractmethod
    def get_by_username(self, username: str) -> Optional[dict]:
        """Return the stored user record, or None if absent."""
        pass

    @abstractmethod
    def record_login(self, username: str) -> None:
        """Stamp the user's last successful login."""
        pass

    @abstractmethod
    def ping(self) -> bool:
        """Return True when the store is reachable."""
        pass
