from __future__ import annotations

from typing import Protocol

from .model import RosterSnapshot


class RosterRepository(Protocol):
    """Repository interface for the roster.

    Note (DIP): the service depends on this interface, not on a concrete file format.
    """

    def load(self) -> RosterSnapshot:
        """Raise PersistenceUnavailableError when nothing usable is stored."""

        raise NotImplementedError

    def save(self, snapshot: RosterSnapshot) -> None:
        raise NotImplementedError
