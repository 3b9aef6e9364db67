"""Profile repository protocol."""

from typing import Protocol

from domain.entities.user import PrivateProfile


class IProfileRepository(Protocol):
    """Repository interface for loading user profiles."""

    async def get_by_id(self, user_id: int) -> PrivateProfile | None:
        """Get a user's full profile by primary key."""
        ...

    async def get_by_name(self, name: str) -> PrivateProfile | None:
        """Get a user's full profile by unique name."""
        ...
