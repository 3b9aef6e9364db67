"""Header counts source protocol."""

from typing import Protocol

from domain.entities.permission import Permission


class IHeaderCountsSource(Protocol):
    """Queries backing the header summary. Each count is independent."""

    async def get_global_permission(self, user_id: int) -> Permission:
        """Get the user's effective global permission."""
        ...

    async def count_unread_notifications(self, user_id: int) -> int:
        """Count notifications the user has not read."""
        ...

    async def count_unanswered_invites(self, user_id: int) -> int:
        """Count project and organization invites awaiting a reply."""
        ...

    async def count_unresolved_flags(self) -> int:
        """Count flags no moderator has resolved yet."""
        ...

    async def count_project_approvals(self) -> int:
        """Count projects waiting for approval."""
        ...

    async def count_review_queue(self) -> int:
        """Count versions waiting in the review queue."""
        ...
