"""Header summary service: aggregates the counts shown in the UI header."""

import asyncio
from collections.abc import Coroutine
from typing import Any

import structlog

from core.exceptions import InvalidHeaderSummaryError
from domain.entities.permission import Permission
from domain.entities.user import HeaderSummary, PrivateProfile
from domain.repositories.header_counts_source import IHeaderCountsSource

logger = structlog.get_logger()


class HeaderSummaryService:
    """Builds immutable header summaries from independent count queries."""

    def __init__(self, counts_source: IHeaderCountsSource) -> None:
        self._counts = counts_source

    async def build(self, user_id: int) -> HeaderSummary:
        """Build a fresh summary for a user.

        The user's own counts are always queried. Staff queues are only
        queried when the permission allows seeing them and read as zero
        otherwise. If any query fails, the others are cancelled and the
        first failure is raised.
        """
        permission = Permission(await self._counts.get_global_permission(user_id))

        queries: dict[str, Coroutine[Any, Any, int]] = {
            "unread_notifications": self._counts.count_unread_notifications(user_id),
            "unanswered_invites": self._counts.count_unanswered_invites(user_id),
        }
        if permission.has(Permission.MOD_NOTES_AND_FLAGS):
            queries["unresolved_flags"] = self._counts.count_unresolved_flags()
        if permission.has(Permission.REVIEWER):
            queries["project_approvals"] = self._counts.count_project_approvals()
            queries["review_queue_count"] = self._counts.count_review_queue()

        try:
            async with asyncio.TaskGroup() as tg:
                tasks = {name: tg.create_task(query) for name, query in queries.items()}
        except ExceptionGroup as eg:
            logger.warning("header_summary_failed", user_id=user_id, error=str(eg.exceptions[0]))
            raise eg.exceptions[0]

        counts = {
            "unread_notifications": 0,
            "unanswered_invites": 0,
            "unresolved_flags": 0,
            "project_approvals": 0,
            "review_queue_count": 0,
        }
        counts.update({name: task.result() for name, task in tasks.items()})
        for field_name, value in counts.items():
            if value < 0:
                raise InvalidHeaderSummaryError(field_name, value)

        summary = HeaderSummary(global_permission=permission, **counts)
        logger.debug(
            "header_summary_built",
            user_id=user_id,
            total_attention=summary.total_attention,
        )
        return summary

    async def attach(self, profile: PrivateProfile) -> PrivateProfile:
        """Return ``profile`` with a freshly built summary replacing any old one."""
        summary = await self.build(profile.id)
        return profile.with_header_summary(summary)
