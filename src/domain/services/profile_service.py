"""Profile service layer: loads the current user and public profiles."""

from dataclasses import replace

import structlog

from core.config import Settings, get_settings
from core.exceptions import AccountLockedError, UserNotFoundError
from domain.entities.user import PrivateProfile, PublicProfile
from domain.repositories.profile_repository import IProfileRepository
from domain.services.header_summary_service import HeaderSummaryService

logger = structlog.get_logger()


class ProfileService:
    """Service layer for user profile reads and guards."""

    def __init__(
        self,
        profiles: IProfileRepository,
        header_summary_service: HeaderSummaryService | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._profiles = profiles
        self._header = header_summary_service
        self._settings = settings or get_settings()

    async def get_current_user(
        self, user_id: int, include_header: bool = True
    ) -> PrivateProfile:
        """Load the authenticated user's full profile.

        Args:
            user_id: Primary key of the authenticated user.
            include_header: Attach a freshly built header summary when a
                header service is available and summaries are enabled.

        Returns:
            The private profile. ``header_summary`` is None when no summary
            was attached.

        Raises:
            UserNotFoundError: If no profile exists for ``user_id``.
        """
        profile = await self._profiles.get_by_id(user_id)
        if profile is None:
            raise UserNotFoundError(str(user_id))

        if not profile.language:
            profile = replace(profile, language=self._settings.default_language)

        if include_header and self._header and self._settings.header_summary_enabled:
            profile = await self._header.attach(profile)

        logger.info(
            "current_user_loaded",
            user_id=profile.id,
            locked=profile.locked,
            header_attached=profile.has_header_summary,
        )
        return profile

    async def get_public_profile(self, name: str) -> PublicProfile:
        """Load a user by name and return only the shareable fields."""
        profile = await self._profiles.get_by_name(name)
        if profile is None:
            raise UserNotFoundError(name)
        return profile.to_public_profile()

    def ensure_can_mutate(self, profile: PrivateProfile) -> None:
        """Raise if the account is locked.

        Call before any action that changes state on behalf of ``profile``.
        """
        if not profile.can_mutate:
            logger.warning(
                "locked_account_mutation_blocked",
                user_id=profile.id,
                name=profile.name,
            )
            raise AccountLockedError(profile.name)
