"""Process startup: configure logging and wire the profile services."""

import structlog

from core.config import Settings, get_settings
from core.logging import setup_logging
from domain.repositories.header_counts_source import IHeaderCountsSource
from domain.repositories.profile_repository import IProfileRepository
from domain.services.header_summary_service import HeaderSummaryService
from domain.services.profile_service import ProfileService

logger = structlog.get_logger()


def create_profile_service(
    profiles: IProfileRepository,
    counts_source: IHeaderCountsSource | None = None,
    settings: Settings | None = None,
) -> ProfileService:
    """Configure logging and build a ProfileService.

    Call once at startup. Without ``counts_source`` no header summaries
    are attached.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    header_service = HeaderSummaryService(counts_source) if counts_source is not None else None

    logger.info(
        "profile_service_ready",
        app_name=settings.app_name,
        app_env=settings.app_env,
        header_summary=header_service is not None and settings.header_summary_enabled,
    )
    return ProfileService(profiles, header_service, settings=settings)
