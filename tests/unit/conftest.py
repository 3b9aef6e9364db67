"""Shared fixtures for unit tests."""

from collections.abc import Callable
from datetime import datetime
from typing import Any
from unittest.mock import AsyncMock

import pytest

from domain.entities.permission import Permission
from domain.entities.user import GlobalRole, PrivateProfile


class FakeProfileRepo:
    """Fake profile repository for testing."""

    def __init__(self) -> None:
        self.get_by_id = AsyncMock(return_value=None)
        self.get_by_name = AsyncMock(return_value=None)


class FakeHeaderCountsSource:
    """Fake header counts source with every query mocked."""

    def __init__(self) -> None:
        self.get_global_permission = AsyncMock(return_value=Permission.MEMBER)
        self.count_unread_notifications = AsyncMock(return_value=0)
        self.count_unanswered_invites = AsyncMock(return_value=0)
        self.count_unresolved_flags = AsyncMock(return_value=0)
        self.count_project_approvals = AsyncMock(return_value=0)
        self.count_review_queue = AsyncMock(return_value=0)


@pytest.fixture
def profiles() -> FakeProfileRepo:
    return FakeProfileRepo()


@pytest.fixture
def counts() -> FakeHeaderCountsSource:
    return FakeHeaderCountsSource()


@pytest.fixture
def created_at() -> datetime:
    return datetime(2023, 3, 14, 9, 30)


@pytest.fixture
def make_profile(created_at: datetime) -> Callable[..., PrivateProfile]:
    """Factory for private profiles; keyword overrides replace the defaults."""

    def _make(**overrides: Any) -> PrivateProfile:
        fields: dict[str, Any] = {
            "created_at": created_at,
            "name": "alice",
            "tagline": "hi",
            "join_date": created_at,
            "roles": [GlobalRole.MEMBER],
            "project_count": 3,
            "id": 7,
            "read_prompts": {1, 2},
            "locked": False,
            "language": "en",
        }
        fields.update(overrides)
        return PrivateProfile.create(**fields)

    return _make


@pytest.fixture
def alice(make_profile: Callable[..., PrivateProfile]) -> PrivateProfile:
    return make_profile()
