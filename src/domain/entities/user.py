"""User profile domain entities.

A ``PrivateProfile`` is the full record for the authenticated owner. It wraps
a ``PublicProfile`` rather than extending it, and ``to_public_profile()`` is
the only way to derive a shareable view from it.
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import datetime
from enum import IntEnum, StrEnum
from typing import Self

from domain.entities.permission import Permission


class GlobalRole(StrEnum):
    """Platform-wide role assigned to a user."""

    ADMIN = "admin"
    MODERATOR = "moderator"
    SUPPORT = "support"
    WEB_DEVELOPER = "web_developer"
    REVIEWER = "reviewer"
    MEMBER = "member"
    ORGANIZATION = "organization"

    @property
    def display_name(self) -> str:
        """Human-readable role name."""
        return self.value.replace("_", " ").title()


class Prompt(IntEnum):
    """Known one-time prompts a user can acknowledge."""

    WELCOME = 0
    NEW_PROJECT = 1
    NEW_VERSION = 2
    ORGANIZATION_INTRO = 3


@dataclass(frozen=True)
class PublicProfile:
    """Externally shareable subset of a user's profile."""

    created_at: datetime
    name: str
    tagline: str | None
    join_date: datetime
    roles: tuple[GlobalRole, ...]
    project_count: int

    def __post_init__(self) -> None:
        """Store roles as a tuple, keeping caller order."""
        object.__setattr__(self, "roles", tuple(self.roles))


@dataclass(frozen=True, slots=True)
class HeaderSummary:
    """Read-only value object: counts and permission for the UI header.

    Each counter comes from a separate query; they are not related to each
    other. Refresh by building a new summary, never by editing one.
    """

    global_permission: Permission
    unread_notifications: int
    unanswered_invites: int
    unresolved_flags: int
    project_approvals: int
    review_queue_count: int

    @classmethod
    def empty(cls, global_permission: Permission = Permission.NONE) -> "HeaderSummary":
        """A summary with every counter at zero."""
        return cls(
            global_permission=global_permission,
            unread_notifications=0,
            unanswered_invites=0,
            unresolved_flags=0,
            project_approvals=0,
            review_queue_count=0,
        )

    @property
    def total_attention(self) -> int:
        """Sum of all counters, for a single badge."""
        return (
            self.unread_notifications
            + self.unanswered_invites
            + self.unresolved_flags
            + self.project_approvals
            + self.review_queue_count
        )


@dataclass(frozen=True)
class PrivateProfile:
    """Domain entity for the current user's full profile.

    ``header_summary`` is None until one is attached; that is a different
    state from a summary whose counters are all zero.
    """

    public: PublicProfile
    id: int
    read_prompts: frozenset[int]
    locked: bool
    language: str
    header_summary: HeaderSummary | None = None

    def __post_init__(self) -> None:
        """Store read prompts as a frozenset."""
        object.__setattr__(self, "read_prompts", frozenset(self.read_prompts))

    @classmethod
    def create(
        cls,
        *,
        created_at: datetime,
        name: str,
        tagline: str | None,
        join_date: datetime,
        roles: Iterable[GlobalRole],
        project_count: int,
        id: int,
        read_prompts: Iterable[int],
        locked: bool,
        language: str,
    ) -> Self:
        """Build a profile from the flat field set a data store returns."""
        public = PublicProfile(
            created_at=created_at,
            name=name,
            tagline=tagline,
            join_date=join_date,
            roles=tuple(roles),
            project_count=project_count,
        )
        return cls(
            public=public,
            id=id,
            read_prompts=frozenset(read_prompts),
            locked=locked,
            language=language,
        )

    # --- Public field accessors ---

    @property
    def created_at(self) -> datetime:
        """When the account record was created."""
        return self.public.created_at

    @property
    def name(self) -> str:
        """Unique user name."""
        return self.public.name

    @property
    def tagline(self) -> str | None:
        """Short self-description, if set."""
        return self.public.tagline

    @property
    def join_date(self) -> datetime:
        """When the user joined."""
        return self.public.join_date

    @property
    def roles(self) -> tuple[GlobalRole, ...]:
        """Global roles in precedence order."""
        return self.public.roles

    @property
    def project_count(self) -> int:
        """Cached number of projects the user owns."""
        return self.public.project_count

    # --- Private state ---

    @property
    def has_header_summary(self) -> bool:
        """Check if a header summary has been attached."""
        return self.header_summary is not None

    @property
    def can_mutate(self) -> bool:
        """Locked accounts are frozen for every mutating action."""
        return not self.locked

    def has_read_prompt(self, prompt: int) -> bool:
        """Check if the user has acknowledged a prompt."""
        return int(prompt) in self.read_prompts

    def with_header_summary(self, summary: HeaderSummary) -> Self:
        """Return a copy carrying ``summary``, replacing any previous one."""
        return replace(self, header_summary=summary)

    def without_header_summary(self) -> Self:
        """Return a copy with no header summary attached."""
        return replace(self, header_summary=None)

    def to_public_profile(self) -> PublicProfile:
        """Project the shareable view.

        Fields are copied one by one so that private fields added later are
        never carried over.
        """
        return PublicProfile(
            created_at=self.public.created_at,
            name=self.public.name,
            tagline=self.public.tagline,
            join_date=self.public.join_date,
            roles=tuple(self.public.roles),
            project_count=self.public.project_count,
        )
