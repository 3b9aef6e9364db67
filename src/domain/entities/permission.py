"""Global permission flags."""

from enum import IntFlag


class Permission(IntFlag):
    """Bit set of global permissions.

    Values are resolved elsewhere; this type only carries the result.
    Use ``has()`` for checks:
        summary.global_permission.has(Permission.SEE_HIDDEN)
    """

    NONE = 0

    # User
    VIEW_PUBLIC_INFO = 1 << 0
    EDIT_OWN_USER_SETTINGS = 1 << 1
    EDIT_API_KEYS = 1 << 2

    # Projects
    CREATE_PROJECT = 1 << 3
    EDIT_PROJECT = 1 << 4
    CREATE_VERSION = 1 << 5
    CREATE_ORGANIZATION = 1 << 6

    # Moderation
    MOD_NOTES_AND_FLAGS = 1 << 8
    SEE_HIDDEN = 1 << 9
    REVIEWER = 1 << 10
    IS_STAFF = 1 << 11
    DELETE_PROJECT = 1 << 12
    DELETE_VERSION = 1 << 13

    # Administration
    EDIT_ALL_USER_SETTINGS = 1 << 16
    MANAGE_USERS = 1 << 17
    VIEW_LOGS = 1 << 18
    VIEW_STATS = 1 << 19
    VIEW_HEALTH = 1 << 20

    # Presets
    MEMBER = (
        VIEW_PUBLIC_INFO
        | EDIT_OWN_USER_SETTINGS
        | EDIT_API_KEYS
        | CREATE_PROJECT
        | EDIT_PROJECT
        | CREATE_VERSION
        | CREATE_ORGANIZATION
    )
    MODERATOR = (
        MEMBER
        | MOD_NOTES_AND_FLAGS
        | SEE_HIDDEN
        | REVIEWER
        | IS_STAFF
        | DELETE_PROJECT
        | DELETE_VERSION
    )
    ADMIN = (
        MODERATOR
        | EDIT_ALL_USER_SETTINGS
        | MANAGE_USERS
        | VIEW_LOGS
        | VIEW_STATS
        | VIEW_HEALTH
    )

    def has(self, required: "Permission") -> bool:
        """Check that every bit of ``required`` is set."""
        return self & required == required
