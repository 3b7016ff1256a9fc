"""Named error kinds raised by the feed services.

Every failure a service can report is a ``TeamFeedError`` subclass tagged with
an ``ErrorKind``. The HTTP layer maps kinds to status codes in ``main.py``.
"""

from enum import Enum


class ErrorKind(str, Enum):
    EMPTY_CONTENT = "empty_content"
    CONTENT_TOO_LONG = "content_too_long"
    SELF_FOLLOW_REJECTED = "self_follow_rejected"
    UNAUTHENTICATED = "unauthenticated"
    PROFILE_NOT_FOUND = "profile_not_found"
    NOT_FOUND = "not_found"
    ALREADY_FOLLOWING = "already_following"
    STORE_ERROR = "store_error"


class TeamFeedError(Exception):
    kind: ErrorKind = ErrorKind.STORE_ERROR
    default_message = "Something went wrong. Please try again."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# Validation errors

class EmptyContentError(TeamFeedError):
    kind = ErrorKind.EMPTY_CONTENT
    default_message = "Post content cannot be empty"


class ContentTooLongError(TeamFeedError):
    kind = ErrorKind.CONTENT_TOO_LONG
    default_message = "Post content cannot exceed 280 characters"


class SelfFollowRejectedError(TeamFeedError):
    kind = ErrorKind.SELF_FOLLOW_REJECTED
    default_message = "Cannot follow your own team"


# Authorization errors

class UnauthenticatedError(TeamFeedError):
    kind = ErrorKind.UNAUTHENTICATED
    default_message = "You must be logged in"


class ProfileNotFoundError(TeamFeedError):
    """The caller is authenticated but has no provisioned profile yet."""

    kind = ErrorKind.PROFILE_NOT_FOUND
    default_message = "Profile not found"


class NotFoundError(TeamFeedError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Not found"


# Conflict errors

class AlreadyFollowingError(TeamFeedError):
    kind = ErrorKind.ALREADY_FOLLOWING
    default_message = "Already following this team"


# Store errors

class StoreError(TeamFeedError):
    """The store could not complete a request (network, unexpected constraint)."""

    kind = ErrorKind.STORE_ERROR


class StoreConflictError(StoreError):
    """Raised by store adapters when an insert violates a uniqueness constraint."""


class StoreReferenceError(StoreError):
    """Raised by store adapters when a request names a row that cannot exist
    (dangling foreign key or malformed id)."""

    kind = ErrorKind.NOT_FOUND
    default_message = "Not found"
