"""Domain-level exceptions for friend requests & friendships."""

from __future__ import annotations


class SocialError(Exception):
    """Base class for social feature errors."""

    reason: str = "unknown"
    message: str = "Social operation failed"

    def __init__(self, reason: str | None = None) -> None:
        super().__init__(self.message)
        if reason:
            self.reason = reason


class DuplicateRequest(SocialError):
    reason = "already_exists"
    message = "Friend request already exists"


class RequestNotFound(SocialError):
    reason = "not_found"
    message = "Friend request not found"


class FriendLinkIncomplete(SocialError):
    """Raised when an accepted request could not be linked in both directions."""

    reason = "link_incomplete"
    message = "Friend request accepted but friendship could not be linked"
