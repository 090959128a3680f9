"""Social domain exports."""

from . import audit, service  # noqa: F401
from .exceptions import DuplicateRequest, FriendLinkIncomplete, RequestNotFound, SocialError  # noqa: F401
from .graph import FriendGraphStore, InMemoryFriendGraph  # noqa: F401
from .models import FriendRequest, FriendRequestStatus  # noqa: F401
from .requests import FriendRequestWorkflow, request_id_for  # noqa: F401
