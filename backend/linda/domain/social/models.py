"""Domain models for friend requests."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class FriendRequestStatus(str, Enum):
	"""Request states kept in the store. Declined requests are deleted."""

	PENDING = "pending"
	ACCEPTED = "accepted"


@dataclass(slots=True)
class FriendRequest:
	"""A directional proposal from ``sender_id`` to ``receiver_id``."""

	id: str
	sender_id: str
	receiver_id: str
	status: FriendRequestStatus
	timestamp: int

	def copy(self) -> "FriendRequest":
		return replace(self)

	@property
	def is_pending(self) -> bool:
		return self.status == FriendRequestStatus.PENDING
