"""Pydantic schemas for friends and friend requests."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from linda.domain.social.models import FriendRequest


class FriendRequestSummary(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	id: str
	sender_id: str = Field(..., alias="senderId")
	receiver_id: str = Field(..., alias="receiverId")
	status: Literal["pending", "accepted"]
	timestamp: int

	@classmethod
	def from_domain(cls, request: FriendRequest) -> "FriendRequestSummary":
		return cls(
			id=request.id,
			sender_id=request.sender_id,
			receiver_id=request.receiver_id,
			status=request.status.value,
			timestamp=request.timestamp,
		)


class SendFriendRequestRequest(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	sender_id: str = Field(..., alias="senderId", min_length=1)
	receiver_id: str = Field(..., alias="receiverId", min_length=1)


class AddFriendRequest(BaseModel):
	user_id: Optional[str] = Field(default=None, description="Must match the path user id when present")
	friend_id: str = Field(..., min_length=1)


class DeclineResult(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	declined: bool = True
	request_id: str = Field(..., alias="requestId")

