"""REST API surface for friend requests."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from linda.api.envelope import ApiResponse, ok
from linda.domain.social import service
from linda.domain.social.exceptions import (
	DuplicateRequest,
	FriendLinkIncomplete,
	RequestNotFound,
	SocialError,
)
from linda.domain.social.schemas import DeclineResult, FriendRequestSummary, SendFriendRequestRequest
from linda.infra.auth import require_verified_identity

router = APIRouter()
logger = logging.getLogger(__name__)


def _map_error(exc: SocialError) -> HTTPException:
	if isinstance(exc, DuplicateRequest):
		return HTTPException(status.HTTP_409_CONFLICT, detail=exc.message)
	if isinstance(exc, RequestNotFound):
		return HTTPException(status.HTTP_404_NOT_FOUND, detail=exc.message)
	if isinstance(exc, FriendLinkIncomplete):
		return HTTPException(status.HTTP_503_SERVICE_UNAVAILABLE, detail=exc.message)
	return HTTPException(status.HTTP_400_BAD_REQUEST, detail=exc.message)


@router.get("/users/{user_id}/friend-requests", response_model=ApiResponse[List[FriendRequestSummary]])
async def list_pending(user_id: str) -> ApiResponse[List[FriendRequestSummary]]:
	requests = await service.list_pending(user_id)
	return ok([FriendRequestSummary.from_domain(request) for request in requests])


@router.post("/users/{user_id}/friend-requests", response_model=ApiResponse[FriendRequestSummary])
async def send_request(
	payload: SendFriendRequestRequest,
	user_id: str = Depends(require_verified_identity),
) -> ApiResponse[FriendRequestSummary]:
	if payload.sender_id != user_id:
		raise HTTPException(status.HTTP_403_FORBIDDEN, detail="sender_mismatch")
	try:
		request = await service.send_request(payload.sender_id, payload.receiver_id)
	except DuplicateRequest as exc:
		raise _map_error(exc) from None
	return ok(FriendRequestSummary.from_domain(request))


@router.post(
	"/users/{user_id}/friend-requests/{request_id}/accept",
	response_model=ApiResponse[FriendRequestSummary],
)
async def accept_request(
	request_id: str,
	user_id: str = Depends(require_verified_identity),
) -> ApiResponse[FriendRequestSummary]:
	logger.info("friend_request_accept", extra={"acting_user": user_id, "friend_request_id": request_id})
	try:
		request = await service.accept_request(request_id)
	except SocialError as exc:
		raise _map_error(exc) from None
	return ok(FriendRequestSummary.from_domain(request))


@router.post(
	"/users/{user_id}/friend-requests/{request_id}/decline",
	response_model=ApiResponse[DeclineResult],
)
async def decline_request(
	request_id: str,
	user_id: str = Depends(require_verified_identity),
) -> ApiResponse[DeclineResult]:
	logger.info("friend_request_decline", extra={"acting_user": user_id, "friend_request_id": request_id})
	await service.decline_request(request_id)
	return ok(DeclineResult(request_id=request_id))
