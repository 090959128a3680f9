"""REST API surface for friend lists and friend locations."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from linda.api.envelope import ApiResponse, ok
from linda.api.users import ensure_same_user
from linda.domain.presence import service as presence_service
from linda.domain.presence.schemas import UserProfile
from linda.domain.social import service
from linda.domain.social.schemas import AddFriendRequest
from linda.infra.auth import require_verified_identity

router = APIRouter()


@router.get("/users/{user_id}/friends", response_model=ApiResponse[List[str]])
async def list_friends(user_id: str) -> ApiResponse[List[str]]:
	return ok(await service.list_friends(user_id))


@router.post("/users/{user_id}/friends", response_model=ApiResponse[dict[str, bool]])
async def add_friend(
	payload: AddFriendRequest,
	user_id: str = Depends(require_verified_identity),
) -> ApiResponse[dict[str, bool]]:
	ensure_same_user(user_id, payload.user_id)
	await service.add_friend(user_id, payload.friend_id)
	return ok({"added": True})


# Registered before /friends/{friend_id} so "locations" is not taken as an id.
@router.get("/users/{user_id}/friends/locations", response_model=ApiResponse[List[UserProfile]])
async def friends_locations(user_id: str) -> ApiResponse[List[UserProfile]]:
	friends = await presence_service.get_friends_locations(user_id)
	return ok([UserProfile.from_domain(friend) for friend in friends])


@router.get("/users/{user_id}/friends/{friend_id}", response_model=ApiResponse[UserProfile])
async def friend_location(user_id: str, friend_id: str) -> ApiResponse[UserProfile]:
	friend = await presence_service.get_friend_location(user_id, friend_id)
	return ok(UserProfile.from_domain(friend))


@router.delete("/users/{user_id}/friends/{friend_id}", response_model=ApiResponse[dict[str, bool]])
async def remove_friend(
	friend_id: str,
	user_id: str = Depends(require_verified_identity),
) -> ApiResponse[dict[str, bool]]:
	await service.remove_friend(user_id, friend_id)
	return ok({"removed": True})
