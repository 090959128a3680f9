"""REST API surface for profiles, locations and sharing levels."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from linda.api.envelope import ApiResponse, ok
from linda.domain.presence import service
from linda.domain.presence.schemas import (
	UpdateLocationRequest,
	UpdateProfileRequest,
	UpdateSharingLevelRequest,
	UserProfile,
)
from linda.infra.auth import get_viewer_id, require_verified_identity

router = APIRouter()


def ensure_same_user(path_user_id: str, body_user_id: Optional[str]) -> None:
	if body_user_id is not None and body_user_id != path_user_id:
		raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="user_mismatch")


@router.get("/users/{user_id}", response_model=ApiResponse[UserProfile])
async def get_profile(
	user_id: str,
	viewer_id: Optional[str] = Depends(get_viewer_id),
) -> ApiResponse[UserProfile]:
	user = await service.get_profile(user_id, viewer_id=viewer_id)
	return ok(UserProfile.from_domain(user))


@router.put("/users/{user_id}", response_model=ApiResponse[dict[str, bool]])
async def update_profile(
	payload: UpdateProfileRequest,
	user_id: str = Depends(require_verified_identity),
) -> ApiResponse[dict[str, bool]]:
	await service.update_profile(user_id, payload.user_name)
	return ok({"updated": True})


@router.post("/users/{user_id}/location", response_model=ApiResponse[dict[str, bool]])
async def update_location(
	payload: UpdateLocationRequest,
	user_id: str = Depends(require_verified_identity),
) -> ApiResponse[dict[str, bool]]:
	ensure_same_user(user_id, payload.user_id)
	await service.update_location(user_id, payload.location.to_domain())
	return ok({"updated": True})


@router.post("/users/{user_id}/sharing-level", response_model=ApiResponse[dict[str, bool]])
async def update_sharing_level(
	payload: UpdateSharingLevelRequest,
	user_id: str = Depends(require_verified_identity),
) -> ApiResponse[dict[str, bool]]:
	ensure_same_user(user_id, payload.user_id)
	await service.update_sharing_level(user_id, payload.level)
	return ok({"updated": True})
