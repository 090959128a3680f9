"""Identity helpers for FastAPI endpoints.

The service does not authenticate anyone itself. An external identity
collaborator decides whether an external uid belongs to a user id, and every
mutating route asks it before touching a store.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from fastapi import Depends, Header, HTTPException, Path, status

from linda import container
from linda.obs import metrics as obs_metrics
from linda.settings import settings

logger = logging.getLogger(__name__)


class IdentityVerifier(Protocol):
	"""Decides whether an external identity maps to a user id."""

	async def verify_uid(self, celo_uid: str, user_id: str) -> bool:
		...

	async def get_uid(self, user_id: str) -> Optional[str]:
		...


class DevIdentityVerifier:
	"""Approves every pair. Used until on-chain uid lookups are wired in."""

	async def verify_uid(self, celo_uid: str, user_id: str) -> bool:
		logger.info("identity_verify_dev", extra={"celo_uid": celo_uid, "target_user": user_id})
		return True

	async def get_uid(self, user_id: str) -> Optional[str]:
		logger.info("identity_lookup_dev", extra={"target_user": user_id})
		return None


async def get_viewer_id(
	user_id: str = Path(...),
	x_user_id: Optional[str] = Header(default=None, alias="X-User-Id"),
	x_celo_uid: Optional[str] = Header(default=None, alias="X-Celo-Uid"),
	verifier: IdentityVerifier = Depends(container.get_identity_verifier),
) -> Optional[str]:
	"""Return the calling user id, if the caller identified itself.

	Claiming to be the profile owner unlocks the unfiltered record, so that
	claim only stands once the identity collaborator approves ``X-Celo-Uid``
	for it. An unproven owner claim is read as an anonymous viewer.
	"""
	viewer = (x_user_id or "").strip() or None
	if viewer is None or viewer != user_id:
		return viewer
	if not x_celo_uid:
		if settings.is_dev():
			return viewer
		obs_metrics.inc_identity_check("missing")
		return None
	if not await verifier.verify_uid(x_celo_uid, viewer):
		obs_metrics.inc_identity_check("rejected")
		logger.warning("owner_view_rejected", extra={"target_user": user_id})
		return None
	obs_metrics.inc_identity_check("verified")
	return viewer


async def require_verified_identity(
	user_id: str = Path(...),
	x_celo_uid: Optional[str] = Header(default=None, alias="X-Celo-Uid"),
	verifier: IdentityVerifier = Depends(container.get_identity_verifier),
) -> str:
	"""Gate a mutating route on the identity collaborator's decision.

	In development a missing ``X-Celo-Uid`` header is tolerated so local
	tools can drive the API directly. Everywhere else the header is required.
	"""
	if not x_celo_uid:
		if settings.is_dev():
			return user_id
		obs_metrics.inc_identity_check("missing")
		raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="identity_required")
	verified = await verifier.verify_uid(x_celo_uid, user_id)
	if not verified:
		obs_metrics.inc_identity_check("rejected")
		logger.warning("identity_rejected", extra={"target_user": user_id})
		raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="identity_unverified")
	obs_metrics.inc_identity_check("verified")
	return user_id
