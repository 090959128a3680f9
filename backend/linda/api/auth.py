"""Identity verification endpoint backed by the external identity collaborator."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from linda import container
from linda.api.envelope import ApiResponse, ok
from linda.infra.auth import IdentityVerifier
from linda.obs import metrics as obs_metrics

router = APIRouter()
logger = logging.getLogger(__name__)


class VerifyIdentityRequest(BaseModel):
	celo_uid: str = Field(..., min_length=1)
	user_id: str = Field(..., min_length=1)


class VerifyIdentityResult(BaseModel):
	verified: bool
	user_id: str


@router.post("/auth/verify", response_model=ApiResponse[VerifyIdentityResult])
async def verify_identity(
	payload: VerifyIdentityRequest,
	verifier: IdentityVerifier = Depends(container.get_identity_verifier),
) -> ApiResponse[VerifyIdentityResult]:
	verified = await verifier.verify_uid(payload.celo_uid, payload.user_id)
	if not verified:
		obs_metrics.inc_identity_check("rejected")
		logger.warning("identity_verify_mismatch", extra={"target_user": payload.user_id})
		raise HTTPException(status.HTTP_401_UNAUTHORIZED, detail="Celo UID verification failed")
	obs_metrics.inc_identity_check("verified")
	return ok(VerifyIdentityResult(verified=True, user_id=payload.user_id))
