"""Pydantic schemas for profile, location and sharing-level endpoints."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from linda.domain.presence.models import Location, SharingLevel, User


class LocationPayload(BaseModel):
	"""Location as reported by, or shown to, a client."""

	latitude: float = Field(..., ge=-90.0, le=90.0)
	longitude: float = Field(..., ge=-180.0, le=180.0)
	city: Optional[str] = None
	country: Optional[str] = None
	timestamp: Optional[int] = Field(default=None, description="Epoch seconds, stamped by the server on update")

	def to_domain(self) -> Location:
		return Location(
			latitude=self.latitude,
			longitude=self.longitude,
			city=self.city,
			country=self.country,
			timestamp=self.timestamp,
		)

	@classmethod
	def from_domain(cls, location: Location) -> "LocationPayload":
		return cls(
			latitude=location.latitude,
			longitude=location.longitude,
			city=location.city,
			country=location.country,
			timestamp=location.timestamp,
		)


class UserProfile(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	id: str
	user_name: Optional[str] = Field(default=None, alias="userName")
	sharing_level: Optional[SharingLevel] = Field(default=None, alias="sharingLevel")
	location: Optional[LocationPayload] = None
	last_updated: Optional[int] = Field(default=None, alias="lastUpdated")

	@classmethod
	def from_domain(cls, user: User) -> "UserProfile":
		return cls(
			id=user.id,
			user_name=user.user_name,
			sharing_level=user.sharing_level,
			location=LocationPayload.from_domain(user.location) if user.location else None,
			last_updated=user.last_updated,
		)


class UpdateProfileRequest(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	user_name: Optional[str] = Field(default=None, alias="userName", max_length=120)


class UpdateLocationRequest(BaseModel):
	user_id: Optional[str] = Field(default=None, description="Must match the path user id when present")
	location: LocationPayload


class UpdateSharingLevelRequest(BaseModel):
	user_id: Optional[str] = Field(default=None, description="Must match the path user id when present")
	level: SharingLevel

