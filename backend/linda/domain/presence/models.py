"""Domain models for user presence: profile, location and visibility."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class SharingLevel(str, Enum):
	"""Visibility tier controlling how precisely a location is disclosed."""

	CITY = "city"
	REALTIME = "realtime"


@dataclass(slots=True)
class Location:
	latitude: float
	longitude: float
	city: Optional[str] = None
	country: Optional[str] = None
	timestamp: Optional[int] = None

	def copy(self) -> "Location":
		return replace(self)


@dataclass(slots=True)
class User:
	"""Presence record for one user. ``id`` never changes once created."""

	id: str
	user_name: Optional[str] = None
	sharing_level: Optional[SharingLevel] = None
	location: Optional[Location] = None
	last_updated: Optional[int] = None

	def copy(self) -> "User":
		return replace(self, location=self.location.copy() if self.location else None)

	@classmethod
	def empty(cls, user_id: str) -> "User":
		"""Profile handed out for ids the registry has never seen."""
		return cls(id=user_id)
