"""In-memory store owning every user's presence record."""

from __future__ import annotations

import time
from typing import Callable, Dict, Optional

from linda.domain.presence.models import Location, SharingLevel, User
from linda.infra.locks import ReadWriteLock


def _epoch_seconds() -> int:
	return int(time.time())


class UserRegistry:
	"""Sole writer of user records.

	Records are created on the first mutation of any field and never removed.
	Callers only ever receive copies, so a snapshot cannot change under them.
	"""

	def __init__(self, clock: Callable[[], int] = _epoch_seconds) -> None:
		self._clock = clock
		self._users: Dict[str, User] = {}
		self._lock = ReadWriteLock()

	def get(self, user_id: str) -> Optional[User]:
		with self._lock.read():
			user = self._users.get(user_id)
			return user.copy() if user else None

	def count(self) -> int:
		with self._lock.read():
			return len(self._users)

	def upsert_location(self, user_id: str, location: Location) -> User:
		def _apply(user: User, stamp: int) -> None:
			stored = location.copy()
			stored.timestamp = stamp
			user.location = stored

		return self._mutate(user_id, _apply)

	def upsert_sharing_level(self, user_id: str, level: SharingLevel) -> User:
		def _apply(user: User, stamp: int) -> None:
			user.sharing_level = SharingLevel(level)

		return self._mutate(user_id, _apply)

	def upsert_profile(self, user_id: str, user_name: Optional[str]) -> User:
		def _apply(user: User, stamp: int) -> None:
			user.user_name = user_name

		return self._mutate(user_id, _apply)

	def _mutate(self, user_id: str, apply: Callable[[User, int], None]) -> User:
		with self._lock.write():
			user = self._users.get(user_id)
			if user is None:
				user = User(id=user_id)
				self._users[user_id] = user
			# lastUpdated never moves backwards, even if the wall clock does.
			stamp = max(self._clock(), user.last_updated or 0)
			apply(user, stamp)
			user.last_updated = stamp
			return user.copy()
