"""Presence service: profile reads and writes plus friend location lookups.

Every location handed to someone other than its owner goes through
``privacy.filter_user`` first.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from linda import container
from linda.domain.presence import privacy
from linda.domain.presence.models import Location, SharingLevel, User
from linda.obs import metrics as obs_metrics

logger = logging.getLogger(__name__)


def _third_party_view(user: User) -> User:
	filtered = privacy.filter_user(user)
	if user.location is not None:
		precision = user.sharing_level.value if user.sharing_level else "hidden"
		obs_metrics.inc_location_read(precision)
	return filtered


def _load(user_id: str) -> User:
	user = container.get_user_registry().get(user_id)
	return user if user is not None else User.empty(user_id)


async def get_profile(user_id: str, viewer_id: Optional[str] = None) -> User:
	"""Return ``user_id``'s profile as ``viewer_id`` may see it.

	Unknown ids produce an empty profile instead of an error. Only the owner
	sees their own exact location.
	"""
	user = _load(user_id)
	if viewer_id is not None and viewer_id == user_id:
		return user
	return _third_party_view(user)


def _record_update(user_id: str, field: str) -> None:
	obs_metrics.inc_presence_update(field)
	obs_metrics.set_registered_users(container.get_user_registry().count())
	logger.info("presence_updated", extra={"target_user": user_id, "field": field})


async def update_location(user_id: str, location: Location) -> User:
	user = container.get_user_registry().upsert_location(user_id, location)
	_record_update(user_id, "location")
	return user


async def update_sharing_level(user_id: str, level: SharingLevel) -> User:
	user = container.get_user_registry().upsert_sharing_level(user_id, level)
	_record_update(user_id, "sharing_level")
	return user


async def update_profile(user_id: str, user_name: Optional[str]) -> User:
	user = container.get_user_registry().upsert_profile(user_id, user_name)
	_record_update(user_id, "user_name")
	return user


async def get_friend_location(user_id: str, friend_id: str) -> User:
	"""Filtered record of ``friend_id``, or an empty profile if not a friend."""
	if not container.get_friend_graph().are_friends(user_id, friend_id):
		return User.empty(friend_id)
	friend = container.get_user_registry().get(friend_id)
	if friend is None:
		return User.empty(friend_id)
	return _third_party_view(friend)


async def get_friends_locations(user_id: str) -> List[User]:
	"""Filtered records of every friend that has one, in friend-list order."""
	registry = container.get_user_registry()
	seen: set[str] = set()
	results: List[User] = []
	for friend_id in container.get_friend_graph().get_friends(user_id):
		if friend_id in seen:
			continue
		seen.add(friend_id)
		friend = registry.get(friend_id)
		if friend is not None:
			results.append(_third_party_view(friend))
	return results
