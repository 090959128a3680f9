"""Friendship adjacency store.

Friendships are kept as two plain lists, one per endpoint. The lists are not
deduplicated: adding the same pair twice produces two entries on each side,
and removing the pair strips every occurrence.
"""

from __future__ import annotations

from typing import Dict, List, Protocol

from linda.infra.locks import ReadWriteLock


class FriendGraphStore(Protocol):
	"""Contract a durable friendship backend has to honour."""

	def get_friends(self, user_id: str) -> List[str]:
		...

	def add_friend(self, user_id: str, friend_id: str) -> None:
		...

	def link(self, user_id: str, friend_id: str) -> None:
		...

	def remove_friend(self, user_id: str, friend_id: str) -> None:
		...

	def are_friends(self, user_id: str, friend_id: str) -> bool:
		...

	def edge_count(self) -> int:
		...


class InMemoryFriendGraph:
	"""Reference store used until friendships move to a verifiable backend."""

	def __init__(self) -> None:
		self._adjacency: Dict[str, List[str]] = {}
		self._lock = ReadWriteLock()

	def get_friends(self, user_id: str) -> List[str]:
		with self._lock.read():
			return list(self._adjacency.get(user_id, ()))

	def are_friends(self, user_id: str, friend_id: str) -> bool:
		with self._lock.read():
			return friend_id in self._adjacency.get(user_id, ())

	def add_friend(self, user_id: str, friend_id: str) -> None:
		with self._lock.write():
			self._adjacency.setdefault(user_id, []).append(friend_id)
			self._adjacency.setdefault(friend_id, []).append(user_id)

	def link(self, user_id: str, friend_id: str) -> None:
		"""Add the single direction ``user_id`` -> ``friend_id``."""
		with self._lock.write():
			self._adjacency.setdefault(user_id, []).append(friend_id)

	def remove_friend(self, user_id: str, friend_id: str) -> None:
		with self._lock.write():
			self._strip(user_id, friend_id)
			self._strip(friend_id, user_id)

	def edge_count(self) -> int:
		with self._lock.read():
			return sum(len(friends) for friends in self._adjacency.values())

	def _strip(self, owner: str, target: str) -> None:
		friends = self._adjacency.get(owner)
		if friends is not None:
			friends[:] = [fid for fid in friends if fid != target]
