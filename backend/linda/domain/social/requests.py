"""Friend request state machine.

``pending -> accepted`` is the only transition kept on record. Declining
deletes the request outright, so a declined pair may be requested again.
The workflow never touches the friendship graph; linking is the caller's job.
"""

from __future__ import annotations

import time
from typing import Callable, Dict, List, Optional

from linda.domain.social.exceptions import DuplicateRequest, RequestNotFound
from linda.domain.social.models import FriendRequest, FriendRequestStatus
from linda.infra.locks import ReadWriteLock

DEFAULT_SEPARATOR = "_"


def request_id_for(sender_id: str, receiver_id: str, separator: str = DEFAULT_SEPARATOR) -> str:
	"""Derive the request id for an ordered (sender, receiver) pair.

	Ids are not escaped, so user ids containing the separator can collide.
	"""
	return f"{sender_id}{separator}{receiver_id}"


class FriendRequestWorkflow:
	def __init__(
		self,
		*,
		separator: str = DEFAULT_SEPARATOR,
		clock: Callable[[], float] = time.time,
	) -> None:
		self._separator = separator
		self._clock = clock
		self._requests: Dict[str, FriendRequest] = {}
		self._lock = ReadWriteLock()

	def request_id_for(self, sender_id: str, receiver_id: str) -> str:
		return request_id_for(sender_id, receiver_id, self._separator)

	def send(self, sender_id: str, receiver_id: str) -> FriendRequest:
		request_id = self.request_id_for(sender_id, receiver_id)
		with self._lock.write():
			if request_id in self._requests:
				raise DuplicateRequest()
			request = FriendRequest(
				id=request_id,
				sender_id=sender_id,
				receiver_id=receiver_id,
				status=FriendRequestStatus.PENDING,
				timestamp=int(self._clock()),
			)
			self._requests[request_id] = request
			return request.copy()

	def get(self, request_id: str) -> Optional[FriendRequest]:
		with self._lock.read():
			request = self._requests.get(request_id)
			return request.copy() if request else None

	def list_pending(self, user_id: str) -> List[FriendRequest]:
		with self._lock.read():
			return [
				request.copy()
				for request in self._requests.values()
				if request.receiver_id == user_id and request.is_pending
			]

	def accept(self, request_id: str) -> FriendRequest:
		with self._lock.write():
			request = self._requests.get(request_id)
			if request is None:
				raise RequestNotFound()
			request.status = FriendRequestStatus.ACCEPTED
			return request.copy()

	def decline(self, request_id: str) -> None:
		# Missing ids are not an error here, unlike accept().
		with self._lock.write():
			self._requests.pop(request_id, None)

	def count(self) -> int:
		with self._lock.read():
			return len(self._requests)
