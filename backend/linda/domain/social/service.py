"""Service layer orchestrating friendships and friend requests."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from linda import container
from linda.domain.social import audit
from linda.domain.social.exceptions import DuplicateRequest, FriendLinkIncomplete
from linda.domain.social.graph import FriendGraphStore
from linda.domain.social.models import FriendRequest
from linda.obs import metrics as obs_metrics
from linda.settings import settings

logger = logging.getLogger(__name__)


async def list_friends(user_id: str) -> List[str]:
	return container.get_friend_graph().get_friends(user_id)


async def add_friend(user_id: str, friend_id: str) -> None:
	container.get_friend_graph().add_friend(user_id, friend_id)
	audit.inc_friend_edge("add")
	audit.log_friend_event("added", {"from_user": user_id, "to_user": friend_id})


async def remove_friend(user_id: str, friend_id: str) -> None:
	container.get_friend_graph().remove_friend(user_id, friend_id)
	audit.inc_friend_edge("remove")
	audit.log_friend_event("removed", {"from_user": user_id, "to_user": friend_id})


async def send_request(sender_id: str, receiver_id: str) -> FriendRequest:
	try:
		request = container.get_request_workflow().send(sender_id, receiver_id)
	except DuplicateRequest as exc:
		audit.inc_send_reject(exc.reason)
		raise
	audit.inc_request_sent()
	audit.log_request_event(
		"sent",
		{"friend_request_id": request.id, "from_user": sender_id, "to_user": receiver_id},
	)
	return request


async def list_pending(user_id: str) -> List[FriendRequest]:
	return container.get_request_workflow().list_pending(user_id)


async def get_request(request_id: str) -> Optional[FriendRequest]:
	return container.get_request_workflow().get(request_id)


async def accept_request(request_id: str) -> FriendRequest:
	"""Accept a request and make sender and receiver friends.

	The accept and the link are two separate store writes. Linking is retried
	until both directions exist, writing only the directions that are missing, so
	re-accepting never duplicates the friendship. If the edges are still
	missing after ``friend_link_max_attempts`` tries, the request stays
	accepted and ``FriendLinkIncomplete`` is raised.
	"""
	request = container.get_request_workflow().accept(request_id)
	audit.inc_request_accept()
	audit.log_request_event(
		"accepted",
		{"friend_request_id": request.id, "from_user": request.sender_id, "to_user": request.receiver_id},
	)
	_link_both_directions(request)
	return request


def _missing_directions(graph: FriendGraphStore, user_a: str, user_b: str) -> List[Tuple[str, str]]:
	pairs = dict.fromkeys(((user_a, user_b), (user_b, user_a)))
	return [(owner, friend) for owner, friend in pairs if not graph.are_friends(owner, friend)]


def _link_both_directions(request: FriendRequest) -> None:
	graph = container.get_friend_graph()
	sender, receiver = request.sender_id, request.receiver_id
	for attempt in range(settings.friend_link_max_attempts):
		missing = _missing_directions(graph, sender, receiver)
		if not missing:
			return
		if attempt:
			obs_metrics.inc_friend_link_retry()
		# write only the absent side
		for owner, friend in missing:
			graph.link(owner, friend)
			audit.inc_friend_edge("add")
			audit.log_friend_event("added", {"from_user": owner, "to_user": friend})
	if not _missing_directions(graph, sender, receiver):
		return
	obs_metrics.inc_friend_link_failure()
	logger.error(
		"friend_link_incomplete",
		extra={"friend_request_id": request.id, "attempts": settings.friend_link_max_attempts},
	)
	raise FriendLinkIncomplete()


async def decline_request(request_id: str) -> None:
	container.get_request_workflow().decline(request_id)
	audit.inc_request_decline()
	audit.log_request_event("declined", {"friend_request_id": request_id})
