"""Lightweight service container shared by the API and domain services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linda.domain.presence.registry import UserRegistry
from linda.domain.social.graph import FriendGraphStore, InMemoryFriendGraph
from linda.domain.social.requests import FriendRequestWorkflow
from linda.settings import settings

if TYPE_CHECKING:  # pragma: no cover - type-only imports
	from linda.infra.auth import IdentityVerifier


def _default_verifier() -> "IdentityVerifier":
	from linda.infra.auth import DevIdentityVerifier

	return DevIdentityVerifier()


_registry = UserRegistry()
_graph: FriendGraphStore = InMemoryFriendGraph()
_requests = FriendRequestWorkflow(separator=settings.friend_request_separator)
_verifier: "IdentityVerifier | None" = None


def get_user_registry() -> UserRegistry:
	return _registry


def get_friend_graph() -> FriendGraphStore:
	return _graph


def get_request_workflow() -> FriendRequestWorkflow:
	return _requests


def get_identity_verifier() -> "IdentityVerifier":
	global _verifier
	if _verifier is None:
		_verifier = _default_verifier()
	return _verifier


def configure(
	*,
	graph: FriendGraphStore | None = None,
	verifier: "IdentityVerifier | None" = None,
) -> None:
	"""Swap in external collaborators (a durable graph, a real verifier)."""
	global _graph, _verifier
	if graph is not None:
		_graph = graph
	if verifier is not None:
		_verifier = verifier


def reset_state() -> None:
	"""Drop every store and collaborator. Used by tests."""
	global _registry, _graph, _requests, _verifier
	_registry = UserRegistry()
	_graph = InMemoryFriendGraph()
	_requests = FriendRequestWorkflow(separator=settings.friend_request_separator)
	_verifier = None
