"""Audit helpers for friend requests & friendships."""

from __future__ import annotations

import logging
from typing import Dict

from linda.obs import metrics as obs_metrics

logger = logging.getLogger("linda.audit.social")


def log_request_event(event: str, fields: Dict[str, str]) -> None:
	logger.info("friend_request_%s", event, extra={"event": f"friend_request.{event}", **fields})


def log_friend_event(event: str, fields: Dict[str, str]) -> None:
	logger.info("friendship_%s", event, extra={"event": f"friendship.{event}", **fields})


def inc_request_sent() -> None:
	obs_metrics.inc_friend_request_sent()


def inc_send_reject(reason: str) -> None:
	obs_metrics.inc_friend_request_reject(reason)


def inc_request_accept() -> None:
	obs_metrics.inc_friend_request_accept()


def inc_request_decline() -> None:
	obs_metrics.inc_friend_request_decline()


def inc_friend_edge(action: str) -> None:
	obs_metrics.inc_friend_edge(action)
