"""Central registry for Prometheus metrics used across the backend."""

from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram

REQUEST_COUNTER = Counter(
	"linda_http_requests_total",
	"Total HTTP requests processed",
	["route", "method", "status"],
)

REQUEST_LATENCY = Histogram(
	"linda_http_request_duration_seconds",
	"HTTP request latency in seconds",
	["route", "method"],
	buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.0),
)

PRESENCE_UPDATES = Counter(
	"linda_presence_updates_total",
	"User record mutations by field",
	["field"],
)

REGISTERED_USERS = Gauge(
	"linda_registered_users",
	"User records currently held in memory",
)

LOCATION_READS = Counter(
	"linda_location_reads_total",
	"Third-party location reads by resulting precision",
	["precision"],
)

FRIEND_REQUESTS_SENT = Counter(
	"linda_friend_requests_sent_total",
	"Friend requests created",
)

FRIEND_REQUEST_REJECTS = Counter(
	"linda_friend_requests_send_rejects_total",
	"Rejected friend request sends",
	["reason"],
)

FRIEND_REQUESTS_ACCEPTED = Counter(
	"linda_friend_requests_accept_total",
	"Friend requests accepted",
)

FRIEND_REQUESTS_DECLINED = Counter(
	"linda_friend_requests_decline_total",
	"Friend requests declined (including already absent ids)",
)

FRIEND_EDGES = Counter(
	"linda_friend_edges_total",
	"Friendship mutations",
	["action"],
)

FRIEND_LINK_RETRIES = Counter(
	"linda_friend_link_retries_total",
	"Extra attempts needed to link both directions after accept",
)

FRIEND_LINK_FAILURES = Counter(
	"linda_friend_link_failures_total",
	"Accepted requests left without both friendship edges",
)

IDENTITY_CHECKS = Counter(
	"linda_identity_checks_total",
	"Identity collaborator decisions on mutating routes",
	["result"],
)


def observe_request(route: str, method: str, status: int, elapsed_seconds: float) -> None:
	REQUEST_COUNTER.labels(route=route, method=method, status=str(status)).inc()
	REQUEST_LATENCY.labels(route=route, method=method).observe(elapsed_seconds)


def inc_presence_update(field: str) -> None:
	PRESENCE_UPDATES.labels(field=field).inc()


def set_registered_users(count: int) -> None:
	REGISTERED_USERS.set(count)


def inc_location_read(precision: str) -> None:
	LOCATION_READS.labels(precision=precision).inc()


def inc_friend_request_sent() -> None:
	FRIEND_REQUESTS_SENT.inc()


def inc_friend_request_reject(reason: str) -> None:
	FRIEND_REQUEST_REJECTS.labels(reason=reason).inc()


def inc_friend_request_accept() -> None:
	FRIEND_REQUESTS_ACCEPTED.inc()


def inc_friend_request_decline() -> None:
	FRIEND_REQUESTS_DECLINED.inc()


def inc_friend_edge(action: str) -> None:
	FRIEND_EDGES.labels(action=action).inc()


def inc_friend_link_retry() -> None:
	FRIEND_LINK_RETRIES.inc()


def inc_friend_link_failure() -> None:
	FRIEND_LINK_FAILURES.inc()


def inc_identity_check(result: str) -> None:
	IDENTITY_CHECKS.labels(result=result).inc()
