import threading

import pytest

from linda.domain.social.exceptions import DuplicateRequest, RequestNotFound
from linda.domain.social.models import FriendRequestStatus
from linda.domain.social.requests import FriendRequestWorkflow, request_id_for


def test_request_id_is_order_sensitive():
    assert request_id_for("A", "B") == "A_B"
    assert request_id_for("B", "A") == "B_A"
    assert request_id_for("A", "B", separator=":") == "A:B"


def test_send_creates_pending_request():
    workflow = FriendRequestWorkflow(clock=lambda: 1700000000.7)
    request = workflow.send("A", "B")
    assert request.id == "A_B"
    assert request.sender_id == "A"
    assert request.receiver_id == "B"
    assert request.status is FriendRequestStatus.PENDING
    assert request.timestamp == 1700000000


def test_duplicate_send_is_rejected():
    workflow = FriendRequestWorkflow()
    workflow.send("A", "B")
    with pytest.raises(DuplicateRequest) as exc_info:
        workflow.send("A", "B")
    assert exc_info.value.reason == "already_exists"


def test_reverse_direction_is_a_distinct_request():
    workflow = FriendRequestWorkflow()
    workflow.send("A", "B")
    reverse = workflow.send("B", "A")
    assert reverse.id == "B_A"
    assert workflow.count() == 2


def test_send_after_accept_is_still_duplicate():
    workflow = FriendRequestWorkflow()
    workflow.send("A", "B")
    workflow.accept("A_B")
    with pytest.raises(DuplicateRequest):
        workflow.send("A", "B")


def test_send_after_decline_is_allowed():
    workflow = FriendRequestWorkflow()
    workflow.send("A", "B")
    workflow.decline("A_B")
    assert workflow.send("A", "B").status is FriendRequestStatus.PENDING


def test_list_pending_filters_receiver_and_status():
    workflow = FriendRequestWorkflow()
    workflow.send("A", "C")
    workflow.send("B", "C")
    workflow.send("C", "A")
    workflow.accept("B_C")

    pending = workflow.list_pending("C")
    assert [request.id for request in pending] == ["A_C"]
    assert workflow.list_pending("nobody") == []


def test_accept_flips_status_in_place():
    workflow = FriendRequestWorkflow()
    workflow.send("A", "B")
    accepted = workflow.accept("A_B")
    assert accepted.status is FriendRequestStatus.ACCEPTED
    assert workflow.get("A_B").status is FriendRequestStatus.ACCEPTED


def test_accept_missing_request_raises_not_found():
    workflow = FriendRequestWorkflow()
    with pytest.raises(RequestNotFound):
        workflow.accept("nonexistent")


def test_decline_missing_request_is_success():
    workflow = FriendRequestWorkflow()
    assert workflow.decline("nonexistent") is None


def test_decline_removes_record():
    workflow = FriendRequestWorkflow()
    workflow.send("A", "B")
    workflow.decline("A_B")
    assert workflow.get("A_B") is None
    assert workflow.list_pending("B") == []


def test_returned_records_are_snapshots():
    workflow = FriendRequestWorkflow()
    request = workflow.send("A", "B")
    request.status = FriendRequestStatus.ACCEPTED
    assert workflow.get("A_B").status is FriendRequestStatus.PENDING


def test_concurrent_sends_yield_exactly_one_request():
    workflow = FriendRequestWorkflow()
    barrier = threading.Barrier(8)
    outcomes = []
    lock = threading.Lock()

    def _send():
        barrier.wait()
        try:
            workflow.send("A", "B")
            result = "ok"
        except DuplicateRequest:
            result = "dup"
        with lock:
            outcomes.append(result)

    threads = [threading.Thread(target=_send) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert outcomes.count("ok") == 1
    assert outcomes.count("dup") == 7
