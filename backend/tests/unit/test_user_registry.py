from linda.domain.presence.models import Location, SharingLevel
from linda.domain.presence.registry import UserRegistry


class _Clock:
    def __init__(self, *ticks):
        self._ticks = list(ticks)

    def __call__(self):
        if len(self._ticks) > 1:
            return self._ticks.pop(0)
        return self._ticks[0]


def test_unknown_user_is_absent():
    registry = UserRegistry()
    assert registry.get("unknown-user") is None
    assert registry.count() == 0


def test_location_update_creates_record_with_other_fields_empty():
    registry = UserRegistry(clock=_Clock(100))
    registry.upsert_location("alice", Location(latitude=1.5, longitude=2.5, city="Lisbon"))

    user = registry.get("alice")
    assert user is not None
    assert user.id == "alice"
    assert user.user_name is None
    assert user.sharing_level is None
    assert user.location.latitude == 1.5
    assert user.location.city == "Lisbon"
    assert user.location.timestamp == 100
    assert user.last_updated == 100


def test_updates_touch_only_their_field():
    registry = UserRegistry(clock=_Clock(1, 2, 3))
    registry.upsert_profile("alice", "Alice")
    registry.upsert_sharing_level("alice", SharingLevel.CITY)
    registry.upsert_location("alice", Location(latitude=0.0, longitude=0.0))

    user = registry.get("alice")
    assert user.user_name == "Alice"
    assert user.sharing_level is SharingLevel.CITY
    assert user.location is not None
    assert user.last_updated == 3
    assert registry.count() == 1


def test_profile_update_with_none_clears_name():
    registry = UserRegistry()
    registry.upsert_profile("alice", "Alice")
    registry.upsert_profile("alice", None)
    assert registry.get("alice").user_name is None


def test_last_updated_never_decreases_when_clock_steps_back():
    registry = UserRegistry(clock=_Clock(50, 40, 60, 10))
    seen = []
    for name in ("a", "b", "c", "d"):
        seen.append(registry.upsert_profile("alice", name).last_updated)
    assert seen == [50, 50, 60, 60]
    assert seen == sorted(seen)


def test_snapshots_are_copies():
    registry = UserRegistry()
    registry.upsert_location("alice", Location(latitude=1.0, longitude=1.0))

    snapshot = registry.get("alice")
    snapshot.location.latitude = 99.0
    snapshot.user_name = "mallory"

    stored = registry.get("alice")
    assert stored.location.latitude == 1.0
    assert stored.user_name is None


def test_caller_location_object_is_not_retained():
    registry = UserRegistry(clock=_Clock(5))
    location = Location(latitude=3.0, longitude=4.0)
    registry.upsert_location("alice", location)
    location.latitude = -3.0
    assert location.timestamp is None
    assert registry.get("alice").location.latitude == 3.0
