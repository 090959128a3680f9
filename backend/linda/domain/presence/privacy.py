"""Privacy filter applied before a location leaves its owner."""

from __future__ import annotations

from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from linda.domain.presence.models import Location, SharingLevel, User

CITY_PRECISION = 2


def round_half_away(value: float, digits: int = CITY_PRECISION) -> float:
	"""Round to ``digits`` decimals, ties away from zero.

	The builtin ``round`` uses banker's rounding, which would pull exact
	halves toward even digits. The scaled float is rounded exactly, so a
	product just below one half is never pushed up.
	"""
	scale = 10 ** digits
	scaled = Decimal(value * scale).quantize(Decimal(1), rounding=ROUND_HALF_UP)
	return float(scaled) / scale


def transform(location: Optional[Location], sharing_level: Optional[SharingLevel]) -> Optional[Location]:
	"""Return the view of ``location`` permitted by ``sharing_level``.

	- realtime: exact coordinates
	- city: latitude and longitude rounded to two decimals
	- no level: nothing
	"""
	if location is None or sharing_level is None:
		return None
	if sharing_level == SharingLevel.REALTIME:
		return location.copy()
	return replace(
		location,
		latitude=round_half_away(location.latitude),
		longitude=round_half_away(location.longitude),
	)


def filter_user(user: User) -> User:
	"""Copy of ``user`` as seen by anyone other than the user themselves."""
	return replace(user, location=transform(user.location, user.sharing_level))
