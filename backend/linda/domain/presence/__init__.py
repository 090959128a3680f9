"""Presence domain exports."""

from . import privacy, service  # noqa: F401
from .models import Location, SharingLevel, User  # noqa: F401
from .registry import UserRegistry  # noqa: F401
