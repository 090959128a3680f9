"""Uniform ``{success, data, error}`` response envelope."""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, model_serializer

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
	success: bool
	data: Optional[T] = None
	error: Optional[str] = None

	@model_serializer(mode="wrap")
	def _omit_empty(self, handler) -> dict[str, Any]:
		# Only the envelope drops empty keys; nulls inside ``data`` are kept.
		payload = handler(self)
		if self.data is None:
			payload.pop("data", None)
		if self.error is None:
			payload.pop("error", None)
		return payload


def ok(data: T) -> ApiResponse[T]:
	return ApiResponse(success=True, data=data)
