"""FastAPI application entrypoint."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from linda.api import auth, friend_requests, friends, ops, users
from linda.api.errors import install_error_handlers
from linda.api.middleware_request_id import RequestIdMiddleware
from linda.obs import init as obs_init
from linda.settings import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
	logger.info(
		"service_starting",
		extra={"port": settings.port, "env": settings.environment, "friend_store": "in_memory"},
	)
	try:
		yield
	finally:
		logger.info("service_stopping")


app = FastAPI(title="Linda Presence Core", lifespan=lifespan)
install_error_handlers(app)

allow_origins = list(settings.cors_allow_origins) or ["*"]
# Starlette disallows wildcard '*' with allow_credentials=True.
app.add_middleware(
	CORSMiddleware,
	allow_origins=allow_origins,
	allow_credentials="*" not in allow_origins,
	allow_methods=["*"],
	allow_headers=["*"],
)

obs_init(app)

# Ensure every request carries an X-Request-Id and make it available on request.state
app.add_middleware(RequestIdMiddleware)

app.include_router(ops.router)
app.include_router(auth.router, tags=["identity"])
app.include_router(users.router, tags=["presence"])
app.include_router(friends.router, tags=["friends"])
app.include_router(friend_requests.router, tags=["friend-requests"])


def run() -> None:
	uvicorn.run("linda.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
	run()
