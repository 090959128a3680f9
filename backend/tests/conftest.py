import sys
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Ensure backend package is importable when tests run from repo root
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
	sys.path.insert(0, str(BACKEND_ROOT))

from linda import container
from linda.main import app
from linda.settings import settings


@pytest.fixture(autouse=True)
def fresh_state():
	container.reset_state()
	try:
		yield
	finally:
		container.reset_state()


@pytest.fixture(autouse=True)
def force_test_settings():
	"""Ensure a consistent test environment.

	Mutating routes accept a missing X-Celo-Uid header only in dev mode.
	"""
	original_env = settings.environment
	original_attempts = settings.friend_link_max_attempts
	settings.environment = "dev"
	try:
		yield
	finally:
		settings.environment = original_env
		settings.friend_link_max_attempts = original_attempts


@pytest_asyncio.fixture
async def api_client():
	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://testserver") as client:
		yield client
