# tests/conftest.py
import os
import logging
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Ensure test-friendly env before the config module is imported
os.environ.setdefault("ANTHROPIC_API_KEY", "test-key")

# IMPORTANT: import the app after envs are set
from cc_agent.core.config import AgentSettings
from cc_agent.main import create_app

from tests.fakes import MODEL, FakeQuery, mixed_messages


@pytest.fixture
def settings():
    return AgentSettings(model=MODEL, system_prompt="Be brief.", permission_mode="acceptEdits", max_turns=3)

@pytest.fixture
def fake_query():
    return FakeQuery(mixed_messages())

@pytest_asyncio.fixture
async def app(settings, fake_query):
    return create_app(settings=settings, query=fake_query)

@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

@pytest.fixture
def caplog_info(caplog):
    caplog.set_level(logging.INFO)
    return caplog
