"""
Configuration variables and fixtures for the service layer tests.
"""

import pytest_asyncio
import structlog

from localgroup.config.settings import Settings
from localgroup.database.identity import LocalIdentity
from localgroup.service.mock import MockIdentityLookup

from ..helpers import identity


@pytest_asyncio.fixture(scope="session")
def session_manager(server_settings: Settings, database):
    yield server_settings.async_manager()


@pytest_asyncio.fixture(scope="session")
def logger():
    yield structlog.get_logger()


@pytest_asyncio.fixture(scope="session")
async def directory(session_manager):
    rows = [
        LocalIdentity(identity_id="u1", tenant_id="t1", username="alice"),
        LocalIdentity(identity_id="u3", tenant_id="t1", username="carol"),
        LocalIdentity(identity_id="u9", tenant_id="t2", username="mallory"),
    ]

    async with session_manager.session() as conn:
        async with conn.begin():
            conn.add_all(rows)
            ids = [row.identity_id for row in rows]

    yield ids

    async with session_manager.session() as conn:
        async with conn.begin():
            for identity_id in ids:
                await conn.delete(await conn.get(LocalIdentity, identity_id))


@pytest_asyncio.fixture
def lookup():
    yield MockIdentityLookup(
        identities=[
            identity("u1", "t1", "alice"),
            identity("u3", "t1", "carol"),
            identity("u9", "t2", "mallory"),
        ]
    )
