"""
Core configuration
"""

import pytest_asyncio

from localgroup.config.settings import Settings


@pytest_asyncio.fixture(scope="session")
def server_settings(tmp_path_factory):
    database_path = tmp_path_factory.mktemp("directory") / "identities.db"

    yield Settings(
        database_type="sqlite",
        database_db=str(database_path),
        database_echo=True,
    )


@pytest_asyncio.fixture(scope="session")
def database(server_settings: Settings):
    manager = server_settings.sync_manager()
    manager.create_all()
    yield
    manager.drop_all()
