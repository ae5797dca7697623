"""
Dependencies used by the API.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger
from structlog.typing import FilteringBoundLogger

from localgroup.config.managers import AsyncSessionManager
from localgroup.config.settings import Settings
from localgroup.service.directory import DatabaseIdentityLookup
from localgroup.service.lookup import IdentityLookup


@lru_cache
def SETTINGS() -> Settings:
    return Settings()


@lru_cache
def DATABASE_MANAGER() -> AsyncSessionManager:
    return SETTINGS().async_manager()


async def get_async_session():
    async with DATABASE_MANAGER().session() as session:
        async with session.begin():
            yield session


def logger():
    return get_logger()


def get_identity_lookup(
    conn: Annotated[AsyncSession, Depends(get_async_session)],
) -> IdentityLookup:
    return DatabaseIdentityLookup(conn=conn)


LoggerDependency = Annotated[FilteringBoundLogger, Depends(logger)]
IdentityLookupDependency = Annotated[IdentityLookup, Depends(get_identity_lookup)]
