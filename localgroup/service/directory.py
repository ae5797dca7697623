"""
Identity lookup backed by the directory database.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from localgroup.core.identity import IdentityData
from localgroup.database.identity import LocalIdentity

from .lookup import IdentityLookup, IdentityNotFound


class DatabaseIdentityLookup(IdentityLookup):
    conn: AsyncSession

    def __init__(self, conn: AsyncSession):
        self.conn = conn

    async def get(self, identity_id: str) -> IdentityData:
        res = await self.conn.get(LocalIdentity, identity_id)

        if res is None:
            raise IdentityNotFound(
                f"Identity with ID {identity_id} not found in the directory"
            )

        return res.to_core()
