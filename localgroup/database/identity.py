"""
ORM for identities in the directory.
"""

from sqlmodel import Field, SQLModel

from localgroup.core.identity import IdentityData


class LocalIdentity(SQLModel, table=True):
    __tablename__ = "local_identity"

    identity_id: str = Field(primary_key=True)
    tenant_id: str = Field(index=True)
    username: str

    def to_core(self) -> IdentityData:
        """
        Convert this LocalIdentity ORM object to an IdentityData core object.
        """
        return IdentityData(
            id=self.identity_id, tenant_id=self.tenant_id, username=self.username
        )
