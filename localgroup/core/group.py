"""
Core local group data models.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ObjectMeta(BaseModel):
    """
    Generic object metadata. Only `name` carries rules of its own; the rest
    is checked for consistency across updates.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    namespace: str = ""
    uid: UUID | None = None
    resource_version: str = Field(default="", alias="resourceVersion")
    generation: int = 0
    creation_timestamp: datetime | None = Field(
        default=None, alias="creationTimestamp"
    )
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)


class MemberRef(BaseModel):
    # An empty name means the member has not been resolved yet
    id: str
    name: str = ""

    @property
    def resolved(self) -> bool:
        return bool(self.name)


class LocalGroupSpec(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    tenant_id: str = Field(default="", alias="tenantID")
    display_name: str = Field(default="", alias="displayName")


class LocalGroupStatus(BaseModel):
    users: list[MemberRef] = Field(default_factory=list)


class LocalGroup(BaseModel):
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: LocalGroupSpec = Field(default_factory=LocalGroupSpec)
    status: LocalGroupStatus = Field(default_factory=LocalGroupStatus)

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def tenant_id(self) -> str:
        return self.spec.tenant_id

    @property
    def members(self) -> list[MemberRef]:
        return self.status.users
