"""
Builders shared by the test suites.
"""

from localgroup.core.group import (
    LocalGroup,
    LocalGroupSpec,
    LocalGroupStatus,
    MemberRef,
    ObjectMeta,
)
from localgroup.core.identity import IdentityData


def make_group(
    members: list[tuple[str, str]],
    name: str = "g1",
    tenant_id: str = "t1",
    display_name: str = "Platform Team",
    **metadata,
) -> LocalGroup:
    metadata.setdefault("resource_version", "1")

    return LocalGroup(
        metadata=ObjectMeta(name=name, **metadata),
        spec=LocalGroupSpec(tenant_id=tenant_id, display_name=display_name),
        status=LocalGroupStatus(
            users=[MemberRef(id=member_id, name=member_name) for member_id, member_name in members]
        ),
    )


def identity(identity_id: str, tenant_id: str, username: str) -> IdentityData:
    return IdentityData(id=identity_id, tenant_id=tenant_id, username=username)
