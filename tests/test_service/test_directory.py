"""
Tests the database-backed identity lookup.
"""

import pytest

from localgroup.core.group import MemberRef
from localgroup.service import validation as validation_service
from localgroup.service.directory import DatabaseIdentityLookup
from localgroup.service.lookup import IdentityNotFound

from ..helpers import make_group


@pytest.mark.asyncio(loop_scope="session")
async def test_read_identity(session_manager, directory):
    async with session_manager.session() as conn:
        lookup = DatabaseIdentityLookup(conn=conn)

        found = await lookup.get("u1")
        assert found.id == "u1"
        assert found.tenant_id == "t1"
        assert found.username == "alice"

        with pytest.raises(IdentityNotFound):
            await lookup.get("does_not_exist")


@pytest.mark.asyncio(loop_scope="session")
async def test_validate_against_directory(session_manager, directory, logger):
    group = make_group([("u1", ""), ("u3", "Carol"), ("u2", "")])

    async with session_manager.session() as conn:
        result = await validation_service.validate(
            group=group, lookup=DatabaseIdentityLookup(conn=conn), log=logger
        )

    assert result.errors == []
    assert result.group.members == [
        MemberRef(id="u1", name="alice"),
        MemberRef(id="u3", name="Carol"),
    ]
    assert result.removed == [MemberRef(id="u2")]


@pytest.mark.asyncio(loop_scope="session")
async def test_validate_cross_tenant_against_directory(
    session_manager, directory, logger
):
    group = make_group([("u9", "")])

    async with session_manager.session() as conn:
        result = await validation_service.validate(
            group=group, lookup=DatabaseIdentityLookup(conn=conn), log=logger
        )

    assert [e.bad_value for e in result.errors] == ["u9"]
    assert result.group.members == group.members
