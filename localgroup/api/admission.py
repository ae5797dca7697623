"""
Admission endpoints for local groups.
"""

from fastapi import APIRouter

from localgroup.core.group import LocalGroup
from localgroup.core.models import GroupUpdateRequest, ValidationResult
from localgroup.service import validation as validation_service

from .dependencies import IdentityLookupDependency, LoggerDependency

admission_app = APIRouter(tags=["Admission"])


@admission_app.post(
    "/validate",
    summary="Validate a new group",
    description=(
        "Validate a group and reconcile its membership against the identity "
        "directory. Always returns the full list of errors; the normalized "
        "group only has its members rewritten when there are none."
    ),
    responses={
        200: {"description": "Validation result."},
    },
)
async def validate_group(
    group: LocalGroup,
    lookup: IdentityLookupDependency,
    log: LoggerDependency,
) -> ValidationResult:
    log = log.bind(api="validate")
    return await validation_service.validate(group=group, lookup=lookup, log=log)


@admission_app.post(
    "/validate/update",
    summary="Validate a group update",
    description=(
        "Validate a group being updated. In addition to the checks on a new "
        "group, metadata must stay consistent and the tenant cannot change."
    ),
    responses={
        200: {"description": "Validation result."},
    },
)
async def validate_group_update(
    content: GroupUpdateRequest,
    lookup: IdentityLookupDependency,
    log: LoggerDependency,
) -> ValidationResult:
    log = log.bind(api="validate_update")
    return await validation_service.validate_update(
        group=content.group, old_group=content.old_group, lookup=lookup, log=log
    )


@admission_app.post(
    "/admit",
    summary="Admit a new group",
    description="Return the normalized group if it is valid.",
    responses={
        200: {"description": "The normalized group."},
        422: {"description": "The group is invalid."},
    },
)
async def admit_group(
    group: LocalGroup,
    lookup: IdentityLookupDependency,
    log: LoggerDependency,
) -> LocalGroup:
    log = log.bind(api="admit")
    result = await validation_service.validate(group=group, lookup=lookup, log=log)
    return result.raise_for_errors()


@admission_app.post(
    "/admit/update",
    summary="Admit a group update",
    description="Return the normalized group if the update is valid.",
    responses={
        200: {"description": "The normalized group."},
        422: {"description": "The update is invalid."},
    },
)
async def admit_group_update(
    content: GroupUpdateRequest,
    lookup: IdentityLookupDependency,
    log: LoggerDependency,
) -> LocalGroup:
    log = log.bind(api="admit_update")
    result = await validation_service.validate_update(
        group=content.group, old_group=content.old_group, lookup=lookup, log=log
    )
    return result.raise_for_errors()
