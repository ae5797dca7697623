"""
Service layer for validating local groups before admission.

Validation is also where stale membership is repaired: members that have not
been resolved yet are looked up in the identity directory, given their
username, or pruned if the identity no longer exists. The repaired member list
is only published on the returned group when the whole call produced no
errors, so a rejected group never loses membership data.
"""

import asyncio

from structlog.typing import FilteringBoundLogger

from localgroup.core import errors as field
from localgroup.core.errors import ErrorList, FieldPath
from localgroup.core.group import LocalGroup, MemberRef, ObjectMeta
from localgroup.core.identity import IdentityData
from localgroup.core.models import ValidationResult
from localgroup.core.validation import (
    is_display_name,
    is_dns1123_label,
    is_qualified_name,
    is_valid_label_value,
)

from .lookup import IdentityLookup, IdentityNotFound

TOTAL_ANNOTATION_SIZE_LIMIT = 256 * 1024

validate_group_name = is_dns1123_label


class ReconcileCancelled(Exception):
    pass


def validate_object_meta(meta: ObjectMeta, path: FieldPath) -> ErrorList:
    """
    Generic metadata rules for a cluster-scoped object whose name must be a
    DNS label.
    """
    errors: ErrorList = []

    if not meta.name:
        errors.append(field.required(path.child("name"), "name is required"))
    else:
        for message in validate_group_name(meta.name):
            errors.append(field.invalid(path.child("name"), meta.name, message))

    if meta.namespace:
        errors.append(
            field.forbidden(path.child("namespace"), "not allowed on this type")
        )

    if meta.generation < 0:
        errors.append(
            field.invalid(
                path.child("generation"),
                meta.generation,
                "must be greater than or equal to 0",
            )
        )

    labels_path = path.child("labels")
    for key, value in meta.labels.items():
        for message in is_qualified_name(key):
            errors.append(field.invalid(labels_path, key, message))
        for message in is_valid_label_value(value):
            errors.append(field.invalid(labels_path.key(key), value, message))

    annotations_path = path.child("annotations")
    total_size = 0
    for key, value in meta.annotations.items():
        for message in is_qualified_name(key.lower()):
            errors.append(field.invalid(annotations_path, key, message))
        total_size += len(key.encode()) + len(value.encode())

    if total_size > TOTAL_ANNOTATION_SIZE_LIMIT:
        errors.append(
            field.too_long(annotations_path, "", TOTAL_ANNOTATION_SIZE_LIMIT)
        )

    return errors


def validate_object_meta_update(
    new: ObjectMeta, old: ObjectMeta, path: FieldPath
) -> ErrorList:
    """
    Consistency rules between the stored metadata and the incoming one.
    """
    errors: ErrorList = []

    immutable = {
        "name": (new.name, old.name),
        "namespace": (new.namespace, old.namespace),
        "uid": (new.uid, old.uid),
        "creationTimestamp": (new.creation_timestamp, old.creation_timestamp),
    }

    for name, (new_value, old_value) in immutable.items():
        if new_value != old_value:
            value = new_value if new_value is None else str(new_value)
            errors.append(
                field.invalid(path.child(name), value, "field is immutable")
            )

    if not new.resource_version:
        errors.append(
            field.invalid(
                path.child("resourceVersion"),
                new.resource_version,
                "must be specified for an update",
            )
        )

    if new.generation < old.generation:
        errors.append(
            field.invalid(
                path.child("generation"), new.generation, "must not be decremented"
            )
        )

    return errors


async def _get_identity(
    lookup: IdentityLookup, identity_id: str, cancel: asyncio.Event | None
) -> IdentityData:
    """
    Look up an identity, giving up as soon as `cancel` is set even if the
    directory has not answered yet.
    """
    if cancel is None:
        return await lookup.get(identity_id)

    lookup_task = asyncio.ensure_future(lookup.get(identity_id))
    cancel_task = asyncio.ensure_future(cancel.wait())

    try:
        await asyncio.wait(
            {lookup_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED
        )
    finally:
        cancel_task.cancel()
        if not lookup_task.done():
            lookup_task.cancel()

    if cancel.is_set():
        if lookup_task.done() and not lookup_task.cancelled():
            # Mark the outcome as retrieved; it is discarded.
            lookup_task.exception()
        raise ReconcileCancelled("context canceled")

    return lookup_task.result()


async def _notify_member_removed(log: FilteringBoundLogger, member: MemberRef):
    try:
        await log.awarning("group.member_not_found", member_id=member.id)
    except Exception:
        # Diagnostics never change the validation outcome.
        pass


async def reconcile_members(
    group: LocalGroup,
    lookup: IdentityLookup,
    log: FilteringBoundLogger,
    cancel: asyncio.Event | None = None,
) -> tuple[list[MemberRef], list[MemberRef], ErrorList]:
    """
    Resolve the group's members against the identity directory.

    Parameters
    ----------
    group: LocalGroup
        The group whose members are checked. It is not modified.
    lookup: IdentityLookup
        The identity directory.
    log: FilteringBoundLogger
        Logger instance.
    cancel: asyncio.Event, optional
        When set, the pass stops, abandoning any lookup in flight, and
        reports an internal error.

    Returns
    -------
    retained: list[MemberRef]
        The members to keep, in their original order, with names filled in.
    removed: list[MemberRef]
        Members dropped because their identity does not exist.
    errors: ErrorList
        Problems found with individual members.
    """
    path = FieldPath("status", "users")

    retained: list[MemberRef] = []
    removed: list[MemberRef] = []
    errors: ErrorList = []
    cancelled = False

    for member in group.members:
        if cancel is not None and cancel.is_set():
            cancelled = True
            break

        if not member.id:
            errors.append(field.required(path, "must specify id"))
            continue

        if member.resolved:
            retained.append(member.model_copy())
            continue

        try:
            identity = await _get_identity(lookup, member.id, cancel)
        except IdentityNotFound:
            await _notify_member_removed(log, member)
            removed.append(member.model_copy())
            continue
        except ReconcileCancelled:
            cancelled = True
            break
        except Exception as e:
            await log.aerror("group.member_lookup_failed", member_id=member.id, error=e)
            errors.append(field.internal_error(path, e))
            continue

        if identity.tenant_id != group.tenant_id:
            await log.ainfo(
                "group.member_wrong_tenant",
                member_id=member.id,
                member_tenant_id=identity.tenant_id,
            )
            errors.append(
                field.invalid(
                    path, member.id, "must be in the same tenant as the group"
                )
            )
            continue

        retained.append(member.model_copy(update={"name": identity.username}))

    if cancelled or (cancel is not None and cancel.is_set()):
        await log.awarning("group.reconcile_cancelled")
        errors.append(field.internal_error(path, "context canceled"))

    return retained, removed, errors


async def _check_group(
    group: LocalGroup,
    lookup: IdentityLookup,
    log: FilteringBoundLogger,
    cancel: asyncio.Event | None,
) -> tuple[ErrorList, list[MemberRef], list[MemberRef]]:
    errors = validate_object_meta(group.metadata, FieldPath("metadata"))

    display_name_messages = is_display_name(group.spec.display_name)
    if display_name_messages:
        errors.append(
            field.invalid(
                FieldPath("spec", "displayName"),
                group.spec.display_name,
                "; ".join(display_name_messages),
            )
        )

    retained, removed, member_errors = await reconcile_members(
        group=group, lookup=lookup, log=log, cancel=cancel
    )
    errors.extend(member_errors)

    return errors, retained, removed


async def _commit(
    group: LocalGroup,
    errors: ErrorList,
    retained: list[MemberRef],
    removed: list[MemberRef],
    log: FilteringBoundLogger,
) -> ValidationResult:
    normalized = group.model_copy(deep=True)

    if errors:
        await log.ainfo("group.invalid", number_of_errors=len(errors))
        return ValidationResult(group=normalized, errors=errors)

    normalized.status.users = retained

    await log.ainfo(
        "group.validated",
        number_of_members=len(retained),
        number_of_removed=len(removed),
    )

    return ValidationResult(group=normalized, errors=[], removed=removed)


async def validate(
    group: LocalGroup,
    lookup: IdentityLookup,
    log: FilteringBoundLogger,
    cancel: asyncio.Event | None = None,
) -> ValidationResult:
    """
    Validate a group and reconcile its membership.

    Parameters
    ----------
    group: LocalGroup
        The group to validate. It is not modified; the normalized copy is
        returned on the result.
    lookup: IdentityLookup
        The identity directory used to resolve members.
    log: FilteringBoundLogger
        Logger instance.
    cancel: asyncio.Event, optional
        Cooperative cancellation for the membership pass.

    Returns
    -------
    ValidationResult
        The normalized group and every error found. The group's members are
        only rewritten when there are no errors at all.
    """
    log = log.bind(group_name=group.name, tenant_id=group.tenant_id)

    errors, retained, removed = await _check_group(
        group=group, lookup=lookup, log=log, cancel=cancel
    )

    return await _commit(group, errors, retained, removed, log)


async def validate_update(
    group: LocalGroup,
    old_group: LocalGroup,
    lookup: IdentityLookup,
    log: FilteringBoundLogger,
    cancel: asyncio.Event | None = None,
) -> ValidationResult:
    """
    Validate a group being updated from `old_group`. Runs the metadata update
    rules, the full `validate` checks on the new group, and forbids moving the
    group to another tenant. All errors are reported together, and an
    update-level error alone also keeps the members from being rewritten.
    """
    log = log.bind(
        group_name=group.name,
        tenant_id=group.tenant_id,
        old_tenant_id=old_group.tenant_id,
    )

    errors = validate_object_meta_update(
        group.metadata, old_group.metadata, FieldPath("metadata")
    )

    group_errors, retained, removed = await _check_group(
        group=group, lookup=lookup, log=log, cancel=cancel
    )
    errors.extend(group_errors)

    if group.tenant_id != old_group.tenant_id:
        errors.append(
            field.invalid(
                FieldPath("spec", "tenantID"),
                group.tenant_id,
                "disallowed: change the tenant",
            )
        )

    return await _commit(group, errors, retained, removed, log)
