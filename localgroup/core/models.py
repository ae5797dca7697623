"""
Pydantic models for request/responses to APIs.
"""

from pydantic import BaseModel, Field, computed_field

from localgroup.core.errors import ErrorList, GroupInvalidError
from localgroup.core.group import LocalGroup, MemberRef


class ValidationResult(BaseModel):
    """
    The outcome of validating a group. `group` is the normalized copy: its
    members are only rewritten when `errors` is empty, and `removed` lists the
    members that rewrite pruned because their identity no longer exists.
    """

    group: LocalGroup
    errors: ErrorList = Field(default_factory=list)
    removed: list[MemberRef] = Field(default_factory=list)

    @computed_field
    @property
    def allowed(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> LocalGroup:
        """
        Return the normalized group, or raise `GroupInvalidError` if any
        error was found.
        """
        if self.errors:
            raise GroupInvalidError(group_name=self.group.name, errors=self.errors)
        return self.group


class GroupUpdateRequest(BaseModel):
    group: LocalGroup
    old_group: LocalGroup
