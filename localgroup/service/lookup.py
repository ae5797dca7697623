"""
Base for identity lookups.
"""

import abc

from localgroup.core.identity import IdentityData


class IdentityNotFound(Exception):
    pass


class IdentityLookup(abc.ABC):
    """
    The base class for reading identities from the directory. Downstream must
    implement:

    - get: return the identity with the given ID, raising `IdentityNotFound`
           if it does not exist. Any other exception is treated as a failure
           of the directory itself.
    """

    @abc.abstractmethod
    async def get(self, identity_id: str) -> IdentityData:
        raise NotImplementedError
