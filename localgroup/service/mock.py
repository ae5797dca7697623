"""
The mock identity lookup, used for testing.
"""

from localgroup.core.identity import IdentityData

from .lookup import IdentityLookup, IdentityNotFound


class MockIdentityLookup(IdentityLookup):
    """
    A fixed in-memory directory. Identities listed in `failures` raise the
    given exception instead of resolving, to simulate a broken backend.
    """

    identities: dict[str, IdentityData]
    failures: dict[str, Exception]
    calls: list[str]

    def __init__(
        self,
        identities: list[IdentityData] | None = None,
        failures: dict[str, Exception] | None = None,
    ):
        self.identities = {i.id: i for i in identities or []}
        self.failures = dict(failures or {})
        self.calls = []

    async def get(self, identity_id: str) -> IdentityData:
        self.calls.append(identity_id)

        if identity_id in self.failures:
            raise self.failures[identity_id]

        try:
            return self.identities[identity_id]
        except KeyError:
            raise IdentityNotFound(f"Identity with ID {identity_id} not found")
