"""
A shared identity object, as read from the identity directory.
"""

from pydantic import BaseModel


class IdentityData(BaseModel):
    id: str
    tenant_id: str
    username: str
