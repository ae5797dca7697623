"""
Meta functionality for the database.
"""

from .identity import LocalIdentity

ALL_TABLES = (LocalIdentity,)
