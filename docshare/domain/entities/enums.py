"""
Docshare Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class IdentityKind(str, Enum):
    """Kind of authenticated party, carried as the session token role"""

    user = "user"
    institute = "institute"


class ConnectionStatus(str, Enum):
    """State of a user's request to join an institute"""

    pending = "pending"
    approved = "approved"
    rejected = "rejected"
