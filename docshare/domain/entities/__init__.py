"""
Docshare Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import ConnectionStatus, IdentityKind

# Export all entities
from .user import User
from .institute import Institute
from .connection import Connection
from .group import Group, GroupMember
from .document import Document, DocumentRecipient
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "ConnectionStatus",
    "IdentityKind",
    # Entities
    "User",
    "Institute",
    "Connection",
    "Group",
    "GroupMember",
    "Document",
    "DocumentRecipient",
    "AuditEvent",
]
