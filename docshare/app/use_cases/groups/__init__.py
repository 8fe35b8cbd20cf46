"""
Group Use Cases

Institute-scoped recipient groups and their expansion into users.
"""

from .manage_groups_use_case import (
    AddGroupMemberUseCase,
    CreateGroupUseCase,
    ListGroupsUseCase,
    RemoveGroupMemberUseCase,
)
from .recipients import expand_recipients
from .dtos import CreateGroupCommand, GroupInfo

__all__ = [
    "CreateGroupUseCase",
    "ListGroupsUseCase",
    "AddGroupMemberUseCase",
    "RemoveGroupMemberUseCase",
    "expand_recipients",
    "CreateGroupCommand",
    "GroupInfo",
]
