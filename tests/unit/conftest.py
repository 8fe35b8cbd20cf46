from unittest.mock import AsyncMock, MagicMock

import pytest

from docshare.domain.entities import IdentityKind


def _repository(*methods):
    repo = MagicMock()
    for name in methods:
        setattr(repo, name, AsyncMock())
    return repo


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = _repository("get_by_email", "get_by_id", "get_by_ids", "create")
    uow.institutes = _repository("get_by_email", "get_by_id", "get_by_name", "create")
    uow.connections = _repository(
        "get_by_user_and_institute",
        "create",
        "update",
        "delete",
        "list_by_institute_and_status",
        "list_linked_users",
        "list_connected_institutes",
    )
    uow.groups = _repository(
        "get_by_id",
        "get_by_institute_and_name",
        "list_by_institute",
        "create",
        "get_member_ids",
        "add_member",
        "remove_member",
        "remove_user_from_institute_groups",
        "get_existing_ids",
    )
    uow.documents = _repository("get_by_id", "create")
    uow.audit_events = _repository("create", "get_by_institute_paginated")

    uow.identities = MagicMock(
        side_effect=lambda kind: {
            IdentityKind.user: uow.users,
            IdentityKind.institute: uow.institutes,
        }[kind]
    )
    return uow


@pytest.fixture
def token_issuer():
    issuer = MagicMock()
    issuer.issue = MagicMock(return_value="session-token")
    return issuer
