"""
Unit tests for the connection lifecycle use cases

Request, approve, reject, clear and leave with mocked repositories.
"""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from docshare.app.use_cases.connections import (
    ApproveConnectionUseCase,
    ClearRejectedUseCase,
    LeaveInstituteUseCase,
    RejectConnectionUseCase,
    RequestJoinUseCase,
)
from docshare.domain.entities import Connection, ConnectionStatus, Institute, User


@pytest.fixture
def user():
    return User(id=uuid4(), name="Ann", email="ann@example.com", password_hash="x")


@pytest.fixture
def institute():
    return Institute(id=uuid4(), name="Acme Academy", admin_email="a@acme.edu", password_hash="x")


def _connection(user, institute, status):
    return Connection(id=uuid4(), user_id=user.id, institute_id=institute.id, status=status)


# ============================================================================
# Request to join
# ============================================================================


@pytest.mark.asyncio
async def test_request_join_creates_pending_connection(mock_uow, user, institute):
    # Arrange
    mock_uow.institutes.get_by_id.return_value = institute
    mock_uow.users.get_by_id.return_value = user
    mock_uow.connections.get_by_user_and_institute.return_value = None

    # Act
    result = await RequestJoinUseCase(mock_uow).execute(user.id, institute.id)

    # Assert
    assert result.is_ok()
    assert result.value.msg == (
        "Request to join Acme Academy sent successfully. Awaiting approval."
    )
    created: Connection = mock_uow.connections.create.call_args[0][0]
    assert created.status == ConnectionStatus.pending
    assert created.user_id == user.id
    assert created.institute_id == institute.id
    assert mock_uow.audit_events.create.call_args[0][0].action == "join_requested"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_request_join_unknown_institute(mock_uow, user):
    mock_uow.institutes.get_by_id.return_value = None

    result = await RequestJoinUseCase(mock_uow).execute(user.id, uuid4())

    assert result.is_err()
    assert result.error.code == "INSTITUTE_NOT_FOUND"
    mock_uow.connections.create.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status,code",
    [
        (ConnectionStatus.approved, "ALREADY_LINKED"),
        (ConnectionStatus.pending, "REQUEST_ALREADY_PENDING"),
        (ConnectionStatus.rejected, "REQUEST_REJECTED"),
    ],
)
async def test_request_join_existing_record(mock_uow, user, institute, status, code):
    mock_uow.institutes.get_by_id.return_value = institute
    mock_uow.users.get_by_id.return_value = user
    mock_uow.connections.get_by_user_and_institute.return_value = _connection(
        user, institute, status
    )

    result = await RequestJoinUseCase(mock_uow).execute(user.id, institute.id)

    assert result.is_err()
    assert result.error.code == code
    mock_uow.connections.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_request_join_losing_a_race_reports_pending(mock_uow, user, institute):
    """Both requests pass the lookup; the unique index rejects the second insert"""
    mock_uow.institutes.get_by_id.return_value = institute
    mock_uow.users.get_by_id.return_value = user
    mock_uow.connections.get_by_user_and_institute.return_value = None
    mock_uow.connections.create.side_effect = IntegrityError("INSERT", {}, Exception("unique"))

    result = await RequestJoinUseCase(mock_uow).execute(user.id, institute.id)

    assert result.is_err()
    assert result.error.code == "REQUEST_ALREADY_PENDING"
    mock_uow.rollback.assert_called_once()
    mock_uow.commit.assert_not_called()


# ============================================================================
# Approve / reject
# ============================================================================


@pytest.mark.asyncio
async def test_approve_pending_request(mock_uow, user, institute):
    connection = _connection(user, institute, ConnectionStatus.pending)
    mock_uow.connections.get_by_user_and_institute.return_value = connection

    result = await ApproveConnectionUseCase(mock_uow).execute(institute.id, user.id)

    assert result.is_ok()
    assert result.value.msg == "User approved and linked successfully"
    assert connection.status == ConnectionStatus.approved
    mock_uow.connections.update.assert_called_once_with(connection)
    assert mock_uow.audit_events.create.call_args[0][0].action == "connection_approved"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_approve_twice_fails_second_time(mock_uow, user, institute):
    connection = _connection(user, institute, ConnectionStatus.pending)
    mock_uow.connections.get_by_user_and_institute.return_value = connection
    use_case = ApproveConnectionUseCase(mock_uow)

    first = await use_case.execute(institute.id, user.id)
    second = await use_case.execute(institute.id, user.id)

    assert first.is_ok()
    assert second.is_err()
    assert second.error.code == "PENDING_REQUEST_NOT_FOUND"
    assert mock_uow.connections.update.call_count == 1


@pytest.mark.asyncio
async def test_reject_pending_request(mock_uow, user, institute):
    connection = _connection(user, institute, ConnectionStatus.pending)
    mock_uow.connections.get_by_user_and_institute.return_value = connection

    result = await RejectConnectionUseCase(mock_uow).execute(institute.id, user.id)

    assert result.is_ok()
    assert result.value.msg == "User request rejected."
    assert connection.status == ConnectionStatus.rejected


@pytest.mark.asyncio
async def test_reject_without_request(mock_uow, user, institute):
    mock_uow.connections.get_by_user_and_institute.return_value = None

    result = await RejectConnectionUseCase(mock_uow).execute(institute.id, user.id)

    assert result.is_err()
    assert result.error.message == "Pending request not found."
    mock_uow.connections.update.assert_not_called()


# ============================================================================
# Clear rejected
# ============================================================================


@pytest.mark.asyncio
async def test_clear_rejected_deletes_record(mock_uow, user, institute):
    connection = _connection(user, institute, ConnectionStatus.rejected)
    mock_uow.connections.get_by_user_and_institute.return_value = connection

    result = await ClearRejectedUseCase(mock_uow).execute(institute.id, user.id)

    assert result.is_ok()
    mock_uow.connections.delete.assert_called_once_with(connection)
    assert mock_uow.audit_events.create.call_args[0][0].action == "rejected_cleared"


@pytest.mark.asyncio
async def test_clear_rejected_ignores_pending(mock_uow, user, institute):
    mock_uow.connections.get_by_user_and_institute.return_value = _connection(
        user, institute, ConnectionStatus.pending
    )

    result = await ClearRejectedUseCase(mock_uow).execute(institute.id, user.id)

    assert result.is_err()
    assert result.error.code == "REJECTED_RECORD_NOT_FOUND"
    mock_uow.connections.delete.assert_not_called()


# ============================================================================
# Leave
# ============================================================================


@pytest.mark.asyncio
async def test_leave_removes_connection_and_group_membership(mock_uow, user, institute):
    connection = _connection(user, institute, ConnectionStatus.approved)
    mock_uow.connections.get_by_user_and_institute.return_value = connection
    mock_uow.groups.remove_user_from_institute_groups.return_value = 2

    result = await LeaveInstituteUseCase(mock_uow).execute(user.id, institute.id)

    assert result.is_ok()
    assert result.value.msg == "Successfully left the institute."
    mock_uow.groups.remove_user_from_institute_groups.assert_called_once_with(
        institute.id, user.id
    )
    mock_uow.connections.delete.assert_called_once_with(connection)
    audit = mock_uow.audit_events.create.call_args[0][0]
    assert audit.action == "institute_left"
    assert audit.event_metadata == {"groups_removed": 2}
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_leave_when_not_linked_is_a_no_op(mock_uow, user, institute):
    mock_uow.connections.get_by_user_and_institute.return_value = None
    mock_uow.groups.remove_user_from_institute_groups.return_value = 0

    result = await LeaveInstituteUseCase(mock_uow).execute(user.id, institute.id)

    assert result.is_ok()
    mock_uow.connections.delete.assert_not_called()
    mock_uow.audit_events.create.assert_not_called()


@pytest.mark.asyncio
async def test_leave_keeps_pending_request(mock_uow, user, institute):
    mock_uow.connections.get_by_user_and_institute.return_value = _connection(
        user, institute, ConnectionStatus.pending
    )
    mock_uow.groups.remove_user_from_institute_groups.return_value = 0

    result = await LeaveInstituteUseCase(mock_uow).execute(user.id, institute.id)

    assert result.is_ok()
    mock_uow.connections.delete.assert_not_called()
