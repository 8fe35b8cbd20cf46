import pytest
from httpx import AsyncClient
from sqlmodel import select

from docshare.domain.entities import AuditEvent, User
from tests.integration.api_helpers import (
    API,
    PASSWORD,
    auth,
    identity_id,
    signup_institute,
    signup_user,
)


@pytest.mark.asyncio
async def test_user_signup_returns_session_token(client: AsyncClient, db_session):
    response = await client.post(
        f"{API}/auth/user/signup",
        json={"name": "Ann", "email": "ann@example.com", "password": PASSWORD},
    )

    assert response.status_code == 200
    token = response.json()["token"]
    assert token

    user = (
        await db_session.exec(select(User).where(User.email == "ann@example.com"))
    ).one()
    assert str(user.id) == identity_id(token)
    assert user.password_hash != PASSWORD
    assert user.password_hash.startswith("$2")

    events = (
        await db_session.exec(select(AuditEvent).where(AuditEvent.user_id == user.id))
    ).all()
    assert [e.action for e in events] == ["signup"]


@pytest.mark.asyncio
async def test_user_signup_duplicate_email(client: AsyncClient):
    await signup_user(client, "Ann", "ann@example.com")

    response = await client.post(
        f"{API}/auth/user/signup",
        json={"name": "Other Ann", "email": "ann@example.com", "password": PASSWORD},
    )

    assert response.status_code == 400
    assert response.json() == {"msg": "User already exists", "code": "EMAIL_ALREADY_EXISTS"}


@pytest.mark.asyncio
async def test_user_signup_invalid_input(client: AsyncClient):
    response = await client.post(
        f"{API}/auth/user/signup",
        json={"name": "Ann", "email": "not-an-email", "password": "123"},
    )

    assert response.status_code == 400
    data = response.json()
    assert data["msg"] == "Invalid input"
    params = {e["param"] for e in data["errors"]}
    assert params == {"email", "password"}
    assert all(e["location"] == "body" for e in data["errors"])


@pytest.mark.asyncio
async def test_institute_signup_name_and_email_unique(client: AsyncClient):
    await signup_institute(client, "Acme Academy", "admin@acme.edu")

    same_email = await client.post(
        f"{API}/auth/institute/signup",
        json={"name": "Other", "adminEmail": "admin@acme.edu", "password": PASSWORD},
    )
    same_name = await client.post(
        f"{API}/auth/institute/signup",
        json={"name": "Acme Academy", "adminEmail": "x@acme.edu", "password": PASSWORD},
    )

    assert same_email.status_code == 400
    assert same_email.json()["code"] == "EMAIL_ALREADY_EXISTS"
    assert same_name.status_code == 400
    assert same_name.json()["code"] == "INSTITUTE_NAME_TAKEN"


@pytest.mark.asyncio
async def test_login_as_user_and_institute(client: AsyncClient):
    user_token = await signup_user(client, "Ann", "ann@example.com")
    institute_token = await signup_institute(client, "Acme Academy", "admin@acme.edu")

    user_login = await client.post(
        f"{API}/auth/user/login", json={"email": "ann@example.com", "password": PASSWORD}
    )
    institute_login = await client.post(
        f"{API}/auth/institute/login",
        json={"email": "admin@acme.edu", "password": PASSWORD},
    )

    assert user_login.status_code == 200
    assert user_login.json()["role"] == "user"
    assert identity_id(user_login.json()["token"]) == identity_id(user_token)

    assert institute_login.status_code == 200
    assert institute_login.json()["role"] == "institute"
    assert identity_id(institute_login.json()["token"]) == identity_id(institute_token)


@pytest.mark.asyncio
async def test_login_invalid_credentials(client: AsyncClient):
    await signup_user(client, "Ann", "ann@example.com")

    wrong_password = await client.post(
        f"{API}/auth/user/login", json={"email": "ann@example.com", "password": "nope123"}
    )
    unknown_email = await client.post(
        f"{API}/auth/user/login", json={"email": "bob@example.com", "password": PASSWORD}
    )
    # A user account does not log in as an institute
    wrong_role = await client.post(
        f"{API}/auth/institute/login", json={"email": "ann@example.com", "password": PASSWORD}
    )

    for response in (wrong_password, unknown_email, wrong_role):
        assert response.status_code == 401
        assert response.json() == {"msg": "Invalid Credentials", "code": "INVALID_CREDENTIALS"}


@pytest.mark.asyncio
async def test_login_unknown_role(client: AsyncClient):
    response = await client.post(
        f"{API}/auth/admin/login", json={"email": "ann@example.com", "password": PASSWORD}
    )

    assert response.status_code == 400
    assert response.json()["msg"] == "Invalid input"


@pytest.mark.asyncio
async def test_protected_route_requires_token(client: AsyncClient):
    response = await client.get(f"{API}/dashboard/user/institutes")

    assert response.status_code == 401
    assert response.json() == {"msg": "No token, authorization denied", "code": "NO_TOKEN"}


@pytest.mark.asyncio
async def test_protected_route_rejects_bad_token(client: AsyncClient):
    response = await client.get(
        f"{API}/dashboard/user/institutes", headers=auth("not.a.token")
    )

    assert response.status_code == 401
    assert response.json()["code"] == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_role_mismatch_is_forbidden(client: AsyncClient):
    user_token = await signup_user(client, "Ann", "ann@example.com")
    institute_token = await signup_institute(client, "Acme Academy", "admin@acme.edu")

    as_user = await client.get(
        f"{API}/dashboard/institute/linked-users", headers=auth(user_token)
    )
    as_institute = await client.get(
        f"{API}/dashboard/user/institutes", headers=auth(institute_token)
    )

    assert as_user.status_code == 403
    assert as_user.json()["code"] == "FORBIDDEN_ROLE"
    assert as_institute.status_code == 403


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
