import pytest
from httpx import AsyncClient

from tests.integration.api_helpers import (
    API,
    auth,
    identity_id,
    link_user,
    signup_institute,
    signup_user,
)


@pytest.mark.asyncio
async def test_create_and_list_groups(client: AsyncClient):
    institute_token = await signup_institute(client, "Acme Academy", "admin@acme.edu")
    ann = await signup_user(client, "Ann", "ann@example.com")
    bob = await signup_user(client, "Bob", "bob@example.com")
    await link_user(client, ann, institute_token)
    await link_user(client, bob, institute_token)

    created = await client.post(
        f"{API}/groups",
        json={"name": "Class A", "memberIds": [identity_id(ann), identity_id(bob)]},
        headers=auth(institute_token),
    )

    assert created.status_code == 201
    group = created.json()
    assert group["name"] == "Class A"
    assert set(group["memberIds"]) == {identity_id(ann), identity_id(bob)}

    listed = await client.get(f"{API}/groups", headers=auth(institute_token))
    assert [g["id"] for g in listed.json()] == [group["id"]]


@pytest.mark.asyncio
async def test_group_name_unique_per_institute(client: AsyncClient):
    acme = await signup_institute(client, "Acme Academy", "admin@acme.edu")
    other = await signup_institute(client, "Other School", "admin@other.edu")

    first = await client.post(f"{API}/groups", json={"name": "Staff"}, headers=auth(acme))
    dup = await client.post(f"{API}/groups", json={"name": "Staff"}, headers=auth(acme))
    elsewhere = await client.post(f"{API}/groups", json={"name": "Staff"}, headers=auth(other))

    assert first.status_code == 201
    assert dup.status_code == 400
    assert dup.json()["code"] == "GROUP_NAME_TAKEN"
    assert elsewhere.status_code == 201


@pytest.mark.asyncio
async def test_group_members_must_be_linked(client: AsyncClient):
    institute_token = await signup_institute(client, "Acme Academy", "admin@acme.edu")
    stranger = await signup_user(client, "Sam", "sam@example.com")

    response = await client.post(
        f"{API}/groups",
        json={"name": "Class A", "memberIds": [identity_id(stranger)]},
        headers=auth(institute_token),
    )

    assert response.status_code == 400
    assert response.json()["code"] == "USER_NOT_LINKED"


@pytest.mark.asyncio
async def test_add_and_remove_member(client: AsyncClient):
    institute_token = await signup_institute(client, "Acme Academy", "admin@acme.edu")
    ann = await signup_user(client, "Ann", "ann@example.com")
    await link_user(client, ann, institute_token)
    group = (
        await client.post(f"{API}/groups", json={"name": "Class A"}, headers=auth(institute_token))
    ).json()

    added = await client.post(
        f"{API}/groups/{group['id']}/members/{identity_id(ann)}", headers=auth(institute_token)
    )
    assert added.status_code == 200
    assert added.json()["memberIds"] == [identity_id(ann)]

    removed = await client.delete(
        f"{API}/groups/{group['id']}/members/{identity_id(ann)}", headers=auth(institute_token)
    )
    assert removed.status_code == 200
    assert removed.json()["memberIds"] == []


@pytest.mark.asyncio
async def test_other_institute_cannot_touch_group(client: AsyncClient):
    acme = await signup_institute(client, "Acme Academy", "admin@acme.edu")
    other = await signup_institute(client, "Other School", "admin@other.edu")
    ann = await signup_user(client, "Ann", "ann@example.com")
    await link_user(client, ann, other)
    group = (await client.post(f"{API}/groups", json={"name": "A"}, headers=auth(acme))).json()

    response = await client.post(
        f"{API}/groups/{group['id']}/members/{identity_id(ann)}", headers=auth(other)
    )

    assert response.status_code == 404
    assert response.json()["code"] == "GROUP_NOT_FOUND"
