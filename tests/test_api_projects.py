from __future__ import annotations

import uuid

import pytest

from tests.utils import make_headers


@pytest.fixture
async def alice(register_user):
    return await register_user("Alice", "alice@example.com")


@pytest.fixture
async def bob(register_user):
    return await register_user("Bob", "bob@example.com")


async def create_project(client, token, title="Launch", description=""):
    resp = await client.post(
        "/api/projects",
        json={"title": title, "description": description},
        headers=make_headers(token),
    )
    assert resp.status == 201, await resp.text()
    return await resp.json()


async def test_create_and_list_owned(service_client, alice, bob):
    first = await create_project(service_client, alice["token"], "First")
    second = await create_project(service_client, alice["token"], "  Second ", " desc ")
    assert second["title"] == "Second"
    assert second["description"] == "desc"
    assert second["owner_id"] == alice["id"]
    assert second["collaborators"] == []

    resp = await service_client.get("/api/projects", headers=make_headers(alice["token"]))
    titles = [p["id"] for p in await resp.json()]
    assert titles == [second["id"], first["id"]]

    resp = await service_client.get("/api/projects", headers=make_headers(bob["token"]))
    assert await resp.json() == []


async def test_create_project_requires_title(service_client, alice):
    resp = await service_client.post(
        "/api/projects", json={"title": "   "}, headers=make_headers(alice["token"])
    )
    assert resp.status == 400

    resp = await service_client.post(
        "/api/projects", json={"description": "x"}, headers=make_headers(alice["token"])
    )
    assert resp.status == 400


async def test_launch_scenario(service_client, alice, bob):
    launch = await create_project(service_client, alice["token"])
    url = f"/api/projects/{launch['id']}"

    resp = await service_client.get(url, headers=make_headers(bob["token"]))
    assert resp.status == 403

    resp = await service_client.post(
        f"{url}/invite", json={"email": "bob@example.com"}, headers=make_headers(alice["token"])
    )
    assert resp.status == 200
    body = await resp.json()
    assert body["collaborator"] == {"id": bob["id"], "email": "bob@example.com"}

    resp = await service_client.get(url, headers=make_headers(alice["token"]))
    project = await resp.json()
    assert project["collaborators"] == [bob["id"]]
    assert project["owner_id"] == alice["id"]

    resp = await service_client.post(
        f"{url}/invite", json={"email": "alice@example.com"}, headers=make_headers(alice["token"])
    )
    assert resp.status == 400
    assert (await resp.json())["error"] == "Owner is already a member"

    resp = await service_client.post(
        f"{url}/invite", json={"email": "bob@example.com"}, headers=make_headers(alice["token"])
    )
    assert resp.status == 400
    assert (await resp.json())["error"] == "User is already a collaborator"

    resp = await service_client.delete(url, headers=make_headers(bob["token"]))
    assert resp.status == 403

    resp = await service_client.get(
        f"{url}/collaborators", headers=make_headers(alice["token"])
    )
    assert await resp.json() == [{"id": bob["id"], "name": "Bob", "email": "bob@example.com"}]


async def test_invite_unknown_user_and_non_owner(service_client, alice, bob):
    launch = await create_project(service_client, alice["token"])
    url = f"/api/projects/{launch['id']}/invite"

    resp = await service_client.post(
        url, json={"email": "ghost@example.com"}, headers=make_headers(alice["token"])
    )
    assert resp.status == 404

    resp = await service_client.post(
        url, json={"email": "alice@example.com"}, headers=make_headers(bob["token"])
    )
    assert resp.status == 403

    resp = await service_client.post(url, json={"email": ""}, headers=make_headers(alice["token"]))
    assert resp.status == 400


async def test_update_and_delete_project(service_client, alice):
    launch = await create_project(service_client, alice["token"], description="old")
    url = f"/api/projects/{launch['id']}"

    resp = await service_client.patch(
        url, json={"title": "Relaunch"}, headers=make_headers(alice["token"])
    )
    assert resp.status == 200
    updated = await resp.json()
    assert updated["title"] == "Relaunch"
    assert updated["description"] == "old"

    resp = await service_client.delete(url, headers=make_headers(alice["token"]))
    assert resp.status == 200

    resp = await service_client.get(url, headers=make_headers(alice["token"]))
    assert resp.status == 404


async def test_unknown_and_malformed_project_ids(service_client, alice):
    resp = await service_client.get(
        f"/api/projects/{uuid.uuid4()}", headers=make_headers(alice["token"])
    )
    assert resp.status == 404

    resp = await service_client.get("/api/projects/not-a-uuid", headers=make_headers(alice["token"]))
    assert resp.status == 400
