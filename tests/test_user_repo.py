import json

import httpx
import pytest

from user_admin.core.errors import UserApiResponseError, UserApiTransportError


@pytest.mark.asyncio
async def test_list_users_preserves_server_order(repository, fake_api):
    fake_api.users.reverse()

    users = await repository.list_users()

    assert [u.id for u in users] == [2, 1]
    assert users[1].username == "a"
    assert users[1].created_at == "2024-01-01T00:00:00Z"


@pytest.mark.asyncio
async def test_list_users_missing_data_is_empty(repository, fake_api):
    fake_api.overrides["GET"] = httpx.Response(200, json={})

    assert await repository.list_users() == []


@pytest.mark.asyncio
async def test_list_users_non_json_success_is_transport_error(repository, fake_api):
    fake_api.overrides["GET"] = httpx.Response(200, text="<html>gateway</html>")

    with pytest.raises(UserApiTransportError):
        await repository.list_users()


@pytest.mark.asyncio
async def test_create_user_sends_password(repository, fake_api):
    await repository.create_user("c", "c@x.com", "secret")

    request = fake_api.calls("POST")[0]
    assert request.url.path == "/api/user"
    assert json.loads(request.content) == {"username": "c", "email": "c@x.com", "password": "secret"}


@pytest.mark.asyncio
async def test_update_user_never_sends_password(repository, fake_api):
    await repository.update_user(1, "a2", "a2@x.com")

    request = fake_api.calls("PUT")[0]
    assert request.url.path == "/api/user/1"
    assert json.loads(request.content) == {"username": "a2", "email": "a2@x.com"}


@pytest.mark.asyncio
async def test_delete_user_addresses_id(repository, fake_api):
    await repository.delete_user(2)

    request = fake_api.calls("DELETE")[0]
    assert request.url.path == "/api/user/2"
    assert [u["id"] for u in fake_api.users] == [1]


@pytest.mark.asyncio
async def test_failure_status_carries_server_message(repository, fake_api):
    fake_api.overrides["POST"] = httpx.Response(409, json={"message": "email taken"})

    with pytest.raises(UserApiResponseError) as exc_info:
        await repository.create_user("a", "a@x.com", "pw")

    assert exc_info.value.status_code == 409
    assert exc_info.value.message == "email taken"


@pytest.mark.asyncio
async def test_failure_status_without_json_body(repository, fake_api):
    fake_api.overrides["DELETE"] = httpx.Response(500, text="Internal Server Error")

    with pytest.raises(UserApiResponseError) as exc_info:
        await repository.delete_user(1)

    assert exc_info.value.status_code == 500
    assert exc_info.value.message is None


@pytest.mark.asyncio
async def test_connection_failure_is_transport_error(repository, fake_api):
    fake_api.overrides["GET"] = httpx.ConnectError("connection refused")

    with pytest.raises(UserApiTransportError):
        await repository.list_users()
