import json

import httpx
import pytest
import pytest_asyncio

from user_admin.repositories.user_repo import UserApiRepository
from user_admin.services.user_list_controller import UserListController

BASE_URL = "http://users.test/api"


class FakeUserApi:
    """In-memory stand-in for the remote User API, served through httpx.MockTransport."""

    def __init__(self, users=None):
        self.users = list(users or [])
        self.requests = []
        # method -> httpx.Response or exception instance returned instead of the normal answer
        self.overrides = {}
        self.next_id = max([u["id"] for u in self.users], default=0) + 1

    @property
    def transport(self):
        return httpx.MockTransport(self.handle)

    def calls(self, method):
        return [r for r in self.requests if r.method == method]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        override = self.overrides.get(request.method)
        if isinstance(override, Exception):
            raise override
        if override is not None:
            return override

        path = request.url.path
        if request.method == "GET" and path == "/api/user":
            return httpx.Response(200, json={"data": self.users})

        if request.method == "POST" and path == "/api/user":
            body = json.loads(request.content)
            user = {
                "id": self.next_id,
                "username": body["username"],
                "email": body["email"],
                "created_at": "2024-01-01T00:00:00Z",
            }
            self.next_id += 1
            self.users.append(user)
            return httpx.Response(201, json={"data": user})

        if path.startswith("/api/user/"):
            user_id = int(path.rsplit("/", 1)[1])
            user = next((u for u in self.users if u["id"] == user_id), None)
            if user is None:
                return httpx.Response(404, json={"message": "User not found"})
            if request.method == "PUT":
                body = json.loads(request.content)
                user.update(username=body["username"], email=body["email"])
                return httpx.Response(200, json={"data": user})
            if request.method == "DELETE":
                self.users.remove(user)
                return httpx.Response(204)

        return httpx.Response(405, json={"message": "Method not allowed"})


@pytest.fixture
def sample_users():
    return [
        {"id": 1, "username": "a", "email": "a@x.com", "created_at": "2024-01-01T00:00:00Z"},
        {"id": 2, "username": "b", "email": "b@x.com", "created_at": "2024-02-15T10:30:00Z"},
    ]


@pytest.fixture
def fake_api(sample_users):
    return FakeUserApi(sample_users)


@pytest_asyncio.fixture
async def http_client(fake_api):
    client = httpx.AsyncClient(base_url=BASE_URL, transport=fake_api.transport)
    yield client
    await client.aclose()


@pytest.fixture
def repository(http_client):
    return UserApiRepository(http_client)


@pytest.fixture
def controller(repository):
    return UserListController(repository)
