import json
import math
import os
import sys
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from fastapi import Request
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("LOG_COLORS", "0")

from admin_console.api_client import ApiClient
from admin_console.auth import get_auth_context
from admin_console.deps import get_api_client
from admin_console.main import app

BASE_URL = "https://api.test/api/v1"
TOKEN = "tok-123"
EMAIL = "admin@example.com"
PASSWORD = "secret123"


class FakeApiServer:
    """In-memory stand-in for the remote REST API, served through httpx.MockTransport."""

    def __init__(self):
        self.users = {EMAIL: PASSWORD}
        self.categories: list[dict] = []
        self.requests: list[tuple[str, httpx.Request]] = []
        # operation -> (status, json body or None)
        self.failures: dict[str, tuple[int, dict | None]] = {}
        self.network_errors: set[str] = set()
        self.list_response: dict | None = None
        self._next_id = 1

    def add_category(self, name: str, creation_date: str = "2024-01-01T00:00:00") -> dict:
        cat = {"id": self._next_id, "name": name, "creationDate": creation_date}
        self._next_id += 1
        self.categories.append(cat)
        return cat

    def calls(self, operation: str) -> list[httpx.Request]:
        return [r for op, r in self.requests if op == operation]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        operation, category_id = self._route(request)
        self.requests.append((operation, request))

        if operation in self.network_errors:
            raise httpx.ConnectError("connection refused", request=request)
        if operation in self.failures:
            status, body = self.failures[operation]
            return httpx.Response(status, json=body) if body is not None else httpx.Response(status)

        if operation == "login":
            return self._login(request)
        if request.headers.get("Authorization") != f"Bearer {TOKEN}":
            return httpx.Response(401, json={"message": "Unauthorized"})

        if operation == "list":
            return self._list(request)
        if operation == "create":
            cat = self.add_category(_json(request)["name"])
            return httpx.Response(201, json={"message": "Created", "id": cat["id"]})
        if operation == "update":
            cat = self._find(category_id)
            if cat is None:
                return httpx.Response(404, json={"message": "Category not found"})
            cat["name"] = _json(request)["name"]
            return httpx.Response(200, json={"message": "Updated"})
        if operation == "delete":
            cat = self._find(category_id)
            if cat is None:
                return httpx.Response(404, json={"message": "Category not found"})
            self.categories.remove(cat)
            return httpx.Response(200)
        return httpx.Response(404, json={"message": "Not found"})

    def _route(self, request: httpx.Request) -> tuple[str, str | None]:
        path = request.url.path.removeprefix("/api/v1/")
        if path == "Users/Login":
            return "login", None
        if path == "Category/":
            return ("list" if request.method == "GET" else "create"), None
        if path.startswith("Category/"):
            category_id = path.split("/", 1)[1]
            return ("update" if request.method == "PUT" else "delete"), category_id
        return "unknown", None

    def _login(self, request: httpx.Request) -> httpx.Response:
        body = _json(request)
        if self.users.get(body.get("email")) != body.get("password"):
            return httpx.Response(401, json={"message": "Invalid email or password"})
        return httpx.Response(200, json={"token": TOKEN, "expiresIn": "1d"})

    def _list(self, request: httpx.Request) -> httpx.Response:
        if self.list_response is not None:
            return httpx.Response(200, json=self.list_response)

        params = request.url.params
        size = int(params["pageSize"])
        number = int(params["pageNumber"])
        name = params.get("name", "").lower()
        matching = [c for c in self.categories if name in c["name"].lower()]
        start = (number - 1) * size
        return httpx.Response(
            200,
            json={
                "pageNumber": number,
                "pageSize": size,
                "data": matching[start : start + size],
                "totalNumberOfRecords": len(matching),
                "totalNumberOfPages": math.ceil(len(matching) / size),
            },
        )

    def _find(self, category_id: str | None) -> dict | None:
        return next((c for c in self.categories if str(c["id"]) == category_id), None)


def _json(request: httpx.Request) -> dict:
    return json.loads(request.content or b"{}")


@pytest.fixture()
def api_server():
    return FakeApiServer()


@pytest_asyncio.fixture()
async def api(api_server):
    client = ApiClient(BASE_URL, token=TOKEN, transport=api_server.transport())
    yield client
    await client.aclose()


@pytest.fixture()
def client(api_server):
    # Override dependency
    async def _get_api_client_override(request: Request):
        auth = get_auth_context(request.session)
        api_client = ApiClient(
            BASE_URL,
            token=auth.token if auth else None,
            transport=api_server.transport(),
        )
        try:
            yield api_client
        finally:
            await api_client.aclose()

    app.dependency_overrides[get_api_client] = _get_api_client_override

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture()
def logged_in_client(client):
    r = client.post("/login", data={"email": EMAIL, "password": PASSWORD}, follow_redirects=False)
    assert r.status_code == 303
    return client
