"""Async client for the remote product/order REST API."""

import logging
from typing import Any

import httpx

from .constants import (
    CATEGORY_CREATE_ENDPOINT,
    CATEGORY_LIST_ENDPOINT,
    LOGIN_ENDPOINT,
    PAGE_SIZE,
    category_endpoint,
)
from .exceptions import AuthExpiredError, RequestError
from .models import CategoryPage, Credentials

logger = logging.getLogger(__name__)


class ApiClient:
    """Thin wrapper over httpx.AsyncClient for the login and category endpoints."""

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        auth_scheme: str = "Bearer",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: Base URL of the API, e.g. https://host/api/v1
            token: Login token attached to every request when present
            auth_scheme: Authorization header prefix; empty sends the bare token
            timeout: Per-request timeout in seconds
            transport: Optional transport, used by tests to mock the server
        """
        self.base_url = base_url.rstrip("/") + "/"
        self.token = token
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"{auth_scheme} {token}".strip()
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            headers=headers,
            transport=transport,
        )

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def login(self, credentials: Credentials) -> dict[str, Any]:
        return await self._request("login", "POST", LOGIN_ENDPOINT, json=credentials.model_dump())

    async def list_categories(
        self, page_number: int, page_size: int = PAGE_SIZE, name: str | None = None
    ) -> CategoryPage:
        params: dict[str, Any] = {"pageSize": page_size, "pageNumber": page_number}
        if name:
            params["name"] = name
        payload = await self._request("list categories", "GET", CATEGORY_LIST_ENDPOINT, params=params)
        return CategoryPage.model_validate(payload)

    async def create_category(self, name: str) -> dict[str, Any]:
        return await self._request("create category", "POST", CATEGORY_CREATE_ENDPOINT, json={"name": name})

    async def update_category(self, category_id: int | str, name: str) -> dict[str, Any]:
        return await self._request(
            "update category", "PUT", category_endpoint(category_id), json={"name": name}
        )

    async def delete_category(self, category_id: int | str) -> dict[str, Any]:
        return await self._request("delete category", "DELETE", category_endpoint(category_id))

    async def _request(self, operation: str, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        """Send one request and decode its JSON body.

        Raises:
            AuthExpiredError: If the API answers 401
            RequestError: On any other non-2xx status, timeout or transport failure
        """
        try:
            response = await self.client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            logger.warning(f"{operation} timed out: {e}")
            raise RequestError(f"{operation} timed out") from e
        except httpx.HTTPError as e:
            logger.warning(f"{operation} failed before a response: {e}")
            raise RequestError(f"{operation} failed: {e}") from e

        payload = _decode_json(response)
        if response.is_success:
            return payload

        server_message = _server_message(payload)
        logger.warning(
            f"{operation} failed with HTTP {response.status_code}: {server_message or '(no message)'}"
        )
        error_cls = AuthExpiredError if response.status_code == 401 else RequestError
        raise error_cls(
            f"{operation} failed with HTTP {response.status_code}",
            status_code=response.status_code,
            server_message=server_message,
        )


def _decode_json(response: httpx.Response) -> dict[str, Any]:
    if not response.content:
        return {}
    try:
        payload = response.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {"data": payload}


def _server_message(payload: dict[str, Any]) -> str | None:
    message = payload.get("message")
    if isinstance(message, str) and message.strip():
        return message
    return None
