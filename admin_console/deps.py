from collections.abc import AsyncGenerator
from typing import Optional
from fastapi import Request

from .api_client import ApiClient
from .auth import AuthContext, get_auth_context
from .config import settings

def current_auth(request: Request) -> Optional[AuthContext]:
    return get_auth_context(request.session)

async def get_api_client(request: Request) -> AsyncGenerator[ApiClient, None]:
    auth = get_auth_context(request.session)
    client = ApiClient(
        settings.api_base_url,
        token=auth.token if auth else None,
        auth_scheme=settings.api_auth_scheme,
        timeout=settings.api_timeout,
    )
    try:
        yield client
    finally:
        await client.aclose()
