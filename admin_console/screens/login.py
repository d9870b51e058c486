from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..api_client import ApiClient
from ..auth import AuthContext
from ..constants import DASHBOARD_PATH
from ..exceptions import RequestError
from ..models import Credentials
from ..notifications import Notifier
from ..validators import ValidationError, validate_credentials

logger = logging.getLogger(__name__)

LOGIN_SUCCESS_MESSAGE = "Login successful!"
LOGIN_FAILURE_MESSAGE = "An error occurred. Please try again."


@dataclass
class LoginResult:
    ok: bool
    auth: AuthContext | None = None
    redirect_to: str | None = None
    field_errors: dict[str, str] = field(default_factory=dict)


class LoginScreen:
    def __init__(self, api: ApiClient, notifier: Notifier):
        self.api = api
        self.notifier = notifier
        self.show_password = False
        self.email = ""
        self.field_errors: dict[str, str] = {}

    async def submit_credentials(self, email: str, password: str) -> LoginResult:
        email = (email or "").strip()
        self.email = email

        try:
            validate_credentials(email, password)
        except ValidationError as e:
            self.field_errors = e.field_errors
            return LoginResult(ok=False, field_errors=e.field_errors)
        self.field_errors = {}

        try:
            payload = await self.api.login(Credentials(email=email, password=password))
        except RequestError as e:
            self.notifier.error(e.user_message(LOGIN_FAILURE_MESSAGE))
            return LoginResult(ok=False)

        logger.info(f"Logged in as {email}")
        self.notifier.success(LOGIN_SUCCESS_MESSAGE)
        token = payload.get("token")
        return LoginResult(
            ok=True,
            auth=AuthContext(token=token if isinstance(token, str) else None, email=email),
            redirect_to=DASHBOARD_PATH,
        )
