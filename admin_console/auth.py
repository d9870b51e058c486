from dataclasses import dataclass
from typing import Optional

SESSION_TOKEN = "token"
SESSION_EMAIL = "email"

@dataclass(frozen=True)
class AuthContext:
    """Read-only login data handed to the screens that need it."""

    token: str | None
    email: str

def store_auth(session: dict, auth: AuthContext) -> None:
    session[SESSION_TOKEN] = auth.token
    session[SESSION_EMAIL] = auth.email

def get_auth_context(session: dict) -> Optional[AuthContext]:
    email = session.get(SESSION_EMAIL)
    if email is None:
        return None
    return AuthContext(token=session.get(SESSION_TOKEN), email=email)

def clear_auth(session: dict) -> None:
    session.pop(SESSION_TOKEN, None)
    session.pop(SESSION_EMAIL, None)
