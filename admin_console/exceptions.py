"""Errors raised by the console before and during remote calls."""


class RequestError(Exception):
    """Raised when a call to the remote API fails for any reason."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        server_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.server_message = server_message

    def user_message(self, fallback: str) -> str:
        return self.server_message or fallback


class AuthExpiredError(RequestError):
    """Raised when the remote API rejects the credential (HTTP 401)."""

    pass
