import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_BASE_URL = "https://upskilling-egypt.com:3006/api/v1"

class Settings:
    def __init__(self) -> None:
        secret = os.getenv("SECRET_KEY")
        if not secret:
            raise RuntimeError("SECRET_KEY is missing. Add it to .env.")
        self.secret_key = secret
        self.api_base_url = os.getenv("API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/")
        self.api_timeout = float(os.getenv("API_TIMEOUT", "10"))
        self.api_auth_scheme = os.getenv("API_AUTH_SCHEME", "Bearer").strip()
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_colors = os.getenv("LOG_COLORS", "1") == "1"

settings = Settings()
