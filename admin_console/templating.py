from pathlib import Path
from urllib.parse import urlencode

from fastapi.templating import Jinja2Templates

from .constants import CATEGORIES_PATH
from .models import format_creation_date

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["creation_date"] = format_creation_date


def categories_url(page: int = 1, name: str = "", **extra) -> str:
    """Link back to the category list, keeping page and search in the query."""
    params = {"page": page}
    if name:
        params["name"] = name
    params.update({k: v for k, v in extra.items() if v is not None})
    return f"{CATEGORIES_PATH}?{urlencode(params)}"


templates.env.globals["categories_url"] = categories_url
