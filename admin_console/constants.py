"""Shared constants for the console screens and the remote API."""

PAGE_SIZE = 5
SEARCH_DEBOUNCE_SECONDS = 0.5
# the search box already waits SEARCH_DEBOUNCE_SECONDS before it submits
SUBMITTED_SEARCH_DELAY = 0.0
TOAST_AUTO_CLOSE_SECONDS = 3.0

LOGIN_PATH = "/login"
DASHBOARD_PATH = "/dashboard"
CATEGORIES_PATH = "/categories"

# Remote endpoints, relative to API_BASE_URL
LOGIN_ENDPOINT = "Users/Login"
CATEGORY_LIST_ENDPOINT = "Category/"
CATEGORY_CREATE_ENDPOINT = "Category/"


def category_endpoint(category_id: int | str) -> str:
    """Update/delete endpoint for a single category."""
    return f"Category/{category_id}"
