from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ..api_client import ApiClient
from ..auth import AuthContext, clear_auth
from ..constants import LOGIN_PATH, SUBMITTED_SEARCH_DELAY
from ..deps import current_auth, get_api_client
from ..domain import ModalMode
from ..exceptions import AuthExpiredError
from ..notifications import Notifier
from ..screens.category_list import CategoryListScreen
from ..templating import categories_url, templates

logger = logging.getLogger(__name__)

router = APIRouter()

SESSION_CATEGORY_VIEW = "category_view"


def _redirect_login():
    return RedirectResponse(url=LOGIN_PATH, status_code=303)


def _session_expired(request: Request, screen: CategoryListScreen) -> bool:
    if isinstance(screen.last_error, AuthExpiredError):
        logger.info("Remote API rejected the session token, logging out")
        clear_auth(request.session)
        return True
    return False


async def _load_screen(
    api: ApiClient, auth: AuthContext, notifier: Notifier, page: int, search: str
) -> CategoryListScreen:
    screen = CategoryListScreen(api, auth, notifier)
    screen.search_term = search
    screen.current_page = max(page, 1)
    await screen.fetch_categories(screen.current_page, search)
    return screen


def _remember_view(request: Request, screen: CategoryListScreen) -> None:
    request.session[SESSION_CATEGORY_VIEW] = {
        "page": screen.current_page,
        "name": screen.search_term,
        "total_pages": screen.total_pages,
    }


def _restore_view(screen: CategoryListScreen, view: dict) -> None:
    screen.search_term = view["name"]
    screen.current_page = view["page"]
    screen.total_pages = view["total_pages"]


def _render(request: Request, screen: CategoryListScreen, notifier: Notifier, status_code: int = 200):
    _remember_view(request, screen)
    return templates.TemplateResponse(
        request,
        "categories.html",
        {
            "title": "Categories",
            "auth": screen.auth,
            "screen": screen,
            "pagination": screen.pagination(),
            "toasts": notifier.drain(),
        },
        status_code=status_code,
    )


def _failure_status(screen: CategoryListScreen) -> int:
    # field errors never reach the network; anything else came back from the API
    return 400 if screen.field_errors else 502


@router.get("/categories", response_class=HTMLResponse)
async def categories_page(
    request: Request,
    page: int = 1,
    name: str = "",
    modal: ModalMode | None = None,
    id_: str | None = Query(None, alias="id"),
    auth: AuthContext | None = Depends(current_auth),
    api: ApiClient = Depends(get_api_client),
):
    if not auth:
        return _redirect_login()

    notifier = Notifier()
    screen = CategoryListScreen(api, auth, notifier, debounce_delay=SUBMITTED_SEARCH_DELAY)
    view = request.session.get(SESSION_CATEGORY_VIEW)

    if view and view["name"] == name and page != view["page"]:
        # pagination link: only pages of the last rendered result are valid
        _restore_view(screen, view)
        if not await screen.handle_page_change(page):
            logger.debug(f"Ignoring page {page} outside 1..{screen.total_pages}")
            return RedirectResponse(
                url=categories_url(view["page"], name, modal=modal.value if modal else None, id=id_),
                status_code=303,
            )
    elif view and view["name"] != name:
        _restore_view(screen, view)
        screen.set_search_term(name)
        await screen.wait_for_search()
    else:
        screen.search_term = name
        screen.current_page = max(page, 1)
        await screen.fetch_categories(screen.current_page, name)

    if _session_expired(request, screen):
        return _redirect_login()

    if modal is not None:
        try:
            screen.open_modal(modal, id_)
        except ValueError:
            logger.debug(f"Ignoring {modal.value} modal without a category id")

    return _render(request, screen, notifier)


@router.post("/categories", response_class=HTMLResponse)
async def create_category(
    request: Request,
    name: str = Form(""),
    page: int = Form(1),
    search: str = Form(""),
    auth: AuthContext | None = Depends(current_auth),
    api: ApiClient = Depends(get_api_client),
):
    if not auth:
        return _redirect_login()

    notifier = Notifier()
    screen = await _load_screen(api, auth, notifier, page, search)
    screen.open_modal(ModalMode.ADD)
    ok = await screen.submit_modal(name)
    if _session_expired(request, screen):
        return _redirect_login()

    return _render(request, screen, notifier, status_code=200 if ok else _failure_status(screen))


@router.post("/categories/{category_id}/edit", response_class=HTMLResponse)
async def update_category(
    request: Request,
    category_id: str,
    name: str = Form(""),
    page: int = Form(1),
    search: str = Form(""),
    auth: AuthContext | None = Depends(current_auth),
    api: ApiClient = Depends(get_api_client),
):
    if not auth:
        return _redirect_login()

    notifier = Notifier()
    screen = await _load_screen(api, auth, notifier, page, search)
    screen.open_modal(ModalMode.UPDATE, category_id)
    ok = await screen.submit_modal(name)
    if _session_expired(request, screen):
        return _redirect_login()

    return _render(request, screen, notifier, status_code=200 if ok else _failure_status(screen))


@router.post("/categories/{category_id}/delete", response_class=HTMLResponse)
async def delete_category(
    request: Request,
    category_id: str,
    page: int = Form(1),
    search: str = Form(""),
    auth: AuthContext | None = Depends(current_auth),
    api: ApiClient = Depends(get_api_client),
):
    if not auth:
        return _redirect_login()

    notifier = Notifier()
    screen = await _load_screen(api, auth, notifier, page, search)
    screen.open_modal(ModalMode.DELETE, category_id)
    ok = await screen.confirm_delete()
    if _session_expired(request, screen):
        return _redirect_login()

    return _render(request, screen, notifier, status_code=200 if ok else 502)
