from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ..api_client import ApiClient
from ..auth import clear_auth, store_auth
from ..constants import LOGIN_PATH
from ..deps import get_api_client
from ..notifications import Notifier, flash
from ..screens.login import LoginScreen
from ..templating import templates

router = APIRouter()

def _render_login(request: Request, screen: LoginScreen, password: str = "", toasts=None, status_code: int = 200):
    # a failed attempt keeps the form populated, including the masking choice
    return templates.TemplateResponse(
        request,
        "login.html",
        {
            "title": "Log In",
            "email": screen.email,
            "password": password,
            "errors": screen.field_errors,
            "show_password": screen.show_password,
            "toasts": toasts or [],
        },
        status_code=status_code,
    )

@router.get("/login", response_class=HTMLResponse)
def login_form(request: Request, show_password: bool = False):
    return templates.TemplateResponse(
        request,
        "login.html",
        {"title": "Log In", "email": "", "password": "", "errors": {}, "show_password": show_password, "toasts": []},
    )

@router.post("/login")
async def login(
    request: Request,
    email: str = Form(""),
    password: str = Form(""),
    show_password: bool = Form(False),
    api: ApiClient = Depends(get_api_client),
):
    notifier = Notifier()
    screen = LoginScreen(api, notifier)
    screen.show_password = show_password

    result = await screen.submit_credentials(email, password)
    if not result.ok:
        return _render_login(request, screen, password=password, toasts=notifier.drain(), status_code=400)

    store_auth(request.session, result.auth)
    flash(request.session, notifier.drain())
    return RedirectResponse(url=result.redirect_to, status_code=303)

@router.post("/logout")
def logout(request: Request):
    clear_auth(request.session)
    return RedirectResponse(url=LOGIN_PATH, status_code=303)
