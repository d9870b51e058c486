from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ..auth import AuthContext
from ..constants import DASHBOARD_PATH, LOGIN_PATH
from ..deps import current_auth
from ..notifications import pop_flashed
from ..templating import templates

router = APIRouter()

@router.get("/")
def home(auth: Optional[AuthContext] = Depends(current_auth)):
    return RedirectResponse(url=DASHBOARD_PATH if auth else LOGIN_PATH, status_code=303)

@router.get("/dashboard", response_class=HTMLResponse)
def dashboard(request: Request, auth: Optional[AuthContext] = Depends(current_auth)):
    if not auth:
        return RedirectResponse(url=LOGIN_PATH, status_code=303)

    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {"title": "Dashboard", "auth": auth, "toasts": pop_flashed(request.session)},
    )

@router.get("/health")
def health():
    return {"status": "ok"}
