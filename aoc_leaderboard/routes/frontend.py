from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..config import Settings, get_settings
from ..schemas import ActionResult, PageData
from ..services.cookie_actions import clear_cookie, set_cookie
from ..services.credentials import SESSION_COOKIE_NAME
from ..services.leaderboard_client import Fetcher, fetch_leaderboard
from ..services.page_loader import load_page
from ..services.ranking import event_days, stars_by_day

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()


def get_fetcher() -> Fetcher:
    return fetch_leaderboard


def _render(
    request: Request,
    page: PageData,
    form: Optional[ActionResult] = None,
    status_code: int = 200,
):
    days = event_days(page.leaderboard_data.event) if page.leaderboard_data else 0
    context = {
        "page": page,
        "form": form,
        "has_session_cookie": bool(request.cookies.get(SESSION_COOKIE_NAME)),
        "days": list(range(1, days + 1)),
        "stars_by_day": stars_by_day,
    }
    return templates.TemplateResponse(request, "index.html", context, status_code=status_code)


@router.get("/", response_class=HTMLResponse)
def home(
    request: Request,
    settings: Settings = Depends(get_settings),
    fetcher: Fetcher = Depends(get_fetcher),
):
    page = load_page(request.cookies, settings, fetcher)
    return _render(request, page)


@router.get("/api/leaderboard", response_model=PageData)
def leaderboard_json(
    request: Request,
    settings: Settings = Depends(get_settings),
    fetcher: Fetcher = Depends(get_fetcher),
) -> PageData:
    return load_page(request.cookies, settings, fetcher)


@router.post("/set-cookie")
def submit_session_cookie(
    request: Request,
    session_cookie: str = Form("", alias="sessionCookie"),
    settings: Settings = Depends(get_settings),
    fetcher: Fetcher = Depends(get_fetcher),
):
    redirect = RedirectResponse(url="/", status_code=303)
    result = set_cookie(redirect, session_cookie, settings, fetcher)
    if result.success:
        return redirect

    # set_cookie already made the one outbound call for this submission.
    page = PageData(
        leaderboard_code=result.leaderboard_code,
        join_code=result.join_code,
        show_cookie_input=True,
    )
    return _render(request, page, form=result, status_code=result.status_code)


@router.post("/clear-cookie")
def remove_session_cookie():
    redirect = RedirectResponse(url="/", status_code=303)
    clear_cookie(redirect)
    return redirect


def register_routes(app: FastAPI) -> None:
    app.include_router(router)
    if STATIC_DIR.is_dir():
        app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
