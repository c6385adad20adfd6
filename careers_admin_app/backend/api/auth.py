import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse

from ..config.settings import Settings, get_settings
from ..services.careers_api import CareersAPIClient, CareersAPIError, get_careers_api_client
from ..services.session_store import AdminSession, SessionStore, get_session_store
from .deps import get_current_session
from .layout import templates

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_CREDENTIALS = "Invalid email or password"
ACCESS_DENIED = "Access denied. Admin privileges required."
BACKEND_UNREACHABLE = "Unable to reach the careers service. Please try again."


def _login_form(request: Request, error: Optional[str] = None, email: str = "", status_code: int = 200):
    return templates.TemplateResponse(
        request, "login.html", {"error": error, "email": email}, status_code=status_code
    )


@router.get("/", include_in_schema=False)
def root():
    return RedirectResponse(url="/dashboard", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/login")
def login_page(request: Request, session: Optional[AdminSession] = Depends(get_current_session)):
    if session is not None and session.is_admin:
        return RedirectResponse(url="/dashboard", status_code=status.HTTP_303_SEE_OTHER)
    return _login_form(request)


@router.post("/login")
def login(
    request: Request,
    email: str = Form(...),
    password: str = Form(...),
    client: CareersAPIClient = Depends(get_careers_api_client),
    store: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
):
    """
    Exchange admin credentials for a backend token and open a session.

    Non-admin accounts are turned away without a session being created.
    """
    try:
        token, user = client.login(email, password)
        if user is None:
            user = client.get_profile(token)
    except CareersAPIError as e:
        logger.warning("Login failed for %s: %s", email, e.message)
        if e.status_code is None:
            return _login_form(request, BACKEND_UNREACHABLE, email, status.HTTP_503_SERVICE_UNAVAILABLE)
        message = e.remote_message or INVALID_CREDENTIALS
        return _login_form(request, message, email, status.HTTP_401_UNAUTHORIZED)

    if not user.is_admin:
        logger.warning("Rejected non-admin login for %s", email)
        return _login_form(request, ACCESS_DENIED, email, status.HTTP_403_FORBIDDEN)

    session = store.create(token, user)
    response = RedirectResponse(url="/dashboard", status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(
        settings.session_cookie_name,
        session.session_id,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
        max_age=settings.session_ttl_minutes * 60,
    )
    return response


@router.post("/logout")
def logout(
    request: Request,
    store: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
):
    session_id = request.cookies.get(settings.session_cookie_name)
    if session_id:
        store.invalidate(session_id)
    response = RedirectResponse(url="/login", status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(settings.session_cookie_name)
    return response
