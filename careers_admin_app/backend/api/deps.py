from typing import Optional

from fastapi import Depends, Request

from ..config.settings import Settings, get_settings
from ..services.session_store import AdminSession, SessionStore, get_session_store


class LoginRequired(Exception):
    """Raised by page guards; turned into a redirect to /login by the app."""


def get_current_session(
    request: Request,
    store: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
) -> Optional[AdminSession]:
    """Session named by the request cookie, or None when absent or expired."""
    session_id = request.cookies.get(settings.session_cookie_name)
    if not session_id:
        return None
    return store.get(session_id)


def require_admin_session(session: Optional[AdminSession] = Depends(get_current_session)) -> AdminSession:
    if session is None or not session.is_admin:
        raise LoginRequired()
    return session
