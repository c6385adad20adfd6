"""
Admin sessions.

A session is acquired at login, resolved from a cookie on every request,
and invalidated at logout. Expired sessions are dropped on lookup and the
caller sends the browser back to the login page.
"""
import logging
import math
import secrets
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Dict, Optional

from jose import JWTError, jwt

from .. import schemas
from ..config.settings import get_settings
from .application_list import ApplicationListView

logger = logging.getLogger(__name__)


@dataclass
class AdminSession:
    session_id: str
    token: str
    user: schemas.AdminUser
    expires_at: datetime
    list_view: ApplicationListView = field(default_factory=ApplicationListView)
    detail: Optional[schemas.Application] = None

    @property
    def is_admin(self) -> bool:
        return self.user.is_admin

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return now >= self.expires_at


def token_expiry(token: str, default_ttl_minutes: int) -> datetime:
    """
    Expiry for a bearer token: its `exp` claim when it is a readable JWT,
    otherwise now + default_ttl_minutes. The signature is not checked here;
    the careers backend does that on every call.
    """
    fallback = datetime.now(timezone.utc) + timedelta(minutes=default_ttl_minutes)
    try:
        claims = jwt.get_unverified_claims(token)
    except JWTError:
        return fallback

    exp = claims.get("exp")
    if not isinstance(exp, (int, float)) or isinstance(exp, bool) or not math.isfinite(exp):
        return fallback
    # Claims past the TTL (including millisecond timestamps) never reach fromtimestamp
    if exp >= fallback.timestamp():
        return fallback
    return datetime.fromtimestamp(max(exp, 0), tz=timezone.utc)


class SessionStore:
    """In-memory session registry keyed by an opaque cookie value."""

    def __init__(self, ttl_minutes: int = 480):
        self.ttl_minutes = ttl_minutes
        self._sessions: Dict[str, AdminSession] = {}
        self._lock = threading.Lock()

    def create(self, token: str, user: schemas.AdminUser) -> AdminSession:
        session = AdminSession(
            session_id=secrets.token_urlsafe(32),
            token=token,
            user=user,
            expires_at=token_expiry(token, self.ttl_minutes),
        )
        with self._lock:
            self._purge_expired()
            self._sessions[session.session_id] = session
        logger.info("Session opened for %s", user.email)
        return session

    def get(self, session_id: str) -> Optional[AdminSession]:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            if session.is_expired():
                del self._sessions[session_id]
                logger.info("Session for %s expired", session.user.email)
                return None
            return session

    def invalidate(self, session_id: str) -> None:
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session:
            logger.info("Session closed for %s", session.user.email)

    def _purge_expired(self) -> None:
        now = datetime.now(timezone.utc)
        expired = [sid for sid, s in self._sessions.items() if s.is_expired(now)]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.debug("Dropped %d expired sessions", len(expired))

    def __len__(self) -> int:
        return len(self._sessions)


@lru_cache()
def get_session_store() -> SessionStore:
    return SessionStore(ttl_minutes=get_settings().session_ttl_minutes)
