"""
HTTP client for the remote careers backend.

Every failure (transport error, non-2xx status or an unreadable body) is
raised as CareersAPIError; callers decide how to surface it.
"""
import logging
from functools import lru_cache
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote

import requests
from pydantic import ValidationError

from .. import schemas
from ..config.api import ApiConfig, get_api_config
from ..config.settings import get_settings

logger = logging.getLogger(__name__)


class CareersAPIError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None, remote_message: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.remote_message = remote_message


class CareersAPIClient:
    def __init__(self, config: ApiConfig, timeout: int = 30):
        self.config = config
        self.timeout = timeout

    @property
    def applications_url(self) -> str:
        return self.config.ENDPOINTS.APPLICATIONS

    def _application_url(self, application_id: str) -> str:
        return f"{self.applications_url}/{quote(str(application_id), safe='')}"

    def _request(self, method: str, url: str, token: Optional[str] = None, **kwargs) -> Dict[str, Any]:
        headers = kwargs.pop("headers", {})
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            response = requests.request(method, url, headers=headers, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.error("%s %s failed: %s", method, url, str(e))
            raise CareersAPIError(f"Request to careers backend failed: {e}") from e

        if not response.ok:
            logger.warning("%s %s returned HTTP %s", method, url, response.status_code)
            remote_message = _remote_message(response)
            raise CareersAPIError(
                remote_message or f"Careers backend returned HTTP {response.status_code}",
                status_code=response.status_code,
                remote_message=remote_message,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error("%s %s returned a non-JSON body", method, url)
            raise CareersAPIError("Careers backend returned an unreadable response",
                                  status_code=response.status_code) from e
        if not isinstance(data, dict):
            raise CareersAPIError("Careers backend returned an unexpected payload",
                                  status_code=response.status_code)
        return data

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------
    def login(self, email: str, password: str) -> Tuple[str, Optional[schemas.AdminUser]]:
        """Exchange credentials for a bearer token (and the user, when returned)."""
        data = self._request(
            "POST",
            self.config.ENDPOINTS.USERS.LOGIN,
            json={"email": email, "password": password},
        )
        body = data.get("data") if isinstance(data.get("data"), dict) else data
        token = body.get("token") or data.get("token")
        if not token:
            raise CareersAPIError("Login response did not include a token", status_code=502)

        user_payload = body.get("user") or data.get("user")
        user = None
        if isinstance(user_payload, dict):
            user = schemas.AdminUser.model_validate(user_payload)
        return token, user

    def get_profile(self, token: str) -> schemas.AdminUser:
        data = self._request("GET", self.config.ENDPOINTS.USERS.PROFILE, token=token)
        payload = data.get("data")
        if isinstance(payload, dict) and isinstance(payload.get("user"), dict):
            payload = payload["user"]
        if not isinstance(payload, dict):
            raise CareersAPIError("Profile response did not include a user", status_code=502)
        return schemas.AdminUser.model_validate(payload)

    def check_health(self) -> bool:
        try:
            self._request("GET", self.config.ENDPOINTS.HEALTH)
        except CareersAPIError:
            return False
        return True

    # -------------------------------------------------------------------------
    # Applications
    # -------------------------------------------------------------------------
    def get_stats(self, token: str) -> schemas.Stats:
        data = self._request("GET", f"{self.applications_url}/stats/overview", token=token)
        payload = data.get("data")
        if not isinstance(payload, dict):
            raise CareersAPIError("Stats response did not include data")
        try:
            return schemas.Stats.model_validate(payload)
        except ValidationError as e:
            raise CareersAPIError(f"Malformed stats response: {e}") from e

    def list_applications(self, token: str, params: Dict[str, Any]) -> schemas.ApplicationPage:
        data = self._request("GET", self.applications_url, token=token, params=params)
        try:
            rows = [schemas.decode_application(item) for item in (data.get("data") or [])]
            pagination = data.get("pagination") or {}
            total_pages = int(pagination.get("totalPages") or 1)
        except (ValidationError, AttributeError, TypeError, ValueError) as e:
            raise CareersAPIError(f"Malformed list response: {e}") from e

        return schemas.ApplicationPage(rows=rows, total_pages=max(total_pages, 1))

    def get_application(self, token: str, application_id: str) -> schemas.Application:
        data = self._request("GET", self._application_url(application_id), token=token)
        payload = data.get("data")
        if not isinstance(payload, dict):
            raise CareersAPIError("Application not found", status_code=404)
        try:
            return schemas.decode_application(payload)
        except ValidationError as e:
            raise CareersAPIError(f"Malformed application response: {e}") from e

    def update_status(self, token: str, application_id: str, status: str) -> str:
        data = self._request(
            "PUT",
            f"{self._application_url(application_id)}/status",
            token=token,
            json={"status": status},
        )
        payload = data.get("data") or {}
        new_status = payload.get("status") if isinstance(payload, dict) else None
        if not new_status:
            raise CareersAPIError("Status update response did not include a status")
        return new_status


def _remote_message(response: requests.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return None


@lru_cache()
def get_careers_api_client() -> CareersAPIClient:
    """Process-wide client bound to the configured endpoint map."""
    return CareersAPIClient(get_api_config(), timeout=get_settings().request_timeout_seconds)
