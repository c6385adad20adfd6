"""
Endpoint map for the remote careers backend.

Built once per process from the configured base URL and never mutated.
"""
from dataclasses import dataclass
from functools import lru_cache

from .settings import get_settings


@dataclass(frozen=True)
class UserEndpoints:
    LOGIN: str
    PROFILE: str


@dataclass(frozen=True)
class Endpoints:
    HEALTH: str
    APPLICATIONS: str
    USERS: UserEndpoints


@dataclass(frozen=True)
class ApiConfig:
    BASE_URL: str
    ENDPOINTS: Endpoints


def build_api_config(base_url: str) -> ApiConfig:
    base = base_url.rstrip("/")
    return ApiConfig(
        BASE_URL=base,
        ENDPOINTS=Endpoints(
            HEALTH=f"{base}/api/health",
            APPLICATIONS=f"{base}/api/v1/applications",
            USERS=UserEndpoints(
                LOGIN=f"{base}/api/v1/users/login",
                PROFILE=f"{base}/api/v1/users/profile",
            ),
        ),
    )


@lru_cache()
def get_api_config() -> ApiConfig:
    """Endpoint map for the configured API_BASE_URL (computed once)."""
    return build_api_config(get_settings().api_base_url)
