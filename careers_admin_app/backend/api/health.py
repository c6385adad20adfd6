"""
Health check and system status endpoints.
"""
import logging
from typing import Dict, Any
from fastapi import APIRouter, Depends
from ..config.settings import Settings, get_settings
from ..services.careers_api import CareersAPIClient, get_careers_api_client

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health", summary="Health Check")
def health_check(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    """
    Basic health check endpoint.
    Does not contact the careers backend.
    """
    return {
        "status": "healthy",
        "message": f"Welcome to {settings.app_name} v{settings.app_version}",
        "environment": settings.environment,
    }


@router.get("/health/detailed", summary="Detailed Health Check")
def detailed_health_check(
    settings: Settings = Depends(get_settings),
    client: CareersAPIClient = Depends(get_careers_api_client),
) -> Dict[str, Any]:
    """
    Detailed health check with configuration and careers backend reachability.
    """
    backend_reachable = client.check_health()

    health_status = {
        "status": "healthy",
        "app_info": {
            "name": settings.app_name,
            "version": settings.app_version,
            "environment": settings.environment,
            "debug": settings.debug,
            "testing": settings.testing
        },
        "configuration": {
            "log_level": settings.log_level,
            "api_base_url": settings.api_base_url,
            "request_timeout_seconds": settings.request_timeout_seconds,
            "session_ttl_minutes": settings.session_ttl_minutes,
            "api_docs_enabled": settings.api_docs_enabled
        },
        "careers_backend": {
            "health_url": client.config.ENDPOINTS.HEALTH,
            "reachable": backend_reachable
        }
    }

    if not backend_reachable:
        health_status["status"] = "degraded"
        logger.warning("Careers backend is unreachable at %s", client.config.ENDPOINTS.HEALTH)

    config_issues = settings.validate_required_settings()
    if config_issues:
        health_status["status"] = "degraded"
        health_status["configuration_issues"] = config_issues
        logger.warning("Configuration issues found: %s", config_issues)

    return health_status
