from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request, status
from fastapi.responses import RedirectResponse
from .api import auth, dashboard, applications, health
from .api.deps import LoginRequired
from .utils.logging_config import setup_logging, get_logger
from .config.settings import get_settings
from .config.api import get_api_config

# Initialize settings
settings = get_settings()

# Setup logging configuration
setup_logging(
    level=settings.log_level,
    log_file=settings.log_file
)
logger = get_logger(__name__)

# Validate configuration on startup
missing_settings = settings.validate_required_settings()
if missing_settings:
    for setting in missing_settings:
        logger.error("Configuration error: %s", setting)
    if settings.is_production():
        raise RuntimeError("Invalid configuration for production environment")

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    docs_url="/docs" if settings.api_docs_enabled else None,
    redoc_url="/redoc" if settings.api_docs_enabled else None,
)


@app.exception_handler(LoginRequired)
def redirect_to_login(request: Request, exc: LoginRequired):
    response = RedirectResponse(url="/login", status_code=status.HTTP_303_SEE_OTHER)
    if request.cookies.get(settings.session_cookie_name):
        response.delete_cookie(settings.session_cookie_name)
    return response


# Routers
app.include_router(health.router, prefix="/api", tags=["Health Check"])
app.include_router(auth.router, tags=["Authentication"])
app.include_router(dashboard.router, tags=["Dashboard"])
app.include_router(applications.router, tags=["Applications"])


@app.on_event("startup")
def on_startup():
    """Log application startup and the careers backend in use."""
    logger.info("Starting %s v%s...", settings.app_name, settings.app_version)
    logger.info("Careers backend: %s", get_api_config().BASE_URL)
