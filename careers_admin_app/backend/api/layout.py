"""
Layout shell: sidebar navigation, route-derived header title and the
Jinja2 environment every page renders through.
"""
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from ..schemas import APPLICATION_STATUSES
from ..services.session_store import AdminSession
from ..utils import formatting

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters.update(
    job_title=formatting.job_title,
    status_variant=formatting.status_variant,
    status_label=formatting.status_label,
    or_na=formatting.or_na,
    short_date=formatting.format_date,
    long_datetime=formatting.format_datetime,
)
templates.env.globals.update(
    statuses=APPLICATION_STATUSES,
    job_filter_options=formatting.JOB_FILTER_OPTIONS,
)

NAV_ITEMS = [
    ("Dashboard", "/dashboard"),
    ("Applications", "/applications"),
]


def is_active(href: str, path: str) -> bool:
    if href == "/applications":
        return path == href or path.startswith("/applications/")
    return path == href


def nav_items(path: str) -> List[Dict[str, Any]]:
    return [{"label": label, "href": href, "active": is_active(href, path)} for label, href in NAV_ITEMS]


def page_title(path: str) -> str:
    if path == "/dashboard":
        return "Dashboard"
    if path == "/applications":
        return "All Applications"
    if path.startswith("/applications/"):
        return "Application Details"
    return ""


def layout_context(session: Optional[AdminSession], path: str) -> Optional[Dict[str, Any]]:
    """Chrome for the current page, or None when the caller is not an admin."""
    if session is None or not session.is_admin:
        return None
    return {
        "nav_items": nav_items(path),
        "page_title": page_title(path),
        "user_name": session.user.display_name,
    }


def render_page(
    request: Request,
    template_name: str,
    session: AdminSession,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
):
    page_context = dict(context or {})
    page_context["layout"] = layout_context(session, request.url.path)
    return templates.TemplateResponse(request, template_name, page_context, status_code=status_code)
