import logging

from fastapi import APIRouter, Depends, Request

from ..services.careers_api import CareersAPIClient, CareersAPIError, get_careers_api_client
from ..services.session_store import AdminSession
from .deps import require_admin_session
from .layout import render_page

logger = logging.getLogger(__name__)

router = APIRouter()

# (title, source, status key, accent)
STAT_CARDS = [
    ("Total Applications", "total", None, "blue"),
    ("Recent (7 days)", "recent", None, "yellow"),
    ("Pending", "status", "pending", "orange"),
    ("Shortlisted", "status", "shortlisted", "green"),
    ("Accepted", "status", "accepted", "green-dark"),
    ("Rejected", "status", "rejected", "red"),
]

BREAKDOWN = [
    ("Pending", "pending", "orange"),
    ("Reviewed", "reviewed", "blue"),
    ("Shortlisted", "shortlisted", "green"),
    ("Rejected", "rejected", "red"),
    ("Accepted", "accepted", "green-dark"),
]


def build_stat_cards(stats):
    cards = []
    for title, source, key, accent in STAT_CARDS:
        if source == "total":
            value = stats.total_applications
        elif source == "recent":
            value = stats.recent_applications
        else:
            value = getattr(stats.status_breakdown, key)
        cards.append({"title": title, "value": value, "accent": accent})
    return cards


def build_breakdown(stats):
    return [
        {"label": label, "value": getattr(stats.status_breakdown, key), "accent": accent}
        for label, key, accent in BREAKDOWN
    ]


@router.get("/dashboard")
def dashboard(
    request: Request,
    session: AdminSession = Depends(require_admin_session),
    client: CareersAPIClient = Depends(get_careers_api_client),
):
    """Aggregate counts from the careers backend; re-fetched on every visit."""
    try:
        stats = client.get_stats(session.token)
    except CareersAPIError as e:
        logger.error("Error fetching stats: %s", e)
        stats = None

    context = {"stats": stats, "stat_cards": [], "breakdown": []}
    if stats is not None:
        context["stat_cards"] = build_stat_cards(stats)
        context["breakdown"] = build_breakdown(stats)
    return render_page(request, "dashboard.html", session, context)
