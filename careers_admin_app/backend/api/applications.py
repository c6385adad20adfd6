import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, HTTPException, Query, Request, status

from .. import schemas
from ..config.settings import Settings, get_settings
from ..services.application_list import refresh_application_list
from ..services.careers_api import CareersAPIClient, CareersAPIError, get_careers_api_client
from ..services.session_store import AdminSession
from .deps import require_admin_session
from .layout import render_page

logger = logging.getLogger(__name__)

router = APIRouter()

LIST_COLUMNS = [
    "Name", "Email", "Phone", "Location", "Job Role", "Expected Stipend", "Education",
    "Preferred Start", "LinkedIn", "Portfolio/Resume", "Status", "Applied Date", "Actions",
]

STATUS_UPDATED = "Status updated successfully!"
STATUS_UPDATE_FAILED = "Failed to update status"


@router.get("/applications")
def list_applications(
    request: Request,
    search: Optional[str] = None,
    status_filter: Optional[str] = Query(None, alias="status"),
    job_id: Optional[str] = Query(None, alias="jobId"),
    page: Optional[int] = None,
    session: AdminSession = Depends(require_admin_session),
    client: CareersAPIClient = Depends(get_careers_api_client),
    settings: Settings = Depends(get_settings),
):
    """
    Filtered, paginated applications table.

    Entering the page without query parameters starts from a fresh state.
    """
    view = session.list_view
    if not request.query_params:
        view.reset()
    else:
        view.navigate(
            search=search.strip() if search is not None else None,
            status=status_filter,
            job_id=job_id,
            page=page,
        )

    refresh_application_list(view, client, session.token, settings.page_size)
    state, rows = view.snapshot()
    return render_page(
        request,
        "applications.html",
        session,
        {"state": state, "applications": rows, "columns": LIST_COLUMNS},
    )


def _load_application(session: AdminSession, client: CareersAPIClient, application_id: str):
    try:
        application = client.get_application(session.token, application_id)
    except CareersAPIError as e:
        logger.error("Error fetching application %s: %s", application_id, e)
        return None
    session.detail = application
    return application


def _render_detail(request: Request, session: AdminSession, application, selected_status=None, notice=None):
    if application is None:
        return render_page(request, "application_detail.html", session, {"application": None})
    return render_page(
        request,
        "application_detail.html",
        session,
        {
            "application": application,
            "selected_status": selected_status or application.status,
            "notice": notice,
        },
    )


@router.get("/applications/{application_id}")
def application_detail(
    request: Request,
    application_id: str,
    session: AdminSession = Depends(require_admin_session),
    client: CareersAPIClient = Depends(get_careers_api_client),
):
    application = _load_application(session, client, application_id)
    return _render_detail(request, session, application)


@router.post("/applications/{application_id}/status")
def update_application_status(
    request: Request,
    application_id: str,
    new_status: str = Form(..., alias="status"),
    session: AdminSession = Depends(require_admin_session),
    client: CareersAPIClient = Depends(get_careers_api_client),
):
    """
    Change an application's review status.

    Submitting the status the record already has issues no request.
    """
    if new_status not in schemas.APPLICATION_STATUSES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid status")

    application = session.detail
    if application is None or application.id != application_id:
        application = _load_application(session, client, application_id)
        if application is None:
            return _render_detail(request, session, None)

    if new_status == application.status:
        return _render_detail(request, session, application)

    try:
        persisted = client.update_status(session.token, application_id, new_status)
    except CareersAPIError as e:
        logger.error("Error updating status for %s: %s", application_id, e)
        notice = {"kind": "error", "message": STATUS_UPDATE_FAILED}
        return _render_detail(request, session, application, selected_status=new_status, notice=notice)

    application = application.model_copy(update={"status": persisted})
    session.detail = application
    logger.info("Application %s moved to %s", application_id, persisted)
    notice = {"kind": "success", "message": STATUS_UPDATED}
    return _render_detail(request, session, application, notice=notice)
