"""
View-state for the applications list.

The list view keeps four pieces of state (search text, status filter,
role filter and page). Changing any filter sends the page back to 1; every
navigation re-fetches. Fetches are numbered so a slow response can never
overwrite the rows of a newer one.
"""
import logging
import threading
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Tuple

from .. import schemas
from .careers_api import CareersAPIClient, CareersAPIError

logger = logging.getLogger(__name__)

ALL = "all"


@dataclass(frozen=True)
class ApplicationListState:
    search: str = ""
    status: str = ALL
    job_id: str = ALL
    page: int = 1
    total_pages: int = 1
    # False until a list response has reported the page count
    total_pages_known: bool = False

    @property
    def filters(self) -> Tuple[str, str, str]:
        return (self.search, self.status, self.job_id)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    def with_search(self, search: str) -> "ApplicationListState":
        return replace(self, search=search, page=1)

    def with_status(self, status: str) -> "ApplicationListState":
        return replace(self, status=status or ALL, page=1)

    def with_job_id(self, job_id: str) -> "ApplicationListState":
        return replace(self, job_id=job_id or ALL, page=1)

    def with_page(self, page: int) -> "ApplicationListState":
        page = max(page, 1)
        if self.total_pages_known:
            page = min(page, self.total_pages)
        return replace(self, page=page)

    def with_total_pages(self, total_pages: int) -> "ApplicationListState":
        return replace(self, total_pages=max(total_pages, 1), total_pages_known=True)

    def transition(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        job_id: Optional[str] = None,
        page: Optional[int] = None,
    ) -> "ApplicationListState":
        """
        Apply a navigation request. None means "leave as is".

        A changed filter wins over a requested page: the page goes back to 1.
        """
        state = self
        if search is not None and search != state.search:
            state = state.with_search(search)
        if status is not None and (status or ALL) != state.status:
            state = state.with_status(status)
        if job_id is not None and (job_id or ALL) != state.job_id:
            state = state.with_job_id(job_id)
        if page is not None and state.filters == self.filters:
            state = state.with_page(page)
        return state

    def query_params(self, page_size: int = 20) -> Dict[str, Any]:
        params: Dict[str, Any] = {"page": str(self.page), "limit": str(page_size)}
        if self.status != ALL:
            params["status"] = self.status
        if self.job_id != ALL:
            params["jobId"] = self.job_id
        if self.search:
            params["search"] = self.search
        return params


class ApplicationListView:
    """Per-session list view: current state, last rows shown, fetch generation."""

    def __init__(self):
        self._lock = threading.Lock()
        self._generation = 0
        self.state = ApplicationListState()
        self.rows: List[schemas.Application] = []

    def reset(self) -> None:
        with self._lock:
            self._generation += 1
            self.state = ApplicationListState()
            self.rows = []

    def navigate(self, **requested) -> ApplicationListState:
        with self._lock:
            self.state = self.state.transition(**requested)
            return self.state

    def begin_fetch(self, page_size: int = 20) -> Tuple[int, Dict[str, Any]]:
        with self._lock:
            self._generation += 1
            return self._generation, self.state.query_params(page_size)

    def complete_fetch(self, generation: int, page: schemas.ApplicationPage) -> bool:
        with self._lock:
            if generation != self._generation:
                return False
            self.rows = list(page.rows)
            self.state = self.state.with_total_pages(page.total_pages)
            return True

    def snapshot(self) -> Tuple[ApplicationListState, List[schemas.Application]]:
        with self._lock:
            return self.state, list(self.rows)


def refresh_application_list(
    view: ApplicationListView,
    client: CareersAPIClient,
    token: str,
    page_size: int = 20,
) -> bool:
    """
    Fetch the page described by the view's current state.

    Returns True when the rows were replaced. On failure the error is logged
    and the previous rows stay in place.
    """
    generation, params = view.begin_fetch(page_size)
    try:
        page = client.list_applications(token, params)
    except CareersAPIError as e:
        logger.error("Error fetching applications: %s", e)
        return False

    if not view.complete_fetch(generation, page):
        logger.debug("Discarding superseded applications response (generation %d)", generation)
        return False
    logger.info("Loaded %d applications (page %s)", len(page.rows), params["page"])
    return True
