"""
Display helpers shared by the templates.
"""
from datetime import datetime
from typing import Any, Optional

JOB_TITLES = {
    "TV-AIML-INT-2025-001": "AIML Intern",
    "TV-WEB-MERN-2025-005": "MERN Stack Developer Intern",
    "TV-MKT-SMM-2025-003": "Social Media Management Intern",
}

# Shorter labels used by the role filter
JOB_FILTER_OPTIONS = [
    ("TV-AIML-INT-2025-001", "AIML Intern"),
    ("TV-WEB-MERN-2025-005", "MERN Stack Developer"),
    ("TV-MKT-SMM-2025-003", "Social Media Manager"),
]

STATUS_VARIANTS = {
    "pending": "warning",
    "reviewed": "secondary",
    "shortlisted": "success",
    "accepted": "success",
    "rejected": "destructive",
}

DEFAULT_VARIANT = "default"
NOT_AVAILABLE = "N/A"


def job_title(job_id: Optional[str], missing: str = NOT_AVAILABLE) -> str:
    if not job_id:
        return missing
    return JOB_TITLES.get(job_id, job_id)


def status_variant(status: Optional[str]) -> str:
    return STATUS_VARIANTS.get(status or "", DEFAULT_VARIANT)


def status_label(status: Optional[str]) -> str:
    if not status:
        return ""
    return status[:1].upper() + status[1:]


def or_na(value: Any) -> Any:
    if value is None or value == "" or value == []:
        return NOT_AVAILABLE
    return value


def format_date(value: Optional[datetime]) -> str:
    """Short date, e.g. 'Mar 05, 2025'."""
    if value is None:
        return NOT_AVAILABLE
    return value.strftime("%b %d, %Y")


def format_datetime(value: Optional[datetime]) -> str:
    """Long date and time, e.g. 'Mar 05, 2025, 02:30:00 PM'."""
    if value is None:
        return NOT_AVAILABLE
    return value.strftime("%b %d, %Y, %I:%M:%S %p")
