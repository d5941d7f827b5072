"""
In-memory repository of tracked job applications.

The repository is the only writer of application records. Callers hold
references for display and send changes back through ``update`` or
``set_status``. Every mutation is reported to the optional ``on_change``
callback with the full list, which the app uses to rewrite the persisted
``job-applications`` document.
"""

import re
import uuid
from dataclasses import replace
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from .models import Application, ApplicationStatus, DashboardFilters
from ..utils import get_tracker_logger

logger = get_tracker_logger()

ChangeListener = Callable[[List[Application]], None]


def _logo_for(company: str) -> str:
    seed = re.sub(r"[^a-z0-9]+", "", company.lower()) or "company"
    return f"https://picsum.photos/seed/{seed}/100"


def matches_filters(app: Application, filters: Optional[DashboardFilters]) -> bool:
    """True when ``app`` satisfies every non-empty predicate in ``filters``."""
    if filters is None:
        return True
    if filters.status and app.status.value != filters.status:
        return False
    company = filters.company.strip().lower()
    if company and company not in app.company.lower():
        return False
    location = filters.location.strip().lower()
    if location and location not in app.location.lower():
        return False
    return True


def filter_applications(
    applications: Iterable[Application], filters: Optional[DashboardFilters]
) -> List[Application]:
    """Return a fresh list of the matching applications, order preserved."""
    return [app for app in applications if matches_filters(app, filters)]


class ApplicationRepository:
    """Ordered, most-recent-first collection of applications."""

    def __init__(
        self,
        applications: Optional[Iterable[Application]] = None,
        on_change: Optional[ChangeListener] = None,
    ):
        self._applications: List[Application] = list(applications or [])
        self._on_change = on_change

    def __len__(self) -> int:
        return len(self._applications)

    def __iter__(self) -> Iterator[Application]:
        return iter(list(self._applications))

    def all(self) -> List[Application]:
        return list(self._applications)

    def get(self, app_id: str) -> Optional[Application]:
        for app in self._applications:
            if app.id == app_id:
                return app
        return None

    def add(self, job_data: Dict[str, Any]) -> Application:
        """Create a Discovery-stage application from raw job fields.

        The new record goes to the head of the list. ``job_data`` is taken
        as-is; unknown keys are ignored and missing ones become empty strings.
        """
        company = job_data.get("company", "") or ""
        app = Application(
            id=uuid.uuid4().hex,
            title=job_data.get("title", "") or "",
            company=company,
            location=job_data.get("location", "") or "",
            description=job_data.get("description", "") or "",
            url=job_data.get("url", "") or "",
            logo=job_data.get("logo") or _logo_for(company),
            status=ApplicationStatus.DISCOVERY,
        )
        self._applications.insert(0, app)
        logger.info(f"Added application: {app.title} at {app.company}", application_id=app.id)
        self._notify()
        return app

    def update(self, updated_app: Application) -> bool:
        """Replace the record with the same id; unknown ids are ignored."""
        for index, app in enumerate(self._applications):
            if app.id == updated_app.id:
                self._applications[index] = updated_app
                self._notify()
                return True
        logger.debug("Ignoring update for unknown application", application_id=updated_app.id)
        return False

    def set_status(self, app_id: str, status: ApplicationStatus) -> bool:
        app = self.get(app_id)
        if app is None:
            logger.debug("Ignoring status change for unknown application", application_id=app_id)
            return False
        if app.status == status:
            return True
        logger.info(f"Moved application to {status.value}", application_id=app_id)
        return self.update(replace(app, status=status))

    def filter(self, filters: Optional[DashboardFilters] = None) -> List[Application]:
        return filter_applications(self._applications, filters)

    def find_by_url(self, url: str) -> Optional[Application]:
        if not url:
            return None
        for app in self._applications:
            if app.url == url:
                return app
        return None

    def has_url(self, url: str) -> bool:
        return self.find_by_url(url) is not None

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.all())
