"""Derived board views: filtering, kanban columns, tab and selection focus."""

from collections import OrderedDict
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence

from .models import STATUS_COLUMNS, Application, ApplicationStatus, DashboardFilters
from .repository import filter_applications


class Tab(Enum):
    DASHBOARD = "dashboard"
    RESUME = "resume"
    PREFERENCES = "preferences"
    GUIDE = "guide"


@dataclass
class ViewState:
    """Projection state for the dashboard. Holds no application data."""
    filters: DashboardFilters = field(default_factory=DashboardFilters)
    active_tab: Tab = Tab.DASHBOARD
    selected_application_id: Optional[str] = None

    def filtered(self, applications: Iterable[Application]) -> List[Application]:
        return filter_applications(applications, self.filters)

    def board_columns(
        self, applications: Iterable[Application]
    ) -> "OrderedDict[ApplicationStatus, List[Application]]":
        """Group the filtered applications into one column per status."""
        columns: "OrderedDict[ApplicationStatus, List[Application]]" = OrderedDict(
            (status, []) for status in STATUS_COLUMNS
        )
        for app in self.filtered(applications):
            columns[app.status].append(app)
        return columns

    def status_counts(self, applications: Iterable[Application]) -> Dict[str, int]:
        """Per-status totals over the filtered view."""
        return {status.value: len(apps) for status, apps in self.board_columns(applications).items()}

    def set_filters(self, filters: DashboardFilters) -> None:
        self.filters = filters

    def reset_filters(self) -> None:
        self.filters = DashboardFilters()

    def select(self, app_id: str) -> None:
        self.selected_application_id = app_id

    def clear_selection(self) -> None:
        self.selected_application_id = None

    def selected(self, applications: Sequence[Application]) -> Optional[Application]:
        """The focused record, looked up fresh so edits are always visible."""
        if self.selected_application_id is None:
            return None
        for app in applications:
            if app.id == self.selected_application_id:
                return app
        return None
