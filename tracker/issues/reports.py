"""
Issue Reports

Read-only aggregations over the tracker registries. Nothing here mutates
state; unknown project ids give empty results.
"""

from dataclasses import dataclass, asdict
from typing import List, Dict, Any

from .models import Severity, Status
from .service import TrackerService


@dataclass(frozen=True)
class SeverityReportRow:
    """One backlog entry in a project severity report."""
    issue_id: str
    title: str
    severity: Severity
    status: Status

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["severity"] = self.severity.value
        data["status"] = self.status.value
        return data

    def render(self) -> str:
        return f"{self.issue_id} {self.title} {self.severity.name} {self.status.name}"


@dataclass(frozen=True)
class IssueDescriptor:
    """Display descriptor for one issue in the global listing."""
    label: str
    issue_id: str
    title: str
    status: Status
    severity: Severity

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        data["severity"] = self.severity.value
        return data

    def render(self) -> str:
        return f"[{self.label}] {self.issue_id} {self.title} {self.status.name} {self.severity.name}"


def dashboard_summary(service: TrackerService, project_id: str) -> Dict[Severity, int]:
    """
    Count a project's backlog issues per severity.

    Every severity appears, in canonical order, even when its count is zero.
    An unknown project yields an empty dict.
    """
    project = service.get_project(project_id)
    if not project:
        return {}

    counts = {severity: 0 for severity in Severity}
    for issue in project.backlog:
        counts[issue.severity] += 1
    return counts


def severity_report(service: TrackerService, project_id: str) -> List[SeverityReportRow]:
    """Flat (id, title, severity, status) listing of a project's backlog."""
    project = service.get_project(project_id)
    if not project:
        return []

    return [
        SeverityReportRow(
            issue_id=issue.issue_id,
            title=issue.title,
            severity=issue.severity,
            status=issue.status,
        )
        for issue in project.backlog
    ]


def list_all_issues(service: TrackerService) -> List[IssueDescriptor]:
    """Descriptors for every registered issue, in registry order."""
    return [
        IssueDescriptor(
            label=issue.label,
            issue_id=issue.issue_id,
            title=issue.title,
            status=issue.status,
            severity=issue.severity,
        )
        for issue in service.issues()
    ]
