"""
Issue Tracking Core

Provides users, projects and issues, the status workflow, role-based
approval and backlog reports.
"""

from .models import Issue, IssueKind, Project, Role, Severity, Status, User
from .service import TrackerService
from .reports import (
    IssueDescriptor,
    SeverityReportRow,
    dashboard_summary,
    list_all_issues,
    severity_report,
)
from .loader import SeedLoader

__all__ = [
    "Issue",
    "IssueKind",
    "Project",
    "Role",
    "Severity",
    "Status",
    "User",
    "TrackerService",
    "IssueDescriptor",
    "SeverityReportRow",
    "dashboard_summary",
    "list_all_issues",
    "severity_report",
    "SeedLoader",
]
