"""
Console rendering for tracker reports.
"""

from typing import Dict, List

from rich.table import Table

from tracker.issues import IssueDescriptor, Severity, SeverityReportRow

SEVERITY_STYLES = {
    Severity.LOW: "green",
    Severity.MEDIUM: "yellow",
    Severity.HIGH: "red",
    Severity.CRITICAL: "bold red",
}


def dashboard_table(project_name: str, counts: Dict[Severity, int]) -> Table:
    table = Table(title=f"Project: {project_name}")
    table.add_column("Severity")
    table.add_column("Issues", justify="right")
    for severity, count in counts.items():
        table.add_row(f"[{SEVERITY_STYLES[severity]}]{severity.name}[/]", str(count))
    return table


def report_table(rows: List[SeverityReportRow]) -> Table:
    table = Table(title="Severity Report")
    table.add_column("Issue")
    table.add_column("Title")
    table.add_column("Severity")
    table.add_column("Status")
    for row in rows:
        table.add_row(
            row.issue_id,
            row.title,
            f"[{SEVERITY_STYLES[row.severity]}]{row.severity.name}[/]",
            row.status.name,
        )
    return table


def issues_table(descriptors: List[IssueDescriptor]) -> Table:
    table = Table(title="All Issues")
    table.add_column("Type", style="cyan")
    table.add_column("Issue")
    table.add_column("Title")
    table.add_column("Status")
    table.add_column("Severity")
    for item in descriptors:
        table.add_row(
            item.label,
            item.issue_id,
            item.title,
            item.status.name,
            f"[{SEVERITY_STYLES[item.severity]}]{item.severity.name}[/]",
        )
    return table
