#!/usr/bin/env python3
"""
Issue Tracker Demo Script

Walks through the sample scenario:
1. Team and project setup
2. Filing a bug and a task
3. Attaching, tagging, assigning and moving issues
4. Dashboard, severity report and issue listing
5. Manager approval of the critical bug
"""

from rich.console import Console
from rich.panel import Panel

from tracker.issues import (
    Role,
    Severity,
    Status,
    TrackerService,
    dashboard_summary,
    list_all_issues,
    severity_report,
)
from tracker.render import dashboard_table, issues_table, report_table


def build_sample_tracker() -> TrackerService:
    """Create the sample team, project and issues, up to the reports."""
    service = TrackerService()

    alice = service.create_user("U1", "Alice", Role.QA, "alice@example.com")
    bob = service.create_user("U2", "Bob", Role.DEV, "bob@example.com")
    carol = service.create_user("M1", "Carol", Role.MANAGER, "carol@example.com")

    service.create_project("P1", "Alpha", "https://repo/alpha")
    for user in (alice, bob, carol):
        service.add_user_to_project("P1", user)

    login_bug = service.create_issue(
        "I1", "NullPointer in Login", "NPE when user logs in", Severity.CRITICAL, "bug"
    )
    ui_task = service.create_issue(
        "I2", "UI alignment", "Button misaligned on mobile", Severity.LOW, "task"
    )
    service.add_issue_to_project("P1", login_bug)
    service.add_issue_to_project("P1", ui_task)

    service.attach_to_issue("I1", "screenshot.png")
    service.tag_issue("I1", "login")
    service.assign_issue("I1", "U2")
    service.change_status("I2", Status.IN_PROGRESS)

    return service


def print_reports(console: Console, service: TrackerService, project_id: str) -> None:
    project = service.get_project(project_id)
    if project:
        console.print(dashboard_table(project.name, dashboard_summary(service, project_id)))
        console.print(report_table(severity_report(service, project_id)))
    console.print(issues_table(list_all_issues(service)))


def run_demo(console: Console = None) -> TrackerService:
    """Run the full walkthrough and return the final tracker state."""
    console = console or Console()

    console.print(Panel.fit(
        "[bold blue]Issue Tracker Demo[/bold blue]\n"
        "[dim]Users, projects, issues and approvals[/dim]",
        border_style="blue"
    ))
    console.print()

    service = build_sample_tracker()

    console.print("[bold cyan]━━━ Project state after triage ━━━[/bold cyan]\n")
    print_reports(console, service, "P1")

    console.print("\n[bold cyan]━━━ Manager approval ━━━[/bold cyan]\n")
    manager = service.get_user("M1")
    issue = service.get_issue("I1")
    approved = manager.approve_issue(issue)
    console.print(f"{manager} approved {issue.issue_id}: [green]{approved}[/green]\n")

    console.print(issues_table(list_all_issues(service)))
    return service


if __name__ == "__main__":
    run_demo()
