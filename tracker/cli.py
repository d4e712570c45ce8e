"""
Issue Tracker - CLI Interface

Command-line interface for browsing tracker reports.
"""

import json

import click
from rich.console import Console

from tracker import __version__
from tracker.config import SEED_FILE
from tracker.demo import run_demo
from tracker.issues import (
    SeedLoader,
    TrackerService,
    dashboard_summary,
    list_all_issues,
    severity_report,
)
from tracker.logging_config import setup_logging
from tracker.render import dashboard_table, issues_table, report_table


console = Console()

seed_option = click.option(
    "--seed", "-s",
    type=click.Path(dir_okay=False),
    default=str(SEED_FILE),
    show_default=True,
    help="YAML seed file to load",
)
json_option = click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")


def _load(seed: str) -> TrackerService:
    try:
        return SeedLoader().load_file(seed)
    except Exception as e:
        console.print(f"[red]Failed to load seed data: {e}[/red]")
        raise SystemExit(1)


def _require_project(service: TrackerService, project_id: str):
    project = service.get_project(project_id)
    if not project:
        console.print(f"[red]Project {project_id} not found[/red]")
        raise SystemExit(1)
    return project


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", "-l", default=None, help="Logging level (debug, info, warning, ...)")
def cli(log_level: str):
    """Issue Tracker - users, projects and issues in memory."""
    setup_logging(log_level)


@cli.command()
def demo():
    """Run the scripted sample scenario."""
    run_demo(console)


@cli.command()
@seed_option
@json_option
@click.argument("project_id")
def dashboard(seed: str, as_json: bool, project_id: str):
    """Issue counts per severity for a project."""
    service = _load(seed)
    project = _require_project(service, project_id)
    counts = dashboard_summary(service, project_id)

    if as_json:
        click.echo(json.dumps({s.value: n for s, n in counts.items()}, indent=2))
    else:
        console.print(dashboard_table(project.name, counts))


@cli.command()
@seed_option
@json_option
@click.argument("project_id")
def report(seed: str, as_json: bool, project_id: str):
    """Severity and status of every issue in a project backlog."""
    service = _load(seed)
    _require_project(service, project_id)
    rows = severity_report(service, project_id)

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in rows], indent=2))
    else:
        console.print(report_table(rows))


@cli.command()
@seed_option
@json_option
def issues(seed: str, as_json: bool):
    """List every issue in the tracker."""
    service = _load(seed)
    descriptors = list_all_issues(service)

    if as_json:
        click.echo(json.dumps([d.to_dict() for d in descriptors], indent=2))
    else:
        console.print(issues_table(descriptors))


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
