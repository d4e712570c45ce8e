"""
Seed Loader

Populates a TrackerService from a YAML seed file.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from tracker.config import SEED_FILE
from .models import Role, Severity, Status
from .service import TrackerService

logger = logging.getLogger(__name__)


class SeedLoader:
    """
    Loads users, projects and issues from YAML into a TrackerService.

    Everything is applied through the service operations, so duplicate ids
    overwrite and references to unknown ids are skipped exactly as they would
    be for any other caller.

    Example seed:
        users:
          - {id: U1, name: Alice, role: qa, email: alice@example.com}
        issues:
          - {id: I1, title: Crash, description: ..., severity: critical,
             kind: bug, tags: [login], assignee: U1}
        projects:
          - {id: P1, name: Alpha, repo_url: https://repo/alpha,
             team: [U1], backlog: [I1]}
    """

    def __init__(self, service: Optional[TrackerService] = None):
        self.service = service or TrackerService()

    def load_file(self, path: Optional[str] = None) -> TrackerService:
        """
        Load a seed file.

        Args:
            path: YAML file path (defaults to the configured seed file)

        Returns:
            The populated service
        """
        seed_path = Path(path) if path else SEED_FILE
        try:
            with open(seed_path, "r") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to read seed file {seed_path}: {e}")
            raise

        self.load_data(data or {})
        logger.info(f"Loaded seed data from {seed_path}")
        return self.service

    def load_data(self, data: Dict[str, Any]) -> TrackerService:
        """Apply an already-parsed seed document."""
        if not isinstance(data, dict):
            raise ValueError(f"Seed document must be a mapping, got {type(data).__name__}")

        for user_data in (data.get("users") or []):
            self._load_user(user_data)

        # Issues before projects so backlogs can reference them
        for issue_data in (data.get("issues") or []):
            self._load_issue(issue_data)

        for project_data in (data.get("projects") or []):
            self._load_project(project_data)

        return self.service

    def _load_user(self, data: Dict[str, Any]) -> None:
        user = self.service.create_user(
            data["id"],
            data.get("name", data["id"]),
            Role.from_str(data.get("role", "dev")),
            data.get("email", ""),
        )
        user.bio = data.get("bio", "")

    def _load_issue(self, data: Dict[str, Any]) -> None:
        issue_id = data["id"]
        self.service.create_issue(
            issue_id,
            data.get("title", issue_id),
            data.get("description", ""),
            Severity.from_str(data.get("severity", "medium")),
            data.get("kind"),
        )

        for attachment in (data.get("attachments") or []):
            self.service.attach_to_issue(issue_id, attachment)
        for tag in (data.get("tags") or []):
            self.service.tag_issue(issue_id, tag)

        # Assignment moves the issue to IN_PROGRESS, so an explicit status wins
        if data.get("assignee"):
            self.service.assign_issue(issue_id, data["assignee"])
        if data.get("status"):
            self.service.change_status(issue_id, Status.from_str(data["status"]))

    def _load_project(self, data: Dict[str, Any]) -> None:
        project_id = data["id"]
        project = self.service.create_project(
            project_id,
            data.get("name", project_id),
            data.get("repo_url", ""),
        )
        project.description = data.get("description", "")

        for user_id in (data.get("team") or []):
            user = self.service.get_user(user_id)
            if user:
                self.service.add_user_to_project(project_id, user)
            else:
                logger.warning(f"Seed team member {user_id} not found for project {project_id}")

        for issue_id in (data.get("backlog") or []):
            issue = self.service.get_issue(issue_id)
            if issue:
                self.service.add_issue_to_project(project_id, issue)
            else:
                logger.warning(f"Seed backlog issue {issue_id} not found for project {project_id}")
