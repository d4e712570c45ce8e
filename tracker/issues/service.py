"""
Tracker Service - Registries and Relationship Operations

Owns the user, project and issue registries and every operation that links
entities together.
"""

import logging
import threading
from typing import List, Optional, Dict

from .models import Issue, IssueKind, Project, Role, Severity, Status, User

logger = logging.getLogger(__name__)


class TrackerService:
    """
    In-memory aggregate root for users, projects and issues.

    Lookups of unknown ids are never errors: commands return False or do
    nothing, queries return empty results. Creating an entity with an id
    that already exists replaces the previous entry.

    Example:
        service = TrackerService()

        dev = service.create_user("U2", "Bob", Role.DEV, "bob@example.com")
        issue = service.create_issue("I1", "NPE in login", "...", Severity.CRITICAL)

        service.assign_issue("I1", "U2")   # True, issue now IN_PROGRESS
    """

    def __init__(self):
        self._users: Dict[str, User] = {}
        self._projects: Dict[str, Project] = {}
        self._issues: Dict[str, Issue] = {}
        # One lock for all three registries keeps multi-step updates atomic
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def create_user(self, user_id: str, name: str, role: Role, email: str) -> User:
        """
        Create a user and store it under user_id (last write wins).

        Args:
            user_id: Unique user identifier
            name: Display name
            role: QA, DEV or MANAGER
            email: Contact address

        Returns:
            Created User
        """
        user = User(id=user_id, name=name, role=role, email=email)
        with self._lock:
            if user_id in self._users:
                logger.debug(f"Replacing existing user {user_id}")
            self._users[user_id] = user
        logger.info(f"Created user {user_id}: {user}")
        return user

    def create_project(self, project_id: str, name: str, repo_url: str) -> Project:
        """Create a project and store it under project_id (last write wins)."""
        project = Project(project_id=project_id, name=name, repo_url=repo_url)
        with self._lock:
            if project_id in self._projects:
                logger.debug(f"Replacing existing project {project_id}")
            self._projects[project_id] = project
        logger.info(f"Created project {project}")
        return project

    def create_issue(
        self,
        issue_id: str,
        title: str,
        description: str,
        severity: Severity,
        kind: Optional[str] = None,
    ) -> Issue:
        """
        Create an issue and store it under issue_id (last write wins).

        Args:
            issue_id: Unique issue identifier
            title: Short summary
            description: Detailed description
            severity: Initial severity
            kind: "task" (any case) for a task, anything else for a bug

        Returns:
            Created Issue with status NEW
        """
        issue = Issue(
            issue_id=issue_id,
            title=title,
            description=description,
            severity=severity,
            kind=IssueKind.from_str(kind),
        )
        with self._lock:
            if issue_id in self._issues:
                logger.debug(f"Replacing existing issue {issue_id}")
            self._issues[issue_id] = issue
        logger.info(f"Created {issue.label.lower()} {issue_id}: {title} (severity={severity.value})")
        return issue

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_user(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def get_project(self, project_id: str) -> Optional[Project]:
        with self._lock:
            return self._projects.get(project_id)

    def get_issue(self, issue_id: str) -> Optional[Issue]:
        with self._lock:
            return self._issues.get(issue_id)

    def users(self) -> List[User]:
        with self._lock:
            return list(self._users.values())

    def projects(self) -> List[Project]:
        with self._lock:
            return list(self._projects.values())

    def issues(self) -> List[Issue]:
        with self._lock:
            return list(self._issues.values())

    # ------------------------------------------------------------------
    # Issue relationships
    # ------------------------------------------------------------------

    def attach_to_issue(self, issue_id: str, attachment: str) -> None:
        with self._lock:
            issue = self._issues.get(issue_id)
            if not issue:
                logger.warning(f"Issue {issue_id} not found, attachment ignored")
                return
            issue.add_attachment(attachment)
        logger.info(f"Attached {attachment} to issue {issue_id}")

    def tag_issue(self, issue_id: str, tag: str) -> None:
        with self._lock:
            issue = self._issues.get(issue_id)
            if not issue:
                logger.warning(f"Issue {issue_id} not found, tag ignored")
                return
            issue.add_tag(tag)
        logger.info(f"Tagged issue {issue_id} with {tag}")

    def assign_issue(self, issue_id: str, user_id: str) -> bool:
        """
        Assign an issue to a user and move it to IN_PROGRESS.

        Both ids must resolve; otherwise nothing changes.

        Returns:
            True if the issue was assigned
        """
        with self._lock:
            issue = self._issues.get(issue_id)
            user = self._users.get(user_id)
            if not issue or not user:
                logger.warning(f"Cannot assign issue {issue_id} to {user_id}: not found")
                return False
            issue.assign_to(user)
            issue.update_status(Status.IN_PROGRESS)
        logger.info(f"Assigned issue {issue_id} to {user_id}")
        return True

    def change_status(self, issue_id: str, status: Status) -> bool:
        """
        Set an issue's status. Transitions are not validated.

        Returns:
            True if the issue exists
        """
        with self._lock:
            issue = self._issues.get(issue_id)
            if not issue:
                logger.warning(f"Issue {issue_id} not found")
                return False
            issue.update_status(status)
        logger.info(f"Updated issue {issue_id} status to {status.value}")
        return True

    # ------------------------------------------------------------------
    # Project membership
    # ------------------------------------------------------------------

    def add_issue_to_project(self, project_id: str, issue: Issue) -> None:
        with self._lock:
            project = self._projects.get(project_id)
            if not project:
                logger.warning(f"Project {project_id} not found, issue {issue.issue_id} not added")
                return
            project.add_issue(issue)
        logger.info(f"Added issue {issue.issue_id} to project {project_id}")

    def add_user_to_project(self, project_id: str, user: User) -> None:
        with self._lock:
            project = self._projects.get(project_id)
            if not project:
                logger.warning(f"Project {project_id} not found, user {user.id} not added")
                return
            project.add_user(user)
        logger.info(f"Added user {user.id} to project {project_id}")

    def remove_issue_from_project(self, project_id: str, issue: Issue) -> bool:
        """Drop an issue from a project's backlog. The registry keeps it."""
        with self._lock:
            project = self._projects.get(project_id)
            if not project:
                logger.warning(f"Project {project_id} not found")
                return False
            return project.remove_issue(issue)

    def remove_user_from_project(self, project_id: str, user: User) -> bool:
        """Drop a user from a project's team. The registry keeps it."""
        with self._lock:
            project = self._projects.get(project_id)
            if not project:
                logger.warning(f"Project {project_id} not found")
                return False
            return project.remove_user(user)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_by_severity(self, project_id: str, severity: Severity) -> List[Issue]:
        """Backlog issues of a project at the given severity; empty if unknown."""
        with self._lock:
            project = self._projects.get(project_id)
            if not project:
                return []
            return project.list_by_severity(severity)
