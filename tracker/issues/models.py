"""
Issue Tracker Data Models

Defines users, issues and projects plus the enumerations they share.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, List, Dict, Any, Set, Tuple, FrozenSet

from tracker.utils.time import utcnow


class _LookupEnum(Enum):
    """Enum that can be parsed from free text by name or value."""

    @classmethod
    def from_str(cls, value: Any) -> "_LookupEnum":
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower().replace(" ", "_").replace("-", "_")
        for member in cls:
            if text in (member.value, member.name.lower()):
                return member
        raise ValueError(f"Unknown {cls.__name__}: {value!r}")


class Role(_LookupEnum):
    """User roles. Only managers may approve issues."""
    QA = "qa"
    DEV = "dev"
    MANAGER = "manager"

    @property
    def can_approve(self) -> bool:
        return self is Role.MANAGER


class Severity(_LookupEnum):
    """Issue severity levels, in canonical report order."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Status(_LookupEnum):
    """Issue lifecycle status."""
    NEW = "new"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class IssueKind(_LookupEnum):
    """Issue variants. The kind only changes how an issue is labelled."""
    BUG = "bug"
    TASK = "task"

    @property
    def label(self) -> str:
        return self.name

    @classmethod
    def from_str(cls, value: Any) -> "IssueKind":
        # Anything that is not "task" is a bug, including None
        if isinstance(value, cls):
            return value
        if value is not None and str(value).strip().lower() == "task":
            return cls.TASK
        return cls.BUG


class _ImmutableId:
    """Rejects reassignment of the identity field once it has been set."""

    _id_field = "id"

    def __setattr__(self, name: str, value: Any) -> None:
        if name == self._id_field and name in self.__dict__:
            raise AttributeError(f"{type(self).__name__}.{name} is immutable")
        super().__setattr__(name, value)


@dataclass(eq=False)
class User(_ImmutableId):
    """
    A tracker user.

    Attributes:
        id: Unique user identifier (immutable)
        name: Display name
        role: QA, DEV or MANAGER
        email: Contact address
        bio: Free-text biography
    """

    id: str
    name: str
    role: Role
    email: str
    bio: str = ""

    @property
    def is_manager(self) -> bool:
        return self.role.can_approve

    def approve_issue(self, issue: "Issue") -> bool:
        """
        Approve an issue for work.

        Managers pull CRITICAL issues back into IN_PROGRESS whatever their
        current status. Every other combination is refused without change.

        Returns:
            True if the issue was approved
        """
        if not self.role.can_approve:
            return False
        if issue.severity is not Severity.CRITICAL:
            return False
        issue.update_status(Status.IN_PROGRESS)
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "role": self.role.value,
            "email": self.email,
            "bio": self.bio,
        }

    def __str__(self) -> str:
        return f"{self.name} ({self.role.name})"


@dataclass(eq=False)
class Issue(_ImmutableId):
    """
    A bug or task tracked in the registry.

    Attributes:
        issue_id: Unique issue identifier (immutable)
        title: Short summary
        description: Detailed description
        severity: LOW/MEDIUM/HIGH/CRITICAL
        kind: BUG or TASK
        status: Current status, starts at NEW
        assignee: User working on the issue (not owned)
        created_at: Creation timestamp
    """

    _id_field = "issue_id"

    issue_id: str
    title: str
    description: str
    severity: Severity
    kind: IssueKind = IssueKind.BUG
    status: Status = Status.NEW
    assignee: Optional[User] = None
    created_at: datetime = field(default_factory=utcnow)
    _attachments: List[str] = field(default_factory=list, init=False, repr=False)
    _tags: Set[str] = field(default_factory=set, init=False, repr=False)

    @property
    def label(self) -> str:
        return self.kind.label

    @property
    def attachments(self) -> Tuple[str, ...]:
        return tuple(self._attachments)

    @property
    def tags(self) -> FrozenSet[str]:
        return frozenset(self._tags)

    def update_status(self, new_status: Status) -> None:
        """Set the status. Any status may follow any other."""
        self.status = new_status

    def assign_to(self, user: Optional[User]) -> None:
        self.assignee = user

    def add_attachment(self, attachment: str) -> None:
        self._attachments.append(attachment)

    def add_tag(self, tag: str) -> None:
        self._tags.add(tag)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.issue_id,
            "kind": self.kind.value,
            "title": self.title,
            "description": self.description,
            "severity": self.severity.value,
            "status": self.status.value,
            "assignee": self.assignee.id if self.assignee else None,
            "attachments": list(self._attachments),
            "tags": sorted(self._tags),
            "created_at": self.created_at.isoformat(),
        }


@dataclass(eq=False)
class Project(_ImmutableId):
    """
    A project with a team and a backlog.

    Team and backlog hold references into the registries; removing an entry
    here never removes it from the registry.
    """

    _id_field = "project_id"

    project_id: str
    name: str
    repo_url: str
    description: str = ""
    created_at: datetime = field(default_factory=utcnow)
    _backlog: List[Issue] = field(default_factory=list, init=False, repr=False)
    _team: List[User] = field(default_factory=list, init=False, repr=False)

    @property
    def backlog(self) -> Tuple[Issue, ...]:
        return tuple(self._backlog)

    @property
    def team(self) -> Tuple[User, ...]:
        return tuple(self._team)

    def add_issue(self, issue: Issue) -> None:
        self._backlog.append(issue)

    def remove_issue(self, issue: Issue) -> bool:
        if issue in self._backlog:
            self._backlog.remove(issue)
            return True
        return False

    def add_user(self, user: User) -> None:
        self._team.append(user)

    def remove_user(self, user: User) -> bool:
        if user in self._team:
            self._team.remove(user)
            return True
        return False

    def list_by_severity(self, severity: Severity) -> List[Issue]:
        """Backlog issues currently at the given severity, in backlog order."""
        return [i for i in self._backlog if i.severity is severity]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.project_id,
            "name": self.name,
            "repo_url": self.repo_url,
            "description": self.description,
            "created_at": self.created_at.isoformat(),
            "backlog": [i.issue_id for i in self._backlog],
            "team": [u.id for u in self._team],
        }

    def __str__(self) -> str:
        return f"{self.name} [{self.project_id}]"
