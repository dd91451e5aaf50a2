from datetime import datetime

from pydantic import BaseModel, ConfigDict


class BasicUser(BaseModel):
    """Model representing the short form of a GitLab user.

    GitLab embeds this form wherever another resource refers to a user
    (authors, assignees, reviewers, mergers).

    Attributes:
        id: Numeric user ID
        username: Login name
        name: Display name
        state: Account state, e.g. "active" or "blocked"
        locked: Whether the account is locked
        created_at: When the account was created
        avatar_url: URL of the user's avatar
        web_url: URL of the user's profile page
    """

    model_config = ConfigDict(frozen=True)

    id: int
    username: str
    name: str | None = None
    state: str | None = None
    locked: bool | None = None
    created_at: datetime | None = None
    avatar_url: str | None = None
    web_url: str | None = None


class IssueReferences(BaseModel):
    """References to an issue or merge request in short, relative and full form."""

    model_config = ConfigDict(frozen=True)

    short: str | None = None
    relative: str | None = None
    full: str | None = None


class TimeStats(BaseModel):
    """Time tracking stats of an issue or merge request.

    Attributes:
        human_time_estimate: Estimate formatted as e.g. "3h 30m"
        human_total_time_spent: Time spent formatted as e.g. "1h"
        time_estimate: Estimate in seconds
        total_time_spent: Time spent in seconds
    """

    model_config = ConfigDict(frozen=True)

    human_time_estimate: str | None = None
    human_total_time_spent: str | None = None
    time_estimate: int | None = None
    total_time_spent: int | None = None


class TasksCompletionStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int | None = None
    completed_count: int | None = None


class Milestone(BaseModel):
    """Short form of a milestone as embedded in a merge request."""

    model_config = ConfigDict(frozen=True)

    id: int
    iid: int | None = None
    project_id: int | None = None
    group_id: int | None = None
    title: str | None = None
    description: str | None = None
    state: str | None = None
    due_date: str | None = None
    start_date: str | None = None
    web_url: str | None = None
