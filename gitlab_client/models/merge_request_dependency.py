from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from gitlab_client.models.common import (
    BasicUser,
    IssueReferences,
    Milestone,
    TasksCompletionStatus,
    TimeStats,
)


class BlockingMergeRequest(BaseModel):
    """Snapshot of a merge request that blocks another one.

    The server fills this in at query time. Any attribute it leaves out of
    the payload stays None, so a missing value can be told apart from a
    zero value.

    Attributes:
        id: Globally unique merge request ID
        iid: Merge request number within its project
        project_id: ID of the project the merge request belongs to
        title: Merge request title
        state: One of "opened", "closed", "locked" or "merged"
        source_branch: Branch the changes come from
        target_branch: Branch the changes are merged into
        author: User who opened the merge request
        labels: Label names attached to the merge request
        detailed_merge_status: Fine-grained mergeability, e.g. "mergeable"
        merged_at: When the merge request was merged, if it was
        web_url: URL of the merge request page
    """

    model_config = ConfigDict(frozen=True)

    # Identity
    id: int | None = None
    iid: int | None = None
    project_id: int | None = None
    source_project_id: int | None = None
    target_project_id: int | None = None
    # Content
    title: str | None = None
    description: str | None = None
    state: str | None = None
    source_branch: str | None = None
    target_branch: str | None = None
    labels: list[str] | None = None
    milestone: Milestone | None = None
    draft: bool | None = None
    work_in_progress: bool | None = None
    imported: bool | None = None
    imported_from: str | None = None
    # Timestamps
    created_at: datetime | None = None
    updated_at: datetime | None = None
    prepared_at: datetime | None = None
    merge_after: datetime | None = None
    merged_at: datetime | None = None
    closed_at: datetime | None = None
    # People
    author: BasicUser | None = None
    assignee: BasicUser | None = None
    assignees: list[BasicUser] | None = None
    reviewers: list[BasicUser] | None = None
    merged_by: BasicUser | None = None
    merge_user: BasicUser | None = None
    closed_by: BasicUser | None = None
    # Review
    upvotes: int | None = None
    downvotes: int | None = None
    user_notes_count: int | None = None
    discussion_locked: bool | None = None
    blocking_discussions_resolved: bool | None = None
    approvals_before_merge: int | None = None
    task_completion_status: TasksCompletionStatus | None = None
    time_stats: TimeStats | None = None
    # Merge
    merge_status: str | None = None
    detailed_merge_status: str | None = None
    merge_when_pipeline_succeeds: bool | None = None
    has_conflicts: bool | None = None
    should_remove_source_branch: bool | None = None
    force_remove_source_branch: bool | None = None
    squash: bool | None = None
    squash_on_merge: bool | None = None
    sha: str | None = None
    merge_commit_sha: str | None = None
    squash_commit_sha: str | None = None
    # References
    reference: str | None = None
    references: IssueReferences | None = None
    web_url: str | None = None


class MergeRequestDependency(BaseModel):
    """Model representing a "blocks" relationship between two merge requests.

    Attributes:
        id: ID of the dependency
        project_id: ID of the project owning the blocked merge request
        blocking_merge_request: Snapshot of the merge request that blocks
    """

    model_config = ConfigDict(frozen=True)

    id: int
    project_id: int | None = None
    blocking_merge_request: BlockingMergeRequest

    def __str__(self) -> str:
        return self.model_dump_json(indent=2, exclude_none=True)


class CreateMergeRequestDependencyOptions(BaseModel):
    """Options accepted when creating a merge request dependency.

    Attributes:
        blocking_merge_request_id: Global ID of the merge request that blocks
    """

    model_config = ConfigDict(frozen=True)

    blocking_merge_request_id: int | None = Field(
        None, description="Global ID of the merge request that blocks"
    )
