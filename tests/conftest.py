from typing import Any, Callable, Generator

import httpx
import pytest

from gitlab_client.client import GitLabClient
from gitlab_client.services.merge_request_dependencies import (
    MergeRequestDependenciesService,
)

TEST_BASE_URL = "https://gitlab.example.com"
TEST_TOKEN = "glpat-test-token"

Handler = Callable[[httpx.Request], httpx.Response]


def blocking_merge_request_payload(mr_id: int, iid: int, title: str) -> dict[str, Any]:
    return {
        "id": mr_id,
        "iid": iid,
        "project_id": 7,
        "title": title,
        "description": "",
        "state": "opened",
        "created_at": "2024-05-01T10:00:00.000Z",
        "updated_at": "2024-05-02T11:30:00.000Z",
        "target_branch": "main",
        "source_branch": f"feature-{iid}",
        "upvotes": 0,
        "downvotes": 0,
        "author": {
            "id": 1,
            "username": "alice",
            "name": "Alice",
            "state": "active",
            "locked": False,
            "avatar_url": "https://gitlab.example.com/avatar/1.png",
            "web_url": "https://gitlab.example.com/alice",
        },
        "assignee": None,
        "assignees": [],
        "reviewers": [],
        "source_project_id": 7,
        "target_project_id": 7,
        "labels": ["backend"],
        "draft": False,
        "work_in_progress": False,
        "milestone": None,
        "merge_when_pipeline_succeeds": False,
        "merge_status": "can_be_merged",
        "detailed_merge_status": "mergeable",
        "sha": "a1b2c3d4",
        "merge_commit_sha": None,
        "squash_commit_sha": None,
        "merged_by": None,
        "merged_at": None,
        "closed_by": None,
        "closed_at": None,
        "user_notes_count": 3,
        "should_remove_source_branch": None,
        "force_remove_source_branch": True,
        "discussion_locked": None,
        "web_url": f"https://gitlab.example.com/group/project/-/merge_requests/{iid}",
        "reference": f"!{iid}",
        "references": {
            "short": f"!{iid}",
            "relative": f"!{iid}",
            "full": f"group/project!{iid}",
        },
        "time_stats": {
            "time_estimate": 0,
            "total_time_spent": 0,
            "human_time_estimate": None,
            "human_total_time_spent": None,
        },
        "squash": False,
        "squash_on_merge": False,
        "task_completion_status": {"count": 0, "completed_count": 0},
        "has_conflicts": False,
        "blocking_discussions_resolved": True,
        "imported": False,
        "imported_from": "none",
    }


@pytest.fixture
def dependencies_payload() -> list[dict[str, Any]]:
    return [
        {
            "id": 101,
            "project_id": 7,
            "blocking_merge_request": blocking_merge_request_payload(
                501, 12, "Add database migration"
            ),
        },
        {
            "id": 102,
            "project_id": 7,
            "blocking_merge_request": blocking_merge_request_payload(
                502, 13, "Update API schema"
            ),
        },
    ]


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_client(
    recorded_requests: list[httpx.Request],
) -> Generator[Callable[[Handler], GitLabClient], None, None]:
    clients: list[GitLabClient] = []

    def factory(handler: Handler) -> GitLabClient:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        client = GitLabClient(
            base_url=TEST_BASE_URL,
            token=TEST_TOKEN,
            transport=httpx.MockTransport(recording_handler),
        )
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()


@pytest.fixture
def gitlab_client(
    make_client: Callable[[Handler], GitLabClient],
    dependencies_payload: list[dict[str, Any]],
) -> GitLabClient:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "GET":
            return httpx.Response(200, json=dependencies_payload)
        if request.method == "POST":
            return httpx.Response(201)
        return httpx.Response(204)

    return make_client(handler)


@pytest.fixture
def merge_request_dependencies_service(
    gitlab_client: GitLabClient,
) -> MergeRequestDependenciesService:
    return MergeRequestDependenciesService(gitlab_client)
