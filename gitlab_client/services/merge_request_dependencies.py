from gitlab_client.client import GitLabClient
from gitlab_client.models.merge_request_dependency import (
    CreateMergeRequestDependencyOptions,
    MergeRequestDependency,
)
from gitlab_client.request_options import RequestOptionFunc
from gitlab_client.schemas.response import Response
from gitlab_client.utils.ids import ProjectID, parse_id, parse_iid, path_escape


class MergeRequestDependenciesService:
    """Service for the merge request dependencies API.

    A dependency records that one merge request (the blocking one) has to
    be merged before another one can be. All methods are a single request
    through the injected client. Errors raised by the client are not
    caught here.

    GitLab API docs:
    https://docs.gitlab.com/ee/api/merge_requests.html#get-merge-request-dependencies
    """

    def __init__(self, client: GitLabClient) -> None:
        self.client = client

    def _blocks_path(self, pid: ProjectID, merge_request: int) -> str:
        project = path_escape(parse_id(pid))
        iid = parse_iid(merge_request)
        return f"projects/{project}/merge_requests/{iid:d}/blocks"

    def create_merge_request_dependency(
        self,
        pid: ProjectID,
        merge_request: int,
        opts: CreateMergeRequestDependencyOptions,
        *options: RequestOptionFunc,
    ) -> Response:
        """Make a merge request depend on another one.

        Args:
            pid: Numeric project ID or namespaced project path
            merge_request: IID of the merge request to block
            opts: Options naming the blocking merge request
            options: Per-call request options

        Returns:
            Metadata of the response

        Raises:
            InvalidIDError: If pid or a merge request number is invalid; no
                request is sent
            GitLabError: If the request fails
        """
        path = self._blocks_path(pid, merge_request)
        request = self.client.new_request("POST", path, opts, options)
        _, response = self.client.do(request, None)
        return response

    def delete_merge_request_dependency(
        self,
        pid: ProjectID,
        merge_request: int,
        blocking_merge_request: int,
        *options: RequestOptionFunc,
    ) -> Response:
        """Remove a dependency between two merge requests.

        Args:
            pid: Numeric project ID or namespaced project path
            merge_request: IID of the blocked merge request
            blocking_merge_request: Number of the blocking merge request
            options: Per-call request options

        Returns:
            Metadata of the response

        Raises:
            InvalidIDError: If pid or a merge request number is invalid; no
                request is sent
            GitLabError: If the request fails
        """
        blocks_path = self._blocks_path(pid, merge_request)
        path = f"{blocks_path}/{parse_iid(blocking_merge_request):d}"
        request = self.client.new_request("DELETE", path, None, options)
        _, response = self.client.do(request, None)
        return response

    def get_merge_request_dependencies(
        self,
        pid: ProjectID,
        merge_request: int,
        *options: RequestOptionFunc,
    ) -> tuple[list[MergeRequestDependency], Response]:
        """Get the merge requests blocking a merge request.

        Args:
            pid: Numeric project ID or namespaced project path
            merge_request: IID of the blocked merge request
            options: Per-call request options

        Returns:
            The dependencies in the order GitLab returns them, and the
            response metadata

        Raises:
            InvalidIDError: If pid or a merge request number is invalid; no
                request is sent
            GitLabError: If the request fails or the body cannot be decoded
        """
        path = self._blocks_path(pid, merge_request)
        request = self.client.new_request("GET", path, None, options)
        dependencies, response = self.client.do(
            request, list[MergeRequestDependency]
        )
        return dependencies, response
