from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gitlab_client.schemas.response import Response


class GitLabError(Exception):
    """Base exception for GitLab client errors."""

    pass


class InvalidIDError(GitLabError, ValueError):
    """Exception raised when an identifier cannot be used in a request path."""

    pass


class TransportError(GitLabError):
    """Exception raised when a request never got a reply (connection, timeout)."""

    pass


class ErrorResponse(GitLabError):
    """Exception raised when GitLab answers with a non-2xx status.

    Attributes:
        response: The response metadata of the failed call
        message: The error message reported by GitLab
    """

    def __init__(self, response: "Response", message: str) -> None:
        self.response = response
        self.message = message
        request = response.http_response.request
        super().__init__(
            f"{request.method} {request.url}: {response.status_code} {message}"
        )

    @property
    def status_code(self) -> int:
        return self.response.status_code


class ResponseDecodeError(GitLabError):
    """Exception raised when a response body does not match the expected schema.

    Attributes:
        response: The response metadata of the call
    """

    def __init__(self, response: "Response", detail: Any) -> None:
        self.response = response
        super().__init__(f"failed to decode response body: {detail}")
