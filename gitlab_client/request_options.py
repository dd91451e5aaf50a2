from typing import Callable, TypeAlias

import httpx

from gitlab_client.utils.ids import ProjectID, parse_id

RequestOptionFunc: TypeAlias = Callable[[httpx.Request], None]


def with_header(key: str, value: str) -> RequestOptionFunc:
    """Set a single header on the request."""

    def option(request: httpx.Request) -> None:
        request.headers[key] = value

    return option


def with_sudo(uid: ProjectID) -> RequestOptionFunc:
    """Run the request as another user.

    Only administrators can use sudo.

    Args:
        uid: Numeric user ID or username

    Returns:
        Option setting the Sudo header

    Raises:
        InvalidIDError: If uid is neither an int nor a str
    """
    user = parse_id(uid)

    def option(request: httpx.Request) -> None:
        request.headers["Sudo"] = user

    return option


def with_token(token: str) -> RequestOptionFunc:
    """Authenticate this request with a token other than the client's."""

    def option(request: httpx.Request) -> None:
        request.headers["PRIVATE-TOKEN"] = token

    return option


def with_timeout(seconds: float) -> RequestOptionFunc:
    """Override the client's timeout for this request.

    The request is abandoned with a TransportError once the timeout
    expires.
    """
    timeout = httpx.Timeout(seconds)

    def option(request: httpx.Request) -> None:
        request.extensions["timeout"] = timeout.as_dict()

    return option
