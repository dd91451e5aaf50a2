from typing import Any, Iterable, Mapping

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from gitlab_client.config import ClientSettings
from gitlab_client.errors import ErrorResponse, ResponseDecodeError, TransportError
from gitlab_client.logger import get_logger, setup_logging
from gitlab_client.request_options import RequestOptionFunc
from gitlab_client.schemas.response import Response

API_VERSION_PATH = "api/v4/"
USER_AGENT = "gitlab-mr-dependencies"

_BODYLESS_METHODS = {"GET", "HEAD"}


def _api_base_url(base_url: str) -> httpx.URL:
    url = base_url.rstrip("/")
    if not url.endswith("/api/v4"):
        url = f"{url}/{API_VERSION_PATH}"
    else:
        url = f"{url}/"
    return httpx.URL(url)


def _encode_options(opt: BaseModel | Mapping[str, Any] | None) -> dict[str, Any]:
    if opt is None:
        return {}
    if isinstance(opt, BaseModel):
        return opt.model_dump(mode="json", exclude_none=True)
    return {key: value for key, value in opt.items() if value is not None}


def _flatten_error(value: Any) -> str:
    if isinstance(value, Mapping):
        parts = [f"{{{key}: {_flatten_error(value[key])}}}" for key in sorted(value)]
        return ", ".join(parts)
    if isinstance(value, list):
        return "[" + ", ".join(_flatten_error(item) for item in value) + "]"
    return str(value)


def parse_error_message(http_response: httpx.Response) -> str:
    """Extract the error message from a GitLab error body.

    GitLab reports errors as {"message": ...} or {"error": ...}, where the
    message may be a string, a list, or a mapping of field names to lists
    of messages. Anything else is reported as the raw body.

    Args:
        http_response: The failed response

    Returns:
        A single-line message
    """
    try:
        body = http_response.json()
    except ValueError:
        return http_response.text or http_response.reason_phrase
    if isinstance(body, Mapping):
        for key in ("message", "error"):
            if key in body:
                return _flatten_error(body[key])
    return http_response.text


def check_response(response: Response) -> None:
    """Raise ErrorResponse unless the response has a 2xx status."""
    if 200 <= response.status_code < 300:
        return
    raise ErrorResponse(response, parse_error_message(response.http_response))


class GitLabClient:
    """Client for the GitLab REST API.

    Builds requests against the versioned API root, sends them through a
    pooled httpx client, and decodes JSON bodies into pydantic models.
    Services receive an instance of this class and use only new_request
    and do.

    Attributes:
        base_url: The API root, always ending in /api/v4/
        token: Access token sent as PRIVATE-TOKEN, if any
        timeout: Default request timeout in seconds
    """

    def __init__(
        self,
        base_url: str = "https://gitlab.com",
        token: str = "",
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: URL of the GitLab instance
            token: Access token, empty for anonymous access
            timeout: Default request timeout in seconds
            transport: Transport for the internally created httpx client
            http_client: Externally owned httpx client to send requests with
        """
        self.base_url: httpx.URL = _api_base_url(base_url)
        self.token: str = token
        self.timeout: float = timeout
        self._transport = transport
        self._http_client: httpx.Client | None = http_client
        self._owns_http_client: bool = http_client is None
        self._log = get_logger(__name__, base_url=str(self.base_url))

    @classmethod
    def from_settings(cls, settings: ClientSettings | None = None) -> "GitLabClient":
        """Create a client from settings, reading the environment by default.

        Args:
            settings: Settings to use instead of the environment

        Returns:
            A client configured from the settings
        """
        settings = settings or ClientSettings.from_env()
        setup_logging(settings.log_level)
        return cls(
            base_url=settings.base_url,
            token=settings.token,
            timeout=settings.timeout,
        )

    @property
    def http_client(self) -> httpx.Client:
        """Get or create the pooled httpx client."""
        if self._http_client is None:
            self._http_client = httpx.Client(
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._http_client

    def new_request(
        self,
        method: str,
        path: str,
        opt: BaseModel | Mapping[str, Any] | None = None,
        options: Iterable[RequestOptionFunc] = (),
    ) -> httpx.Request:
        """Build a request against the API root.

        Args:
            method: HTTP method
            path: Path relative to the API root, with segments already escaped
            opt: Options sent as query parameters for GET and HEAD, else as JSON
            options: Per-call request options, applied in order

        Returns:
            The request, ready to be passed to do

        Raises:
            GitLabError: If a request option rejects the request
        """
        method = method.upper()
        # Appended verbatim; dot segments are not resolved
        url = self.base_url.copy_with(
            raw_path=self.base_url.raw_path + path.lstrip("/").encode("ascii")
        )
        headers = {"Accept": "application/json", "User-Agent": USER_AGENT}
        if self.token:
            headers["PRIVATE-TOKEN"] = self.token

        params = None
        body = None
        if opt is not None:
            if method in _BODYLESS_METHODS:
                params = _encode_options(opt)
            else:
                body = _encode_options(opt)

        request = self.http_client.build_request(
            method, url, params=params, json=body, headers=headers
        )
        for option in options:
            option(request)
        return request

    def do(self, request: httpx.Request, model: Any = None) -> tuple[Any, Response]:
        """Send a request and decode its body.

        Args:
            request: Request built by new_request
            model: Type to decode the body into, or None to skip decoding

        Returns:
            The decoded body (None when model is None) and the response

        Raises:
            TransportError: If no response was received
            ErrorResponse: If the status is not 2xx
            ResponseDecodeError: If the body does not match model
        """
        self._log.debug("gitlab_request", method=request.method, url=str(request.url))
        try:
            http_response = self.http_client.send(request)
        except httpx.HTTPError as e:
            raise TransportError(f"{request.method} {request.url}: {str(e)}") from e

        response = Response(http_response)
        if not 200 <= response.status_code < 300:
            self._log.warning(
                "gitlab_error_response",
                method=request.method,
                url=str(request.url),
                status_code=response.status_code,
            )
        check_response(response)

        if model is None:
            return None, response
        try:
            return TypeAdapter(model).validate_json(http_response.content), response
        except ValidationError as e:
            raise ResponseDecodeError(response, e) from e

    def close(self) -> None:
        """Close the pooled httpx client if this client created it."""
        if self._http_client is not None and self._owns_http_client:
            self._http_client.close()
            self._http_client = None

    def __enter__(self) -> "GitLabClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
