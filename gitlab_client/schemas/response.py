import httpx

# GitLab pagination headers
HEADER_TOTAL = "X-Total"
HEADER_TOTAL_PAGES = "X-Total-Pages"
HEADER_PER_PAGE = "X-Per-Page"
HEADER_PAGE = "X-Page"
HEADER_NEXT_PAGE = "X-Next-Page"
HEADER_PREV_PAGE = "X-Prev-Page"


def _header_int(headers: httpx.Headers, name: str) -> int:
    value = headers.get(name, "").strip()
    try:
        return int(value)
    except ValueError:
        return 0


class Response:
    """Metadata of a reply from the GitLab API.

    Wraps the underlying httpx response and exposes the pagination
    headers GitLab sends with list endpoints. A header that is absent or
    empty reads as 0.

    Attributes:
        http_response: The raw httpx response
        total_items: Value of X-Total
        total_pages: Value of X-Total-Pages
        items_per_page: Value of X-Per-Page
        current_page: Value of X-Page
        next_page: Value of X-Next-Page
        previous_page: Value of X-Prev-Page
    """

    def __init__(self, http_response: httpx.Response) -> None:
        self.http_response = http_response
        headers = http_response.headers
        self.total_items: int = _header_int(headers, HEADER_TOTAL)
        self.total_pages: int = _header_int(headers, HEADER_TOTAL_PAGES)
        self.items_per_page: int = _header_int(headers, HEADER_PER_PAGE)
        self.current_page: int = _header_int(headers, HEADER_PAGE)
        self.next_page: int = _header_int(headers, HEADER_NEXT_PAGE)
        self.previous_page: int = _header_int(headers, HEADER_PREV_PAGE)

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http_response.headers

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}]>"
