from typing import TypeAlias
from urllib.parse import quote

from gitlab_client.errors import InvalidIDError

ProjectID: TypeAlias = int | str

# Segments a URL resolver would collapse or drop
_UNSAFE_SEGMENTS = {"", ".", ".."}


def parse_id(pid: ProjectID) -> str:
    """Normalize a project identifier.

    GitLab accepts either the numeric ID of a project or its
    namespaced path (e.g. ``group/project``) wherever a project is
    addressed.

    Args:
        pid: Numeric project ID or namespaced project path

    Returns:
        The identifier as a string, not yet escaped

    Raises:
        InvalidIDError: If pid is neither an int nor a str, or is an
            empty or dot-only path
    """
    # bool is a subclass of int
    if isinstance(pid, int) and not isinstance(pid, bool):
        return str(pid)
    if isinstance(pid, str):
        if pid in _UNSAFE_SEGMENTS:
            raise InvalidIDError(f"invalid ID {pid!r}, the path must name a project")
        return pid
    raise InvalidIDError(
        f"invalid ID type {pid!r}, the ID must be an int or a string"
    )


def parse_iid(iid: int) -> int:
    """Check that a merge request number is an int.

    Raises:
        InvalidIDError: If iid is not an int
    """
    if isinstance(iid, int) and not isinstance(iid, bool):
        return iid
    raise InvalidIDError(f"invalid IID {iid!r}, the IID must be an int")


def path_escape(segment: str) -> str:
    """Percent-encode a single path segment, including any slashes."""
    return quote(segment, safe="")
