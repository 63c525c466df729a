import posixpath
import re
from typing import AnyStr


def ensure_str(value: AnyStr) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return value.decode()
    raise ValueError("Expected bytes or str")


def remove_duplicate_slashes(value: str) -> str:
    return re.sub("/{2,}", "/", value)


def normalize_path(value: str) -> str:
    """
    Normalizes a URL path, resolving `.` and `..` segments and duplicate
    slashes. Unlike posixpath.normpath, a trailing slash is kept, since
    `/a/b/` and `/a/b` are different URLs.
    """
    if not value:
        return "."

    normalized = posixpath.normpath(remove_duplicate_slashes(value))

    # posixpath keeps exactly two leading slashes
    if normalized.startswith("//"):
        normalized = normalized[1:]

    if value.endswith("/") and not normalized.endswith("/"):
        normalized += "/"
    return normalized


def join_paths(*args: str) -> str:
    """
    Joins path segments and normalizes the result. Absolute segments are
    appended like any other segment: join_paths("/a", "/b") is "/a/b".
    """
    joined = "/".join(arg for arg in args if arg)
    if not joined:
        return "."
    return normalize_path(joined)


def dirname_path(value: str) -> str:
    """
    Returns the parent directory of the given path: `/a/b/c` and `/a/b/c/`
    both give `/a/b`, and `/` stays `/`.
    """
    if not value:
        return "."

    stripped = value.rstrip("/")
    if not stripped:
        return "/"

    parent = posixpath.dirname(stripped)
    if not parent:
        return "."
    return remove_duplicate_slashes(parent)


def truthy(value: str, default: bool = False) -> bool:
    if not value:
        return default
    return value.upper() in {"1", "TRUE"}
