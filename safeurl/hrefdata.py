"""
Prefix tests that classify a string by the kind of href it holds. None of
these functions parse or validate their input.
"""

import re

_absolute_href_rx = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*://")


def is_absolute_href_data(value: str) -> bool:
    """
    Returns True if the given value starts with a scheme followed by `://`,
    like `https://example.com`.
    """
    return bool(_absolute_href_rx.match(value))


def is_pr_href_data(value: str) -> bool:
    """
    Returns True if the given value is a protocol-relative href, like
    `//example.com`.
    """
    return value.startswith("//")


def is_search_href_data(value: str) -> bool:
    return value.startswith("?")


def is_hash_href_data(value: str) -> bool:
    return value.startswith("#")


def is_path_href_data(value: str) -> bool:
    return not (
        is_absolute_href_data(value)
        or is_search_href_data(value)
        or is_hash_href_data(value)
    )
