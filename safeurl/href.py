"""
This module assembles href strings from their parts.
"""

from typing import Any, Mapping, Union

from safeurl.parsed import ParsedURL
from safeurl.parts import (
    HostnameHRefParts,
    HRefParts,
    PRHRefParts,
    href_parts_from_mapping,
)
from safeurl.ports import ip_port_to_string


def make_href(parts: Union[HRefParts, ParsedURL, Mapping[str, Any]]) -> str:
    """
    Assembles a href string from the given parts.

    Protocol-relative parts give `//hostname...` (or just `hostname...` if their
    `protocol_relative` flag is False), parts with a hostname give
    `protocol://hostname...`, and anything else gives a relative href made of
    the pathname, search and hash. A ParsedURL is assembled as parts with a
    hostname.
    """
    if isinstance(parts, ParsedURL):
        parts = parts.to_parts()

    if isinstance(parts, Mapping):
        parts = href_parts_from_mapping(parts)

    if isinstance(parts, PRHRefParts):
        return _make_pr_href(parts)

    if isinstance(parts, HostnameHRefParts):
        return _make_href_with_hostname(parts)

    return _get_common_elements(parts)


def _make_pr_href(parts: PRHRefParts) -> str:
    href = "//" if parts.protocol_relative else ""
    return href + _get_absolute_elements(parts)


def _make_href_with_hostname(parts: HostnameHRefParts) -> str:
    href = ""

    if parts.protocol:
        # protocols taken from a parsed URL already end with ':'
        if parts.protocol.endswith(":"):
            href = parts.protocol
        else:
            href = parts.protocol + ":"

        if not _has_opaque_path(parts):
            href += "//"

    return href + _get_absolute_elements(parts)


def _has_opaque_path(parts: HostnameHRefParts) -> bool:
    # URLs without an authority, like mailto:user@example.com or urn:isbn:123
    return (
        not parts.hostname
        and bool(parts.pathname)
        and not parts.pathname.startswith("/")
    )


def _get_absolute_elements(parts: Union[HostnameHRefParts, PRHRefParts]) -> str:
    return (
        _get_hostname_and_port(parts)
        + _get_authority_separator(parts)
        + _get_common_elements(parts)
    )


def _get_hostname_and_port(parts: Union[HostnameHRefParts, PRHRefParts]) -> str:
    if parts.port is not None:
        return parts.hostname + ":" + ip_port_to_string(parts.port)
    return parts.hostname


def _get_authority_separator(parts: Union[HostnameHRefParts, PRHRefParts]) -> str:
    # the pathname brings its own leading slash
    if parts.pathname:
        return ""

    if parts.search or parts.hash:
        return "/"

    return ""


def _get_common_elements(parts: HRefParts) -> str:
    href = parts.pathname or ""
    return href + _get_search(parts) + _get_hash(parts)


def _get_search(parts: HRefParts) -> str:
    if not parts.search:
        return ""
    if parts.search.startswith("?"):
        return parts.search
    return "?" + parts.search


def _get_hash(parts: HRefParts) -> str:
    if not parts.hash:
        return ""
    if parts.hash.startswith("#"):
        return parts.hash
    return "#" + parts.hash
