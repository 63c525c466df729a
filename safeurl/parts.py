"""
This module defines the parts a href can be assembled from.

There are three shapes of parts, each one a distinct class:

* RelativeHRefParts - pathname, search and hash only, with no authority
* PRHRefParts - a protocol-relative href, like `//example.com/path`
* HostnameHRefParts - a href with a hostname and an optional protocol

The shape is chosen where the parts are created, so that assembling a href
never needs to guess it. Plain mappings are supported for compatibility, and
are classified once by `href_parts_from_mapping`.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from safeurl.ports import IpPort, make_ip_port


@dataclass(frozen=True)
class RelativeHRefParts:
    pathname: Optional[str] = None
    search: Optional[str] = None
    hash: Optional[str] = None


@dataclass(frozen=True)
class PRHRefParts:
    hostname: str
    protocol_relative: bool = True
    port: Optional[IpPort] = None
    pathname: Optional[str] = None
    search: Optional[str] = None
    hash: Optional[str] = None


@dataclass(frozen=True)
class HostnameHRefParts:
    hostname: str
    protocol: Optional[str] = None
    port: Optional[IpPort] = None
    pathname: Optional[str] = None
    search: Optional[str] = None
    hash: Optional[str] = None


HRefParts = Union[RelativeHRefParts, PRHRefParts, HostnameHRefParts]


def _has_str(value: Mapping[str, Any], key: str) -> bool:
    return isinstance(value.get(key), str)


def is_pr_href_parts(value: Any) -> bool:
    """
    Returns True if the given mapping describes a protocol-relative href: it
    must have a boolean `protocol_relative` and a string `hostname`.
    """
    if isinstance(value, PRHRefParts):
        return True
    if not isinstance(value, Mapping):
        return False
    return isinstance(value.get("protocol_relative"), bool) and _has_str(
        value, "hostname"
    )


def is_href_parts_with_hostname(value: Any) -> bool:
    if isinstance(value, (PRHRefParts, HostnameHRefParts)):
        return True
    if not isinstance(value, Mapping):
        return False
    return _has_str(value, "hostname")


def is_href_parts_with_pathname(value: Any) -> bool:
    if isinstance(value, (RelativeHRefParts, PRHRefParts, HostnameHRefParts)):
        return isinstance(value.pathname, str)
    if not isinstance(value, Mapping):
        return False
    return _has_str(value, "pathname")


def _optional_str(value: Mapping[str, Any], key: str) -> Optional[str]:
    item = value.get(key)
    if isinstance(item, str) and item:
        return item
    return None


def _optional_port(value: Mapping[str, Any]) -> Optional[IpPort]:
    port = value.get("port")
    if port is None or port == "":
        return None
    return make_ip_port(port)


def href_parts_from_mapping(value: Mapping[str, Any]) -> HRefParts:
    """
    Classifies a mapping of href parts, returning the matching parts object.
    A mapping that matches no shape with an authority gives relative parts.

    Empty strings are treated as missing values. A `port` that is not a valid
    IP port raises InvalidIpPort.
    """
    common = dict(
        pathname=_optional_str(value, "pathname"),
        search=_optional_str(value, "search"),
        hash=_optional_str(value, "hash"),
    )

    if is_pr_href_parts(value):
        return PRHRefParts(
            hostname=value["hostname"],
            protocol_relative=value["protocol_relative"],
            port=_optional_port(value),
            **common,
        )

    if is_href_parts_with_hostname(value):
        return HostnameHRefParts(
            hostname=value["hostname"],
            protocol=_optional_str(value, "protocol"),
            port=_optional_port(value),
            **common,
        )

    return RelativeHRefParts(**common)
