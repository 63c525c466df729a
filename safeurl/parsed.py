from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from safeurl.parts import HostnameHRefParts
from safeurl.ports import IpPort

SearchParams = Mapping[str, Tuple[str, ...]]


def freeze_search_params(params: Mapping[str, Sequence[str]]) -> SearchParams:
    """
    Returns a read-only copy of the given query dictionary, with tuples of
    values.
    """
    return MappingProxyType({key: tuple(values) for key, values in params.items()})


@dataclass(frozen=True)
class ParsedURL:
    """
    Breakdown of a fully resolved URL, using the terms of the WHATWG URL
    specification.

    Fields that carry no meaningful value are None, never empty strings.
    `search` always starts with `?` and `hash` with `#`; `search_params` is
    only set when `search` is set, and is read-only. `hostname` is None for
    URLs without a host, like `file:///etc/hosts` or `mailto:user@example.com`.

    `username` and `password` are supported for compatibility, but they are
    deprecated by RFC 3986 and should not be used in new code.
    """

    protocol: str
    hostname: Optional[str] = None
    pathname: str = "/"
    username: Optional[str] = None
    password: Optional[str] = None
    port: Optional[IpPort] = None
    search: Optional[str] = None
    search_params: Optional[SearchParams] = field(default=None, hash=False)
    hash: Optional[str] = None

    def __post_init__(self):
        if self.search_params is not None:
            object.__setattr__(
                self, "search_params", freeze_search_params(self.search_params)
            )

    def to_dict(self) -> Dict[str, Any]:
        """
        Returns the fields that are set, as a dictionary.
        """
        return {
            item.name: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not None
        }

    def to_parts(self) -> HostnameHRefParts:
        return HostnameHRefParts(
            protocol=self.protocol,
            hostname=self.hostname or "",
            port=self.port,
            pathname=self.pathname,
            search=self.search,
            hash=self.hash,
        )
