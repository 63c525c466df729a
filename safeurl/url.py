import threading
from dataclasses import replace
from typing import AnyStr, Dict, List, Optional
from urllib.parse import parse_qs

from essentials.meta import deprecated
from yarl import URL as YarlURL

from safeurl.exceptions import DEFAULT_DATA_PATH, InvalidURLData
from safeurl.href import make_href
from safeurl.hrefdata import (
    is_absolute_href_data,
    is_hash_href_data,
    is_search_href_data,
)
from safeurl.logs import get_logger
from safeurl.parsed import ParsedURL
from safeurl.parser import get_explicit_port, get_hostname, get_href, parse_url_data
from safeurl.parts import HostnameHRefParts
from safeurl.ports import make_ip_port
from safeurl.settings.urls import url_settings
from safeurl.utils import dirname_path, ensure_str, join_paths

logger = get_logger("url")


def _as_text(value) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return value.decode(errors="replace")
    return repr(value)


def _describe_attempt(value, base) -> str:
    if base is None:
        return _as_text(value)
    return _as_text(base) + _as_text(value)


def _parse_search(search: str) -> Dict[str, List[str]]:
    return parse_qs(search.lstrip("?"), keep_blank_values=True)


class URL:
    """
    An immutable, validated URL.

    The input is resolved against `base` when one is given; relative and
    fragment-only input needs a base to be valid. Invalid input raises
    InvalidURLData, whose `data_path` is the given `path`.

    URL values never change: `dirname`, `join` and `resolve` return new
    instances, which keep the base of the URL they were created from.
    """

    __slots__ = ("_value", "_base", "_url", "_parsed", "_lock")

    def __init__(
        self,
        value: AnyStr,
        *,
        base: Optional[AnyStr] = None,
        path: str = DEFAULT_DATA_PATH,
    ):
        try:
            value = ensure_str(value)
            if base is not None:
                base = ensure_str(base)
            url = parse_url_data(value, base)
        except (ValueError, TypeError) as error:
            raise InvalidURLData(path, _describe_attempt(value, base), error)

        self._value: str = value
        self._base: str = base if base is not None else value
        self._url: YarlURL = url
        self._parsed: Optional[ParsedURL] = None
        self._lock = threading.Lock()

        if url_settings.eager_parse:
            self.parse()

    def __repr__(self):
        return f"<URL {self.href}>"

    def __str__(self):
        return self.href

    def __eq__(self, other):
        if isinstance(other, URL):
            return self.href == other.href
        return NotImplemented

    def __hash__(self):
        return hash(self.href)

    @property
    def value(self) -> str:
        return self._value

    @property
    def base(self) -> str:
        return self._base

    def value_of(self) -> str:
        """
        Returns the input this URL was created with, as given.
        """
        return self._value

    def to_json(self) -> str:
        return self.href

    def to_yarl(self) -> YarlURL:
        """
        Returns the parsed yarl.URL behind this URL.
        """
        return self._url

    @property
    def href(self) -> str:
        return get_href(self._url)

    @property
    def protocol(self) -> str:
        return self._url.scheme + ":"

    @property
    @deprecated("Credentials in URLs are deprecated by RFC 3986.")
    def username(self) -> str:
        return self._url.raw_user or ""

    @property
    @deprecated("Credentials in URLs are deprecated by RFC 3986.")
    def password(self) -> str:
        return self._url.raw_password or ""

    @property
    def hostname(self) -> str:
        return get_hostname(self._url)

    @property
    def port(self) -> str:
        port = get_explicit_port(self._url)
        if port is None:
            return ""
        return str(port)

    @property
    def host(self) -> str:
        port = self.port
        if port:
            return f"{self.hostname}:{port}"
        return self.hostname

    @property
    def origin(self) -> str:
        # URLs without a host have an opaque origin
        if not self.hostname:
            return "null"
        return f"{self.protocol}//{self.host}"

    @property
    def pathname(self) -> str:
        return self._url.raw_path or "/"

    @property
    def search(self) -> str:
        query = self._url.raw_query_string
        if query:
            return "?" + query
        return ""

    @property
    def search_params(self) -> Dict[str, List[str]]:
        """
        Returns the query string as a dictionary of lists of values. The
        dictionary is a copy: changing it does not affect this URL.
        """
        return _parse_search(self.search)

    @property
    def hash(self) -> str:
        fragment = self._url.raw_fragment
        if fragment:
            return "#" + fragment
        return ""

    def parse(self) -> ParsedURL:
        """
        Returns the breakdown of this URL. It is computed once, then cached.
        """
        parsed = self._parsed
        if parsed is not None:
            return parsed

        with self._lock:
            if self._parsed is None:
                self._parsed = self._create_parsed_url()
            return self._parsed

    def _create_parsed_url(self) -> ParsedURL:
        url = self._url
        port = get_explicit_port(url)
        search = self.search or None

        return ParsedURL(
            protocol=self.protocol,
            hostname=self.hostname or None,
            pathname=self.pathname,
            username=url.raw_user or None,
            password=url.raw_password or None,
            port=make_ip_port(port) if port is not None else None,
            search=search,
            search_params=_parse_search(search) if search else None,
            hash=self.hash or None,
        )

    def _from_parts(self, parts: HostnameHRefParts) -> "URL":
        return URL(make_href(parts), base=self._base)

    def dirname(self) -> "URL":
        """
        Returns a new URL that points to the parent folder of this one. The
        search and hash sections are dropped.
        """
        parts = self.parse().to_parts()
        return self._from_parts(
            replace(
                parts,
                pathname=dirname_path(parts.pathname or "/"),
                search=None,
                hash=None,
            )
        )

    def join(self, *segments: str) -> "URL":
        """
        Returns a new URL whose path is this URL's path, joined with the given
        segments. The search and hash sections are dropped.

        A trailing slash in the last segment is kept:
        URL("http://example.com/a/b").join("..", "c/") gives
        "http://example.com/a/c/".
        """
        parts = self.parse().to_parts()
        return self._from_parts(
            replace(
                parts,
                pathname=join_paths(parts.pathname or "/", *segments),
                search=None,
                hash=None,
            )
        )

    def resolve(self, *tokens: str) -> "URL":
        """
        Returns a new URL, obtained by applying the given tokens to this URL
        from right to left:

        * empty tokens are ignored
        * an absolute URL stops the process and is returned as a new URL,
          discarding every other change
        * a search (`?...`) replaces the search and drops the hash
        * a hash (`#...`) replaces the hash
        * anything else is joined to the path, dropping search and hash
        """
        parts = self.parse().to_parts()

        for token in reversed(tokens):
            if not token:
                continue

            if is_absolute_href_data(token):
                logger.debug(f"Resolving {self.href} replaced by absolute URL {token}")
                return URL(token)

            if is_search_href_data(token):
                parts = replace(parts, search=token, hash=None)
            elif is_hash_href_data(token):
                parts = replace(parts, hash=token)
            else:
                parts = replace(
                    parts,
                    pathname=join_paths(parts.pathname or "/", token),
                    search=None,
                    hash=None,
                )

        return self._from_parts(parts)
