"""
This module adapts yarl, which does the actual parsing of URLs, to the rules
of URL values: a URL must have a scheme, URLs of the special schemes (like
http and https) must have a host, the scheme must be allowed, and the port must
be a valid IP port.
"""

import re
from typing import Optional

from yarl import URL as YarlURL

from safeurl.logs import get_logger
from safeurl.ports import make_ip_port
from safeurl.settings.urls import url_settings

logger = get_logger("parser")

# file URLs are special too, but their host can be empty
SCHEMES_REQUIRING_HOST = frozenset({"ftp", "http", "https", "ws", "wss"})

_c0_control_or_space = "".join(chr(code) for code in range(0x21))
_tab_or_newline_rx = re.compile("[\t\n\r]")


class URLRejected(ValueError):
    """Raised when a parsed URL does not satisfy the rules of URL values."""


def clean_url_data(value: str) -> str:
    """
    Removes leading and trailing control characters and spaces, and any tab or
    newline, like browsers do before parsing a URL.
    """
    return _tab_or_newline_rx.sub("", value.strip(_c0_control_or_space))


def _resolve(input: str, base: Optional[str]) -> YarlURL:
    input = clean_url_data(input)
    if base is None:
        return YarlURL(input)

    base_url = YarlURL(clean_url_data(base))
    if not input:
        # an empty reference is the base itself, without its fragment
        return base_url.with_fragment(None)
    return base_url.join(YarlURL(input))


def _check(url: YarlURL) -> None:
    if not url.scheme:
        raise URLRejected("missing scheme")

    if not url.raw_host and url.scheme in SCHEMES_REQUIRING_HOST:
        raise URLRejected(f"missing host for scheme {url.scheme!r}")

    if not url_settings.is_allowed_scheme(url.scheme):
        raise URLRejected(f"scheme {url.scheme!r} is not allowed")

    port = url.explicit_port
    if port is not None:
        make_ip_port(port)


def parse_url_data(input: str, base: Optional[str] = None) -> YarlURL:
    """
    Parses the given input, resolved against base if given, raising ValueError
    if it is not a valid URL.
    """
    try:
        url = _resolve(input, base)
        _check(url)
    except (ValueError, TypeError) as error:
        logger.debug(f"Rejected URL data {input!r} (base: {base!r}): {error}")
        raise
    return url


def get_explicit_port(url: YarlURL) -> Optional[int]:
    """
    Returns the port of the given URL, or None if it has no port or the port
    is the default one for its scheme.
    """
    port = url.explicit_port
    if port is None or url.is_default_port():
        return None
    return port


def get_hostname(url: YarlURL) -> str:
    host = url.raw_host or ""
    # IPv6 addresses
    if ":" in host:
        return f"[{host}]"
    return host


def get_href(url: YarlURL) -> str:
    """
    Returns the canonical string form of the given URL. URLs with a host and an
    empty path are given the `/` path, so that `http://example.com` becomes
    `http://example.com/` and `http://example.com?a=1` becomes
    `http://example.com/?a=1`.
    """
    value = str(url)
    if not url.raw_host:
        return value

    authority = f"{url.scheme}://{url.raw_authority}"
    if value.startswith(authority) and not value.startswith("/", len(authority)):
        return authority + "/" + value[len(authority) :]
    return value
