"""
Functions to validate URL data, with control over what happens when the
validation fails.

`on_error` handlers receive the InvalidURLData error; the default one,
`raise_error`, raises it. A handler can also return a value to use in place of
the invalid URL.
"""

from typing import Any, Callable, NoReturn, Optional, Union

from safeurl.exceptions import DEFAULT_DATA_PATH, InvalidURLData
from safeurl.url import URL

OnError = Callable[[InvalidURLData], Any]
URLOption = Callable[[URL], URL]


def raise_error(error: InvalidURLData) -> NoReturn:
    raise error


def validate_url_data(
    path: str, input: Any, base: Optional[str] = None
) -> Union[URL, InvalidURLData]:
    """
    Returns a URL for the given input, or the InvalidURLData error that explains
    why the input is not a URL. Relative input requires a `base`.
    """
    if not isinstance(input, str):
        return InvalidURLData(path, repr(input))
    try:
        return URL(input, base=base, path=path)
    except InvalidURLData as error:
        return error


def is_url_data(input: Any, base: Optional[str] = None) -> bool:
    return isinstance(validate_url_data(DEFAULT_DATA_PATH, input, base), URL)


def must_be_url_data(
    input: Any,
    base: Optional[str] = None,
    on_error: OnError = raise_error,
    path: str = DEFAULT_DATA_PATH,
):
    """
    Data guard: returns the given input if it is valid URL data, otherwise the
    result of `on_error`.
    """
    result = validate_url_data(path, input, base)
    if isinstance(result, InvalidURLData):
        return on_error(result)
    return input


def make_url(
    input: Any,
    *options: URLOption,
    base: Optional[str] = None,
    on_error: OnError = raise_error,
    path: str = DEFAULT_DATA_PATH,
):
    """
    Creates a URL from the given input, then applies each option to it, in
    order. If the input is not valid URL data, returns the result of
    `on_error` instead.

    Example:

        make_url("../docs/", base="https://example.com/a/b")
        make_url(value, on_error=lambda error: None)
        make_url("https://example.com/a/b", lambda url: url.dirname())
    """
    result = validate_url_data(path, input, base)
    if isinstance(result, InvalidURLData):
        return on_error(result)
    for option in options:
        result = option(result)
    return result
