"""
JSON serialization of URL values, which are written as their href.
"""

from typing import Any

from essentials.json import FriendlyEncoder
from essentials.json import dumps as essentials_dumps

from safeurl.url import URL


class URLEncoder(FriendlyEncoder):
    def default(self, obj: Any) -> Any:
        if isinstance(obj, URL):
            return obj.to_json()
        return super().default(obj)


def dumps(obj: Any, **kwargs) -> str:
    """
    Serializes the given object to JSON, like `json.dumps`, writing URL values
    as strings. Output is compact unless `indent` is given.
    """
    if kwargs.get("indent") is None:
        kwargs.setdefault("separators", (",", ":"))
    return essentials_dumps(obj, cls=URLEncoder, **kwargs)
