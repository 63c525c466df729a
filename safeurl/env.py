import os
from dataclasses import dataclass
from typing import FrozenSet, Optional

from safeurl.utils import truthy


def get_allowed_schemes() -> Optional[FrozenSet[str]]:
    """
    Returns the set of URL schemes allowed by the `SAFEURL_ALLOWED_SCHEMES`
    environment variable (a comma-separated list), or None if every scheme is
    allowed.
    """
    value = os.environ.get("SAFEURL_ALLOWED_SCHEMES", "")
    schemes = frozenset(
        scheme.strip().lower() for scheme in value.split(",") if scheme.strip()
    )
    return schemes or None


def get_eager_parse() -> bool:
    """
    Returns a value indicating whether URL values should be decomposed when they
    are created, rather than on first use. This method checks the
    `SAFEURL_EAGER_PARSE` environment variable.
    """
    return truthy(os.environ.get("SAFEURL_EAGER_PARSE", ""))


@dataclass(frozen=True)
class EnvironmentSettings:
    allowed_schemes: Optional[FrozenSet[str]]
    eager_parse: bool

    @classmethod
    def from_env(cls) -> "EnvironmentSettings":
        return cls(
            allowed_schemes=get_allowed_schemes(),
            eager_parse=get_eager_parse(),
        )
