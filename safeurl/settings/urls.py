from typing import FrozenSet, Iterable, Optional

from safeurl.env import EnvironmentSettings


class URLSettings:
    """
    Configures how URL values are validated and decomposed.

    By default the settings are read from environment variables (see
    `safeurl.env`); the `use` method overrides them at runtime.
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        env = EnvironmentSettings.from_env()
        self._allowed_schemes = env.allowed_schemes
        self._eager_parse = env.eager_parse

    def use(
        self,
        allowed_schemes: Optional[Iterable[str]] = None,
        eager_parse: Optional[bool] = None,
    ) -> None:
        if allowed_schemes is not None:
            schemes = frozenset(scheme.lower() for scheme in allowed_schemes)
            self._allowed_schemes = schemes or None
        if eager_parse is not None:
            self._eager_parse = eager_parse

    @property
    def allowed_schemes(self) -> Optional[FrozenSet[str]]:
        return self._allowed_schemes

    @property
    def eager_parse(self) -> bool:
        return self._eager_parse

    def is_allowed_scheme(self, scheme: str) -> bool:
        if self._allowed_schemes is None:
            return True
        return scheme.lower() in self._allowed_schemes


url_settings = URLSettings()
