import pytest

from safeurl.settings.urls import url_settings


@pytest.fixture(autouse=True)
def default_url_settings():
    """
    Restores the URL settings read from environment variables after each test,
    for tests that configure them at runtime.
    """
    yield url_settings
    url_settings.reset()
