import pytest

from helpwrap import _settings


@pytest.fixture(scope="function", autouse=True)
def defaults():
    """Restore process-wide layout defaults after every test."""
    original = _settings.get_defaults()
    yield original
    _settings.set_defaults(**original)
