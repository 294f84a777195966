import pytest


@pytest.fixture(autouse=True)
def _clean_host_env(monkeypatch: pytest.MonkeyPatch):
    """Keep HOSTKIT_* variables of the developer's shell out of the tests."""
    for name in ("HOSTKIT_HOST", "HOSTKIT_USER", "HOSTKIT_PORT", "HOSTKIT_KEY", "HOSTKIT_PASSWORD"):
        monkeypatch.delenv(name, raising=False)
