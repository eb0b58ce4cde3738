import pytest

from caselib.logger import LOG_LEVELS, setLogLevel


@pytest.fixture(autouse=True)
def config_home(tmp_path, monkeypatch):
    """Keep every test away from the real ~/.config."""
    home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    yield home
    setLogLevel(LOG_LEVELS.BASIC)
