import pytest

from batteryinfo import system


@pytest.fixture(autouse=True)
def config_home(tmp_path, monkeypatch):
    """Point XDG_CONFIG_HOME at an empty temp dir for every test."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    yield tmp_path
    system.reset()
