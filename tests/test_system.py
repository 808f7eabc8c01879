import json

import pytest

import batteryinfo
from batteryinfo import system
from batteryinfo.core.errors import FatalError, NoProviderError, PartialError
from batteryinfo.core.provider import BatteryProvider
from batteryinfo.core.types import Battery, State


class _Alpha(BatteryProvider):
    name = "alpha"
    priority = 10

    def read_one(self, index):
        return Battery(state=State.FULL, full=index), None

    def read_all(self):
        return [Battery(state=State.FULL)], None


class _Beta(BatteryProvider):
    name = "beta"
    priority = 20

    def read_one(self, index):
        return Battery(current=1), PartialError(voltage=Exception("no voltage"))

    def read_all(self):
        return [], OSError("no power_supply class")


@pytest.fixture
def registered():
    for cls in (_Alpha, _Beta):
        batteryinfo.register_provider(cls)
    yield
    for cls in (_Alpha, _Beta):
        batteryinfo.unregister_provider(cls)


def _write_config(config_home, data):
    path = config_home / "batteryinfo" / "config.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(data))


def test_register_provider_is_idempotent(registered):
    batteryinfo.register_provider(_Alpha)
    assert batteryinfo.get_registered_providers().count(_Alpha) == 1


def test_get_without_providers_is_fatal():
    battery, err = batteryinfo.get(0)
    assert battery is None
    assert isinstance(err, FatalError)
    assert isinstance(err.err, NoProviderError)


def test_get_uses_preferred_provider(registered):
    assert batteryinfo.get(2) == (Battery(state=State.FULL, full=2), None)
    assert batteryinfo.get_all() == ([Battery(state=State.FULL)], None)


def test_disabled_provider_is_skipped(registered, config_home):
    _write_config(config_home, {"providers": {"alpha": False}})
    battery, err = batteryinfo.get(0)
    assert battery == Battery(current=1)
    assert err == PartialError(voltage=Exception("no voltage"))
    assert batteryinfo.get_all() == ([], FatalError(OSError("no power_supply class")))


def test_forced_provider(registered, config_home):
    _write_config(config_home, {"provider": "beta"})
    mgr = system.create_manager()
    assert [p.name for p in mgr.providers] == ["beta"]


def test_unknown_forced_provider_leaves_no_providers(registered, config_home, caplog):
    _write_config(config_home, {"provider": "gamma"})
    mgr = system.create_manager()
    assert mgr.providers == []
    assert "gamma" in caplog.text


def test_default_manager_is_reused_until_reset(registered):
    first = system.default_manager()
    assert system.default_manager() is first
    system.reset()
    assert system.default_manager() is not first
