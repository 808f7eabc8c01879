import dataclasses

import pytest

from batteryinfo.core.errors import InvalidStateError
from batteryinfo.core.types import Battery, State, parse_state


@pytest.mark.parametrize("label, expected", [
    ("Charging", State.CHARGING),
    ("charging", State.CHARGING),
    ("DISCHARGING", State.DISCHARGING),
    ("full", State.FULL),
    ("Empty", State.EMPTY),
    ("unknown", State.UNKNOWN),
])
def test_parse_state_ignores_case(label, expected):
    state, err = parse_state(label)
    assert state is expected
    assert err is None


def test_parse_state_rejects_unknown_label():
    state, err = parse_state("strange")
    assert state is State.UNKNOWN
    assert isinstance(err, InvalidStateError)
    assert isinstance(err, ValueError)
    assert err == InvalidStateError("strange")
    assert str(err) == "Invalid state `strange`"


def test_parse_state_error_keeps_original_casing():
    _, err = parse_state("Not Charging")
    assert err.label == "Not Charging"
    assert str(err) == "Invalid state `Not Charging`"


def test_parse_state_is_deterministic():
    assert parse_state("Charging") == parse_state("charging") == (State.CHARGING, None)


def test_state_renders_canonical_label():
    assert str(State.DISCHARGING) == "Discharging"


def test_battery_defaults_to_zero():
    bat = Battery()
    assert bat.state is State.UNKNOWN
    assert bat.current == bat.full == bat.design == 0
    assert bat.charge_rate == bat.voltage == bat.design_voltage == 0


def test_battery_is_immutable():
    bat = Battery(full=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        bat.full = 2
    assert Battery(full=1) == bat
