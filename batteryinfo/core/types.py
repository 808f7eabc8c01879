"""Core data types for battery status reporting."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from batteryinfo.core.errors import InvalidStateError


class State(Enum):
    """Charging direction of a battery, keyed by its canonical label."""
    UNKNOWN = "Unknown"
    EMPTY = "Empty"
    FULL = "Full"
    CHARGING = "Charging"
    DISCHARGING = "Discharging"

    def __str__(self) -> str:
        return self.value


_STATES_BY_LABEL = {state.value.lower(): state for state in State}


def parse_state(label: str) -> Tuple[State, Optional[InvalidStateError]]:
    """Match a status label against the known states, ignoring case.

    Returns (State, None) on a match, or (State.UNKNOWN, InvalidStateError)
    naming the label exactly as it was given.
    """
    state = _STATES_BY_LABEL.get(label.lower())
    if state is None:
        return State.UNKNOWN, InvalidStateError(label)
    return state, None


@dataclass(frozen=True)
class Battery:
    """A single battery reading.

    Values are as reported by the provider. A field the provider could
    not read is 0; the accompanying PartialError says which.
    """
    state: State = State.UNKNOWN
    current: float = 0.0
    full: float = 0.0
    design: float = 0.0
    charge_rate: float = 0.0
    voltage: float = 0.0
    design_voltage: float = 0.0
