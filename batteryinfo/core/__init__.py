"""Core abstractions: battery types, error taxonomy and result reduction."""

from batteryinfo.core.errors import (
    ERR_ALL_NOT_NIL,
    AllFieldsFailedError,
    BatteryError,
    Errors,
    FatalError,
    InvalidStateError,
    NoProviderError,
    PartialError,
)
from batteryinfo.core.types import State, Battery, parse_state
from batteryinfo.core.provider import BatteryProvider, FunctionProvider
from batteryinfo.core.manager import BatteryManager, reduce_one, reduce_all

__all__ = [
    "ERR_ALL_NOT_NIL",
    "AllFieldsFailedError",
    "BatteryError",
    "Errors",
    "FatalError",
    "InvalidStateError",
    "NoProviderError",
    "PartialError",
    "State",
    "Battery",
    "parse_state",
    "BatteryProvider",
    "FunctionProvider",
    "BatteryManager",
    "reduce_one",
    "reduce_all",
]
