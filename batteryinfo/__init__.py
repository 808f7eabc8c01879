"""batteryinfo - battery status with per-field error reporting.

    batteries, err = batteryinfo.get_all()
    if isinstance(err, batteryinfo.FatalError):
        ...  # nothing usable
    elif isinstance(err, batteryinfo.Errors):
        ...  # check err[i] before trusting batteries[i]
"""

from batteryinfo.core import (
    ERR_ALL_NOT_NIL,
    AllFieldsFailedError,
    Battery,
    BatteryError,
    BatteryManager,
    BatteryProvider,
    Errors,
    FatalError,
    FunctionProvider,
    InvalidStateError,
    NoProviderError,
    PartialError,
    State,
    parse_state,
    reduce_all,
    reduce_one,
)
from batteryinfo.providers import (
    get_registered_providers,
    register_provider,
    unregister_provider,
)
from batteryinfo.system import create_manager, get, get_all

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ERR_ALL_NOT_NIL",
    "AllFieldsFailedError",
    "Battery",
    "BatteryError",
    "BatteryManager",
    "BatteryProvider",
    "Errors",
    "FatalError",
    "FunctionProvider",
    "InvalidStateError",
    "NoProviderError",
    "PartialError",
    "State",
    "parse_state",
    "reduce_all",
    "reduce_one",
    "get_registered_providers",
    "register_provider",
    "unregister_provider",
    "create_manager",
    "get",
    "get_all",
]
