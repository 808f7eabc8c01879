"""Host-level entry points backed by the registered providers."""

import logging
import threading
from typing import List, Optional, Tuple

from batteryinfo.config import load_config
from batteryinfo.core.errors import DeviceError
from batteryinfo.core.manager import BatteryManager
from batteryinfo.core.types import Battery
from batteryinfo.providers import get_registered_providers

log = logging.getLogger(__name__)

_default_manager: Optional[BatteryManager] = None
_lock = threading.Lock()


def create_manager() -> BatteryManager:
    """Create a BatteryManager with all enabled registered providers."""
    config = load_config()
    forced = config.get("provider")
    enabled = config.get("providers", {})

    mgr = BatteryManager()
    for provider_cls in get_registered_providers():
        try:
            provider = provider_cls()
        except Exception:
            log.debug("Could not create provider %s", provider_cls.__name__, exc_info=True)
            continue

        if forced and provider.name != forced:
            continue
        if not enabled.get(provider.name, True):
            log.debug("Provider %s disabled by config", provider.name)
            continue
        mgr.register_provider(provider)

    if forced and not mgr.providers:
        log.warning("Configured provider %r is not registered", forced)
    return mgr


def default_manager() -> BatteryManager:
    """The process-wide manager, created on first use."""
    global _default_manager
    with _lock:
        if _default_manager is None:
            _default_manager = create_manager()
        return _default_manager


def reset() -> None:
    """Close and drop the default manager so the next call rebuilds it."""
    global _default_manager
    with _lock:
        if _default_manager is not None:
            _default_manager.close()
        _default_manager = None


def get(index: int) -> Tuple[Optional[Battery], DeviceError]:
    """Read the battery at ``index`` on this host."""
    return default_manager().get(index)


def get_all() -> Tuple[Optional[List[Optional[Battery]]], Optional[BaseException]]:
    """Read every battery on this host."""
    return default_manager().get_all()
