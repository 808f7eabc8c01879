"""Battery provider registry.

No platform readers ship with the package. Applications register
BatteryProvider subclasses here; create_manager() instantiates the
enabled ones.
"""

from typing import List, Type

from batteryinfo.core.provider import BatteryProvider

_registry: List[Type[BatteryProvider]] = []


def register_provider(provider_cls: Type[BatteryProvider]) -> Type[BatteryProvider]:
    """Register a provider class. Usable as a class decorator."""
    if provider_cls not in _registry:
        _registry.append(provider_cls)
    return provider_cls


def unregister_provider(provider_cls: Type[BatteryProvider]) -> None:
    """Remove a provider class from the registry, if present."""
    if provider_cls in _registry:
        _registry.remove(provider_cls)


def get_registered_providers() -> List[Type[BatteryProvider]]:
    """Return all registered provider classes."""
    return list(_registry)
