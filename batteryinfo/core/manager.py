"""Battery manager - classifies raw provider readings into final results."""

import logging
from typing import List, Optional, Tuple

from batteryinfo.core.errors import (
    ERR_ALL_NOT_NIL,
    DeviceError,
    Errors,
    FatalError,
    NoProviderError,
    PartialError,
)
from batteryinfo.core.provider import BatteryProvider
from batteryinfo.core.types import Battery

log = logging.getLogger(__name__)


def _classify(err: Optional[BaseException]) -> DeviceError:
    """Map one raw per-battery error onto None, PartialError or FatalError."""
    if err is None:
        return None
    if isinstance(err, PartialError):
        if err.all_empty():
            return None
        if err.all_present():
            return FatalError(ERR_ALL_NOT_NIL)
        return err
    return FatalError(err)


def reduce_one(
    battery: Optional[Battery], err: Optional[BaseException]
) -> Tuple[Optional[Battery], DeviceError]:
    """Reduce a raw single-battery reading to its final (battery, error) pair.

    The battery is dropped exactly when the returned error is a FatalError:
    a PartialError with every field failed, or any error that is not a
    PartialError at all. A PartialError with no failed fields is success.
    """
    err = _classify(err)
    if isinstance(err, FatalError):
        log.debug("Battery read is fatal: %s", err)
        return None, err
    return battery, err


def reduce_all(
    batteries: Optional[List[Optional[Battery]]], err: Optional[BaseException]
) -> Tuple[Optional[List[Optional[Battery]]], Optional[BaseException]]:
    """Reduce a raw batch reading to its final (batteries, error) pair.

    Returns one of:
    - (batteries, None) when nothing failed,
    - (batteries, FatalError) when the batch could not be enumerated,
    - (batteries, Errors) with each slot classified as in reduce_one,
    - (None, FatalError(ERR_ALL_NOT_NIL)) when every battery failed.

    The batteries list is never altered, even at indexes whose slot
    became fatal. An empty Errors is treated as success.
    """
    if err is None:
        return batteries, None

    if not isinstance(err, Errors):
        log.debug("Battery enumeration failed: %s", err)
        return batteries, FatalError(err)

    if batteries is not None and len(batteries) != len(err):
        log.warning(
            "Provider returned %d errors for %d batteries", len(err), len(batteries)
        )

    errors = [_classify(e) for e in err]

    if errors and all(isinstance(e, FatalError) for e in errors):
        log.debug("All %d battery reads failed", len(errors))
        return None, FatalError(ERR_ALL_NOT_NIL)

    if all(e is None for e in errors):
        return batteries, None

    return batteries, Errors(errors)


class BatteryManager:
    """Reads batteries through the preferred supported provider.

    Providers are kept in priority order; the first one reporting
    is_supported() serves every read.
    """

    def __init__(self):
        self._providers: List[BatteryProvider] = []

    def register_provider(self, provider: BatteryProvider) -> None:
        """Register a battery provider, maintaining priority order."""
        self._providers.append(provider)
        self._providers.sort(key=lambda p: p.priority)

    @property
    def providers(self) -> List[BatteryProvider]:
        return list(self._providers)

    @property
    def provider(self) -> Optional[BatteryProvider]:
        """The provider that will serve reads, or None."""
        for provider in self._providers:
            try:
                if provider.is_supported():
                    return provider
            except Exception:
                log.debug("Support check failed for provider %s", provider.name, exc_info=True)
        return None

    def get(self, index: int) -> Tuple[Optional[Battery], DeviceError]:
        """Read and classify the battery at ``index``."""
        provider = self.provider
        if provider is None:
            return None, FatalError(NoProviderError("No battery provider available"))

        try:
            battery, err = provider.read_one(index)
        except Exception as e:
            log.debug("Battery read failed for index %d via %s", index, provider.name, exc_info=True)
            battery, err = None, e
        return reduce_one(battery, err)

    def get_all(self) -> Tuple[Optional[List[Optional[Battery]]], Optional[BaseException]]:
        """Read and classify every battery."""
        provider = self.provider
        if provider is None:
            return [], FatalError(NoProviderError("No battery provider available"))

        try:
            batteries, err = provider.read_all()
        except Exception as e:
            log.debug("Battery enumeration failed via %s", provider.name, exc_info=True)
            batteries, err = [], e
        return reduce_all(batteries, err)

    def close(self) -> None:
        """Clean up all providers."""
        for provider in self._providers:
            try:
                provider.close()
            except Exception:
                log.debug("Closing provider %s failed", provider.name, exc_info=True)
