"""Abstract base class for battery providers."""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple

from batteryinfo.core.types import Battery

ReadOneResult = Tuple[Optional[Battery], Optional[BaseException]]
ReadAllResult = Tuple[Optional[List[Optional[Battery]]], Optional[BaseException]]


class BatteryProvider(ABC):
    """A platform source of raw battery readings.

    Readers are best-effort: they return whatever they could read
    together with an error describing what they could not. The manager
    classifies those errors; providers should not try to.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name (e.g., 'sysfs')."""
        ...

    @property
    def priority(self) -> int:
        """Lower = preferred."""
        return 50

    def is_supported(self) -> bool:
        """Whether this provider can run on the current host."""
        return True

    @abstractmethod
    def read_one(self, index: int) -> ReadOneResult:
        """Read the battery at ``index``.

        Returns (battery, None) on success, (battery, PartialError) when
        some fields failed, or (None, error) when the battery could not be
        read at all.
        """
        ...

    @abstractmethod
    def read_all(self) -> ReadAllResult:
        """Enumerate and read every battery.

        Returns (batteries, None), (batteries, Errors) with one slot per
        battery, or ([], error) when enumeration itself failed.
        """
        ...

    def close(self) -> None:
        """Clean up resources."""
        pass


class FunctionProvider(BatteryProvider):
    """Wraps a pair of plain reader callables as a provider."""

    def __init__(
        self,
        read_one: Callable[[int], ReadOneResult],
        read_all: Callable[[], ReadAllResult],
        name: str = "function",
        priority: int = 50,
    ):
        self._read_one = read_one
        self._read_all = read_all
        self._name = name
        self._priority = priority

    @property
    def name(self) -> str:
        return self._name

    @property
    def priority(self) -> int:
        return self._priority

    def read_one(self, index: int) -> ReadOneResult:
        return self._read_one(index)

    def read_all(self) -> ReadAllResult:
        return self._read_all()
