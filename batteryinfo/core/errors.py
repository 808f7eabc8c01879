"""Error taxonomy for battery reads.

Readers report failures at three levels, and the reducers in
batteryinfo.core.manager fold them into these types:

- PartialError: some fields of one battery could not be read.
- FatalError: nothing usable exists for one battery or for the whole set.
- Errors: per-battery outcomes for a batch, index-aligned with the
  returned battery list.

Errors are returned as values, not raised, but they are real exceptions
so a caller is free to raise them.
"""

from typing import Iterator, Optional, Sequence, Tuple, Union


def same_error(a: Optional[BaseException], b: Optional[BaseException]) -> bool:
    """Structural comparison of two errors (or Nones).

    Package errors compare field by field. Foreign exceptions are equal
    when they share a type and their args.
    """
    if a is b:
        return True
    if a is None or b is None:
        return False
    if isinstance(a, BatteryError) or isinstance(b, BatteryError):
        return a == b
    return type(a) is type(b) and a.args == b.args


class BatteryError(Exception):
    """Base exception for all batteryinfo errors."""

    def _key(self) -> tuple:
        return self.args

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        mine, theirs = self._key(), other._key()
        return len(mine) == len(theirs) and all(
            same_error(a, b) if isinstance(a, BaseException) or isinstance(b, BaseException)
            else a == b
            for a, b in zip(mine, theirs)
        )

    def __hash__(self):
        return hash((type(self), str(self)))


class InvalidStateError(BatteryError, ValueError):
    """A status label did not name any known State."""

    def __init__(self, label: str):
        super().__init__(label)
        self._label = label

    @property
    def label(self) -> str:
        return self._label

    def __str__(self) -> str:
        return f"Invalid state `{self.label}`"


class AllFieldsFailedError(BatteryError):
    """Every individually tracked field of a battery failed."""


class NoProviderError(BatteryError):
    """No battery provider is registered or supported on this host."""


# Shared payload for every "all fields failed" promotion to FatalError.
ERR_ALL_NOT_NIL = AllFieldsFailedError("All fields had not nil errors")


class PartialError(BatteryError):
    """Per-field read failures for a single battery.

    Each slot holds the error for one Battery field, or None if that field
    was read successfully.
    """

    # (attribute, label used when rendering), in Battery field order
    FIELDS = (
        ("state", "State"),
        ("current", "Current"),
        ("full", "Full"),
        ("design", "Design"),
        ("charge_rate", "ChargeRate"),
        ("voltage", "Voltage"),
        ("design_voltage", "DesignVoltage"),
    )

    def __init__(
        self,
        state: Optional[BaseException] = None,
        current: Optional[BaseException] = None,
        full: Optional[BaseException] = None,
        design: Optional[BaseException] = None,
        charge_rate: Optional[BaseException] = None,
        voltage: Optional[BaseException] = None,
        design_voltage: Optional[BaseException] = None,
    ):
        super().__init__()
        self._slots = (state, current, full, design, charge_rate, voltage, design_voltage)

    @property
    def state(self) -> Optional[BaseException]:
        return self._slots[0]

    @property
    def current(self) -> Optional[BaseException]:
        return self._slots[1]

    @property
    def full(self) -> Optional[BaseException]:
        return self._slots[2]

    @property
    def design(self) -> Optional[BaseException]:
        return self._slots[3]

    @property
    def charge_rate(self) -> Optional[BaseException]:
        return self._slots[4]

    @property
    def voltage(self) -> Optional[BaseException]:
        return self._slots[5]

    @property
    def design_voltage(self) -> Optional[BaseException]:
        return self._slots[6]

    def _key(self) -> tuple:
        return self.slots()

    def slots(self) -> Tuple[Optional[BaseException], ...]:
        """All seven slots in field order."""
        return self._slots

    def all_empty(self) -> bool:
        """True if no field failed."""
        return all(err is None for err in self.slots())

    def all_present(self) -> bool:
        """True if every field failed."""
        return all(err is not None for err in self.slots())

    def __str__(self) -> str:
        parts = [
            f"{label}:{err}"
            for (attr, label), err in zip(self.FIELDS, self.slots())
            if err is not None
        ]
        return "{" + " ".join(parts) + "}"

    def __repr__(self) -> str:
        set_slots = ", ".join(
            f"{attr}={err!r}"
            for (attr, _), err in zip(self.FIELDS, self.slots())
            if err is not None
        )
        return f"PartialError({set_slots})"


class FatalError(BatteryError):
    """No usable data could be retrieved; wraps the underlying cause."""

    def __init__(self, err: BaseException):
        super().__init__(err)
        self._err = err

    @property
    def err(self) -> BaseException:
        return self._err

    def __str__(self) -> str:
        return f"Could not retrieve battery info: `{self.err}`"

    def __repr__(self) -> str:
        return f"FatalError({self.err!r})"


DeviceError = Union[PartialError, FatalError, None]


class Errors(BatteryError):
    """Per-battery errors for a batch read, index-aligned with the batteries.

    A None slot means that battery was read without error.
    """

    def __init__(self, errors: Sequence[Optional[BaseException]] = ()):
        self._errors = tuple(errors)
        super().__init__(*self._errors)

    @property
    def errors(self) -> Tuple[Optional[BaseException], ...]:
        return self._errors

    def _key(self) -> tuple:
        return self.errors

    def __len__(self) -> int:
        return len(self.errors)

    def __getitem__(self, idx):
        return self.errors[idx]

    def __iter__(self) -> Iterator[Optional[BaseException]]:
        return iter(self.errors)

    def __str__(self) -> str:
        return "[" + " ".join("" if err is None else str(err) for err in self.errors) + "]"

    def __repr__(self) -> str:
        return f"Errors({list(self.errors)!r})"
