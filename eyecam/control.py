"""Device control descriptions.

A control's state is a plain value: ``None`` for stateless controls, or a
``str``, ``bool`` or ``float``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Union

MenuItem = Union[str, float]


class Flags(IntFlag):
    """Control state flags."""

    NONE = 0x000
    READ = 0x001
    WRITE = 0x002


@dataclass(frozen=True)
class Stateless:
    """Control without a state, such as a button."""


@dataclass(frozen=True)
class Boolean:
    """On/off switch."""


@dataclass(frozen=True)
class Number:
    """Numerical control; ``range`` is inclusive on both ends."""

    range: tuple[float, float]
    step: float

    def __post_init__(self) -> None:
        low, high = self.range
        object.__setattr__(self, "range", (float(low), float(high)))
        object.__setattr__(self, "step", float(self.step))


@dataclass(frozen=True)
class Text:
    """String control."""


@dataclass(frozen=True)
class Bitmask:
    """Bit field control."""


@dataclass(frozen=True)
class Menu:
    """Menu holding any number of string or numeric items."""

    items: tuple[MenuItem, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


ControlType = Union[Stateless, Boolean, Number, Text, Bitmask, Menu]


@dataclass(frozen=True)
class Descriptor:
    """A device control: identifier, name, state type and access flags."""

    id: int
    name: str
    kind: ControlType
    flags: Flags = Flags.NONE

    def readable(self) -> bool:
        """True if the control value can be read."""
        return Flags.READ in self.flags

    def writable(self) -> bool:
        """True if the control value can be written."""
        return Flags.WRITE in self.flags