"""Compass value model: rings, ring groups and standardization."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Iterable, Optional

# Number of discrete positions around the dial (60 degree steps)
POSITIONS = 6


class RingGroup(IntFlag):
    """Rings that rotate together, encoded as a 3-bit mask.

    Only six of the eight bit patterns are meaningful. The empty set, the
    full set and anything outside the three ring bits have no name.
    """

    INNER = 0b001
    MIDDLE = 0b010
    OUTER = 0b100
    MIDDLE_INNER = MIDDLE | INNER
    OUTER_INNER = OUTER | INNER
    OUTER_MIDDLE = OUTER | MIDDLE

    @property
    def long_name(self) -> str:
        """Canonical long name, or "" for an unnamed pattern."""
        return _LONG_NAMES.get(int(self), "")

    @property
    def short_name(self) -> str:
        """Compact code used by compass notation, or "" for an unnamed pattern."""
        return _SHORT_NAMES.get(int(self), "")

    @property
    def is_named(self) -> bool:
        return int(self) in _LONG_NAMES

    @classmethod
    def named(cls) -> list[RingGroup]:
        """The six named groups in ascending mask order."""
        return [cls(value) for value in sorted(_LONG_NAMES)]

    @classmethod
    def from_short_name(cls, code: str) -> RingGroup:
        for value, short in _SHORT_NAMES.items():
            if short == code:
                return cls(value)
        raise ValueError(f"Unknown ring group code: {code!r}")

    @classmethod
    def from_name(cls, name: str) -> RingGroup:
        """Look up a group by long name, case-insensitively."""
        wanted = name.lower()
        for value, long in _LONG_NAMES.items():
            if long.lower() == wanted:
                return cls(value)
        raise ValueError(f"Unknown ring group name: {name!r}")

    def __str__(self) -> str:
        return self.long_name


_LONG_NAMES: dict[int, str] = {
    RingGroup.OUTER: "Outer",
    RingGroup.MIDDLE: "Middle",
    RingGroup.INNER: "Inner",
    RingGroup.OUTER_MIDDLE: "OuterMiddle",
    RingGroup.OUTER_INNER: "OuterInner",
    RingGroup.MIDDLE_INNER: "MiddleInner",
}

_SHORT_NAMES: dict[int, str] = {
    RingGroup.OUTER: "o",
    RingGroup.MIDDLE: "m",
    RingGroup.INNER: "i",
    RingGroup.OUTER_MIDDLE: "om",
    RingGroup.OUTER_INNER: "oi",
    RingGroup.MIDDLE_INNER: "mi",
}


class CompassValidationError(ValueError):
    """Base class for compass values that cannot be trusted."""


class OutOfRangeLocationError(CompassValidationError):
    """A ring location that does not reduce to one of the six positions."""


class InvalidSpeedError(CompassValidationError):
    """A ring speed that is not a whole number of 60 degree steps."""


class UnsupportedRingGroupPatternError(CompassValidationError):
    """A ring group bit pattern with no defined name."""


class EmptyRingGroupsError(CompassValidationError):
    """A compass with no ring groups cannot be rotated at all."""


@dataclass(frozen=True)
class Ring:
    """One ring of the compass.

    location: clockwise steps (60 degrees each) from the target position,
        which is the left of the dial. 0 is the target, 3 points right.
    speed: steps turned per rotation; positive is clockwise, negative is
        counter-clockwise.
    """

    location: int = 0
    speed: int = 0


def _floor_mod(value: int) -> int:
    return value % POSITIONS


def _trunc_mod(value: int) -> int:
    # Remainder keeps the sign of the dividend, so -7 -> -1
    remainder = abs(value) % POSITIONS
    return -remainder if value < 0 else remainder


def _standardize_ring(ring: Ring) -> Ring:
    return Ring(location=_floor_mod(ring.location), speed=_trunc_mod(ring.speed))


def _is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Compass:
    """Three rings plus the ring groups that can be rotated together.

    Instances are immutable; ``standardize`` returns a new compass.
    """

    outer_ring: Ring = field(default_factory=Ring)
    middle_ring: Ring = field(default_factory=Ring)
    inner_ring: Ring = field(default_factory=Ring)
    ring_groups: tuple[RingGroup, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of groups but store an immutable tuple
        object.__setattr__(
            self, "ring_groups", tuple(RingGroup(rg) for rg in self.ring_groups)
        )

    @property
    def rings(self) -> tuple[Ring, Ring, Ring]:
        """Rings in notation order: outer, middle, inner."""
        return (self.outer_ring, self.middle_ring, self.inner_ring)

    def validate(self) -> None:
        """Check the compass can be standardized meaningfully.

        Raises:
            OutOfRangeLocationError: a location is not an integer
            InvalidSpeedError: a speed is not an integer
            EmptyRingGroupsError: there are no ring groups
            UnsupportedRingGroupPatternError: a ring group has no name
        """
        for label, ring in zip(("outer", "middle", "inner"), self.rings):
            if not _is_integer(ring.location):
                raise OutOfRangeLocationError(
                    f"{label} ring location {ring.location!r} is not a whole position"
                )
            if not _is_integer(ring.speed):
                raise InvalidSpeedError(
                    f"{label} ring speed {ring.speed!r} is not a whole number of steps"
                )

        if not self.ring_groups:
            raise EmptyRingGroupsError("compass has no ring groups")

        for rg in self.ring_groups:
            if not rg.is_named:
                raise UnsupportedRingGroupPatternError(
                    f"ring group pattern {int(rg):#05b} has no defined name"
                )

    def is_ring_group_supported(self, rg: RingGroup) -> bool:
        return is_ring_group_supported(self, rg)

    def standardize(self) -> Compass:
        return standardize(self)

    def __str__(self) -> str:
        return to_notation(self)


def sort_ring_groups(ring_groups: Iterable[RingGroup]) -> list[RingGroup]:
    """Sort groups by mask value and drop duplicates."""
    result: list[RingGroup] = []
    for rg in sorted(ring_groups):
        if result and result[-1] == rg:
            continue
        result.append(rg)
    return result


def is_ring_group_supported(compass: Optional[Compass], rg: RingGroup) -> bool:
    """Whether ``rg`` is one of the compass's ring groups. False for None."""
    if compass is None:
        return False
    return rg in compass.ring_groups


def standardize(compass: Optional[Compass]) -> Optional[Compass]:
    """Return the canonical form of ``compass``, or None for None.

    Locations are reduced into [0, 6). Speeds keep their sign and are only
    reduced to (-6, 6). Ring groups are sorted by mask and deduplicated.
    """
    if compass is None:
        return None
    return Compass(
        outer_ring=_standardize_ring(compass.outer_ring),
        middle_ring=_standardize_ring(compass.middle_ring),
        inner_ring=_standardize_ring(compass.inner_ring),
        ring_groups=tuple(sort_ring_groups(compass.ring_groups)),
    )


def to_notation(compass: Optional[Compass]) -> str:
    """Serialize to compass notation, e.g. ``0-1,3+2,5+0/om``. "" for None."""
    if compass is None:
        return ""

    std = standardize(compass)
    rings = ",".join(f"{ring.location}{ring.speed:+d}" for ring in std.rings)
    groups = ",".join(rg.short_name for rg in std.ring_groups)
    return f"{rings}/{groups}"
