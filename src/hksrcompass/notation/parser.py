"""Parser for compass notation strings such as ``0-1,3+2,5+0/om``."""

from __future__ import annotations

import re

from ..models.compass import Compass, Ring, RingGroup

# <location><signed speed>, location unsigned, speed always signed
_RING_PATTERN = re.compile(r"([0-9]+)([+-][0-9]+)")


class NotationError(ValueError):
    """Raised for text that is not valid compass notation."""


def _parse_ring(field: str, label: str) -> Ring:
    match = _RING_PATTERN.fullmatch(field)
    if match is None:
        raise NotationError(
            f"Invalid {label} ring {field!r}: expected <location><+|-><speed>, e.g. 3+2"
        )
    return Ring(location=int(match.group(1)), speed=int(match.group(2)))


def _parse_ring_groups(text: str) -> list[RingGroup]:
    if not text:
        return []

    groups = []
    for position, code in enumerate(text.split(","), start=1):
        if not code:
            raise NotationError(
                f"Empty ring group code at position {position}; unnamed groups cannot be parsed"
            )
        try:
            groups.append(RingGroup.from_short_name(code))
        except ValueError as e:
            raise NotationError(str(e)) from e
    return groups


def parse_notation(text: str) -> Compass:
    """Parse compass notation back into a compass.

    Args:
        text: Notation as produced by ``str(compass)``

    Returns:
        Compass with the parsed rings and ring groups, in the order written

    Raises:
        NotationError: If the text does not follow the notation grammar
    """
    text = text.strip()
    rings_part, sep, groups_part = text.partition("/")
    if not sep:
        raise NotationError(f"Missing '/' between rings and ring groups in {text!r}")

    fields = rings_part.split(",")
    if len(fields) != 3:
        raise NotationError(f"Expected 3 ring fields, got {len(fields)} in {text!r}")

    outer, middle, inner = (
        _parse_ring(field, label) for field, label in zip(fields, ("outer", "middle", "inner"))
    )
    return Compass(
        outer_ring=outer,
        middle_ring=middle,
        inner_ring=inner,
        ring_groups=tuple(_parse_ring_groups(groups_part)),
    )
