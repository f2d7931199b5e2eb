"""Data models for the navigation compass."""

from .compass import (
    Compass,
    CompassValidationError,
    EmptyRingGroupsError,
    InvalidSpeedError,
    OutOfRangeLocationError,
    Ring,
    RingGroup,
    UnsupportedRingGroupPatternError,
    is_ring_group_supported,
    standardize,
    to_notation,
)
from .spec import CompassSpec, RingSpec, RingsSpec, load_compass_spec

__all__ = [
    "Compass",
    "CompassValidationError",
    "EmptyRingGroupsError",
    "InvalidSpeedError",
    "OutOfRangeLocationError",
    "Ring",
    "RingGroup",
    "UnsupportedRingGroupPatternError",
    "is_ring_group_supported",
    "standardize",
    "to_notation",
    "CompassSpec",
    "RingSpec",
    "RingsSpec",
    "load_compass_spec",
]
