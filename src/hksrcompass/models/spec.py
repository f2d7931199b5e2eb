"""Pydantic models for compass description parsing and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator, model_validator

from .compass import Compass, Ring, RingGroup


class RingSpec(BaseModel):
    """Specification for a single ring."""

    model_config = ConfigDict(extra="forbid")

    location: StrictInt = Field(default=0, description="Clockwise 60 degree steps from the target")
    speed: StrictInt = Field(default=0, description="60 degree steps per rotation, negative = CCW")

    def to_ring(self) -> Ring:
        return Ring(location=self.location, speed=self.speed)


class RingsSpec(BaseModel):
    """The three rings of the compass."""

    model_config = ConfigDict(extra="forbid")

    outer: RingSpec = Field(default_factory=RingSpec)
    middle: RingSpec = Field(default_factory=RingSpec)
    inner: RingSpec = Field(default_factory=RingSpec)


class CompassSpec(BaseModel):
    """Top-level description of a compass."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(default=None, description="Optional label for the compass")
    rings: RingsSpec = Field(default_factory=RingsSpec)
    ring_groups: list[RingGroup] = Field(
        default_factory=list, description="Short codes (om) or long names (OuterMiddle)"
    )

    @field_validator("ring_groups", mode="before")
    @classmethod
    def parse_ring_groups(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list):
            return value
        return [_parse_ring_group(item) for item in value]

    @model_validator(mode="after")
    def validate_ring_groups_named(self) -> "CompassSpec":
        for rg in self.ring_groups:
            if not rg.is_named:
                raise ValueError(f"ring group pattern {int(rg)} has no defined name")
        return self

    def to_compass(self) -> Compass:
        """Build the compass value described by this spec."""
        return Compass(
            outer_ring=self.rings.outer.to_ring(),
            middle_ring=self.rings.middle.to_ring(),
            inner_ring=self.rings.inner.to_ring(),
            ring_groups=tuple(self.ring_groups),
        )


def _parse_ring_group(item: Union[str, int, RingGroup]) -> object:
    if isinstance(item, str):
        text = item.strip()
        try:
            return RingGroup.from_short_name(text.lower())
        except ValueError:
            return RingGroup.from_name(text)
    if isinstance(item, bool):
        raise ValueError(f"ring group {item!r} must be a code, name or integer mask")
    if isinstance(item, int):
        return RingGroup(item)
    return item


def load_compass_spec(path: Path) -> CompassSpec:
    """Read and validate a YAML compass description."""
    with open(path) as f:
        data = yaml.safe_load(f)
    return CompassSpec.model_validate(data or {})
