"""Domain types for target resolution, field geometry and chart invocation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from pydantic import BaseModel, ConfigDict

# Label used for the chart when no valid object name was supplied.
COORDINATES_ONLY_NAME = "Specified coordinates"


class RawRequest(BaseModel):
    """Query parameters exactly as received from the transport layer."""

    model_config = ConfigDict(frozen=True)

    ra: str | None = None
    dec: str | None = None
    target_name: str | None = None
    field_width: str | None = None
    field_height: str | None = None
    show_detector: str | None = None
    detector_width: str | None = None
    detector_height: str | None = None
    invert: str | None = None


@dataclass(frozen=True)
class DirectCoordinates:
    ra: str
    dec: str


@dataclass(frozen=True)
class ResolvedByName:
    ra: str
    dec: str
    reply: str


TargetOutcome = DirectCoordinates | ResolvedByName


@dataclass(frozen=True)
class RawCoordinates:
    """Coordinates as captured from a name-resolution reply."""

    ra: str
    dec: str
    reply: str


@dataclass(frozen=True)
class NotFound:
    reply: str


@dataclass(frozen=True)
class ResolvedTarget:
    """Target with canonical sexagesimal coordinates (J2000)."""

    name: str
    ra: str
    dec: str


@dataclass(frozen=True)
class FieldGeometry:
    """Chart and detector dimensions in arcminutes."""

    width: float
    height: float
    show_detector: bool = False
    detector_width: float | None = None
    detector_height: float | None = None


@dataclass(frozen=True)
class InvocationSpec:
    target: ResolvedTarget
    geometry: FieldGeometry
    invert: bool = False


@dataclass(frozen=True)
class PersistenceDirective:
    """A validated parameter the client should remember for its next request."""

    name: str
    value: str


@dataclass(frozen=True)
class ChartResult:
    image: bytes
    target: ResolvedTarget
    directives: tuple[PersistenceDirective, ...] = field(default_factory=tuple)


class NameResolver(Protocol):
    def resolve(self, name: str) -> RawCoordinates | NotFound: ...


class ImageGenerator(Protocol):
    def render(self, spec: InvocationSpec) -> bytes: ...
