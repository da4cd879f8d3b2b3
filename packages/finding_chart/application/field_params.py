"""Validate chart and detector dimensions (arcminutes)."""

from __future__ import annotations

import re

from packages.finding_chart.application.sanitizer import parse_flag
from packages.finding_chart.domain.errors import (
    DetectorHeightParseError,
    DetectorWidthParseError,
    FieldHeightParseError,
    FieldWidthParseError,
    FindingChartError,
)
from packages.finding_chart.domain.models import FieldGeometry, PersistenceDirective, RawRequest

DEFAULT_FIELD_WIDTH = 40.0
MAX_FIELD_WIDTH = 75.0

# Unsigned decimal: no exponent, no bare leading point.
_NUMBER_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?")


def format_arcmin(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _is_blank(raw: str | None) -> bool:
    return raw is None or raw.strip() == ""


def parse_number(raw: str, error: type[FindingChartError], label: str) -> float:
    text = raw.strip()
    if not _NUMBER_RE.fullmatch(text):
        raise error(
            f"The {label} must be a plain number of arcminutes, e.g. 12 or 12.5.",
            offending_input=raw,
        )
    value = float(text)
    # The generator divides by these sizes.
    if value == 0.0:
        raise error(f"The {label} must be greater than zero.", offending_input=raw)
    return value


def validate_field_params(
    raw: RawRequest,
) -> tuple[FieldGeometry, list[PersistenceDirective]]:
    """Return the chart geometry plus directives for the values the client supplied.

    Blank values fall back to defaults and produce no directive; a non-blank
    value that does not match the number grammar is always an error.
    """
    directives: list[PersistenceDirective] = []

    if _is_blank(raw.field_width):
        width = DEFAULT_FIELD_WIDTH
    else:
        width = min(
            parse_number(raw.field_width, FieldWidthParseError, "field width"),
            MAX_FIELD_WIDTH,
        )
        directives.append(PersistenceDirective("field_width", format_arcmin(width)))

    if _is_blank(raw.field_height):
        height = width
    else:
        height = parse_number(raw.field_height, FieldHeightParseError, "field height")
        directives.append(PersistenceDirective("field_height", format_arcmin(height)))

    show_detector = parse_flag(raw.show_detector)
    if not _is_blank(raw.show_detector):
        directives.append(PersistenceDirective("show_detector", "1" if show_detector else "0"))

    detector_width: float | None = None
    detector_height: float | None = None
    if show_detector:
        # Required once the outline is requested; there is no default size.
        detector_width = parse_number(
            raw.detector_width or "", DetectorWidthParseError, "detector width"
        )
        directives.append(
            PersistenceDirective("detector_width", format_arcmin(detector_width))
        )
        if _is_blank(raw.detector_height):
            detector_height = detector_width
        else:
            detector_height = parse_number(
                raw.detector_height, DetectorHeightParseError, "detector height"
            )
            directives.append(
                PersistenceDirective("detector_height", format_arcmin(detector_height))
            )

    if not _is_blank(raw.invert):
        directives.append(PersistenceDirective("invert", "1" if parse_flag(raw.invert) else "0"))

    geometry = FieldGeometry(
        width=width,
        height=height,
        show_detector=show_detector,
        detector_width=detector_width,
        detector_height=detector_height,
    )
    return geometry, directives
