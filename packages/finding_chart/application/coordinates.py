"""Normalize RA/Dec strings into canonical J2000 sexagesimal form."""

from __future__ import annotations

import re

from astropy import units as u
from astropy.coordinates import Angle, Latitude

from packages.finding_chart.domain.errors import CoordinateParseError
from packages.finding_chart.domain.models import COORDINATES_ONLY_NAME, ResolvedTarget

# '+' is never a sign in RA, so it is treated like whitespace.
_RA_SEPARATORS_RE = re.compile(r"[+\s]+")
_DEC_SEPARATORS_RE = re.compile(r"\s+")
# An interior '+' (after a digit) separates fields; a leading '+' is a sign.
_DEC_INTERIOR_PLUS_RE = re.compile(r"(\d)\+")
# Fractional digits of the seconds field of a three-field sexagesimal value.
_SECONDS_FRACTION_RE = re.compile(r"^[+-]?[^:]*:[^:]*:\d*(?:\.(\d*))?$")


def unify_ra_separators(ra: str) -> str:
    return _RA_SEPARATORS_RE.sub(":", ra.strip())


def unify_dec_separators(dec: str) -> str:
    dec = _DEC_SEPARATORS_RE.sub(":", dec.strip())
    return _DEC_INTERIOR_PLUS_RE.sub(r"\1:", dec, count=1)


def seconds_precision(value: str) -> int | None:
    """Decimal places of the seconds field, or None when the value is not h:m:s or d:m:s."""
    match = _SECONDS_FRACTION_RE.match(value)
    if not match:
        return None
    return len(match.group(1) or "")


def parse_ra(ra: str) -> Angle:
    try:
        angle = Angle(ra, unit=u.hourangle)
    except (ValueError, u.UnitsError) as exc:
        raise CoordinateParseError(
            f"Could not parse RA: {exc}", offending_input=ra
        ) from exc
    if not angle.isscalar:
        raise CoordinateParseError("RA must be a single value.", offending_input=ra)
    hours = float(angle.hour)
    if hours < 0.0 or hours >= 24.0:
        raise CoordinateParseError(
            "RA must be given in hours (0 to 24), not degrees.",
            offending_input=ra,
        )
    return angle


def parse_dec(dec: str) -> Latitude:
    try:
        angle = Latitude(dec, unit=u.deg)
    except (ValueError, u.UnitsError) as exc:
        raise CoordinateParseError(
            f"Could not parse Dec: {exc}", offending_input=dec
        ) from exc
    if not angle.isscalar:
        raise CoordinateParseError("Dec must be a single value.", offending_input=dec)
    return angle


def normalize(ra: str, dec: str, name: str = COORDINATES_ONLY_NAME) -> ResolvedTarget:
    """Parse RA (hours) and Dec (degrees) and return their canonical rendering.

    Sexagesimal input keeps the number of decimal places given for seconds;
    decimal input uses astropy's default precision.

    Raises:
        CoordinateParseError: Either value does not parse, RA is outside
            [0, 24) hours, or Dec is outside [-90, 90] degrees.
    """
    ra = unify_ra_separators(ra)
    dec = unify_dec_separators(dec)
    ra_angle = parse_ra(ra)
    dec_angle = parse_dec(dec)
    ra_text = ra_angle.to_string(
        unit=u.hour, sep=":", pad=True, precision=seconds_precision(ra)
    )
    dec_text = dec_angle.to_string(
        unit=u.deg, sep=":", pad=True, alwayssign=True, precision=seconds_precision(dec)
    )
    return ResolvedTarget(name=name, ra=str(ra_text), dec=str(dec_text))
