"""Decide between direct coordinates and name resolution for a request."""

from __future__ import annotations

import logging
import re

from packages.finding_chart.application.sanitizer import is_name_like
from packages.finding_chart.domain.errors import (
    InvalidNameSyntax,
    MissingTarget,
    NameResolutionFailed,
)
from packages.finding_chart.domain.models import (
    COORDINATES_ONLY_NAME,
    DirectCoordinates,
    NameResolver,
    NotFound,
    ResolvedByName,
    TargetOutcome,
)

logger = logging.getLogger(__name__)

_SPACES_RE = re.compile(r" +")
_PERIODS_RE = re.compile(r"\.{2,}")
_WHITESPACE_RE = re.compile(r"\s+")


def encode_name(name: str) -> str:
    """Name as sent to the resolver: runs of spaces become one underscore."""
    return _SPACES_RE.sub("_", name.strip())


def display_name(name: str) -> str:
    """Chart label: the supplied name, or a placeholder when it is absent or invalid.

    The label is one line of the generator's input, so every whitespace run
    (newlines included) becomes a single space.
    """
    if is_name_like(name):
        label = _WHITESPACE_RE.sub(" ", name.strip())
        return _PERIODS_RE.sub(".", label)
    return COORDINATES_ONLY_NAME


def resolve_target(
    ra: str,
    dec: str,
    name: str,
    resolver: NameResolver,
) -> TargetOutcome:
    """Return the coordinate source for the request.

    ra and dec are sanitized values and name is the trimmed raw name. Both
    coordinates present always wins over a supplied name. A name is only
    looked up when RA is absent.

    Raises:
        MissingTarget: Neither coordinates nor a name were given.
        InvalidNameSyntax: The name contains characters outside the name grammar.
        NameResolutionFailed: The resolver found no position for the name.
    """
    ra = ra.strip()
    dec = dec.strip()
    if ra and dec:
        return DirectCoordinates(ra=ra, dec=dec)

    if name and not ra:
        if not is_name_like(name):
            raise InvalidNameSyntax(
                "The object name contains characters that are not allowed.",
                offending_input=name,
            )
        encoded = encode_name(name)
        reply = resolver.resolve(encoded)
        if isinstance(reply, NotFound):
            logger.info("name_not_resolved", extra={"event": "resolve", "target": encoded})
            raise NameResolutionFailed(
                f"Could not find coordinates for '{name}'. The name resolver replied:",
                offending_input=reply.reply,
            )
        logger.info("name_resolved", extra={"event": "resolve", "target": encoded})
        return ResolvedByName(ra=reply.ra, dec=reply.dec, reply=reply.reply)

    raise MissingTarget(
        "Enter either an object name or both RA and Dec.",
        offending_input=" ".join(part for part in (ra, dec) if part) or None,
    )
