"""Request pipeline: sanitize, resolve, normalize, validate, render."""

from __future__ import annotations

import logging

from packages.finding_chart.application.coordinates import normalize
from packages.finding_chart.application.field_params import validate_field_params
from packages.finding_chart.application.sanitizer import FieldClass, parse_flag, sanitize
from packages.finding_chart.application.target_resolver import display_name, resolve_target
from packages.finding_chart.domain.models import (
    ChartResult,
    ImageGenerator,
    InvocationSpec,
    NameResolver,
    RawRequest,
)

logger = logging.getLogger(__name__)


def build_finding_chart(
    raw: RawRequest,
    resolver: NameResolver,
    generator: ImageGenerator,
    request_id: str | None = None,
) -> ChartResult:
    """Turn one raw request into chart image bytes.

    The first FindingChartError raised by any stage ends the request; nothing
    after it runs, so no image is generated for a request with any bad input.
    """
    ra = sanitize(raw.ra, FieldClass.NUMERIC)
    dec = sanitize(raw.dec, FieldClass.NUMERIC)
    name = sanitize(raw.target_name, FieldClass.NAME)

    outcome = resolve_target(ra, dec, name, resolver)
    target = normalize(outcome.ra, outcome.dec, name=display_name(name))
    logger.info(
        "target_ready",
        extra={"request_id": request_id, "event": "normalize", "target": target.name},
    )

    geometry, directives = validate_field_params(raw)
    spec = InvocationSpec(target=target, geometry=geometry, invert=parse_flag(raw.invert))

    image = generator.render(spec)
    logger.info(
        "chart_generated",
        extra={"request_id": request_id, "event": "render", "target": target.name},
    )
    return ChartResult(image=image, target=target, directives=tuple(directives))
