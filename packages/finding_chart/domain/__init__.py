from packages.finding_chart.domain.errors import (
    ChartGenerationFailed,
    CoordinateParseError,
    DetectorHeightParseError,
    DetectorWidthParseError,
    FieldHeightParseError,
    FieldWidthParseError,
    FindingChartError,
    InvalidNameSyntax,
    MissingTarget,
    NameResolutionFailed,
    NameServiceUnavailable,
)
from packages.finding_chart.domain.models import (
    COORDINATES_ONLY_NAME,
    ChartResult,
    DirectCoordinates,
    FieldGeometry,
    ImageGenerator,
    InvocationSpec,
    NameResolver,
    NotFound,
    PersistenceDirective,
    RawCoordinates,
    RawRequest,
    ResolvedByName,
    ResolvedTarget,
    TargetOutcome,
)

__all__ = [
    "COORDINATES_ONLY_NAME",
    "ChartGenerationFailed",
    "ChartResult",
    "CoordinateParseError",
    "DetectorHeightParseError",
    "DetectorWidthParseError",
    "DirectCoordinates",
    "FieldGeometry",
    "FieldHeightParseError",
    "FieldWidthParseError",
    "FindingChartError",
    "ImageGenerator",
    "InvalidNameSyntax",
    "InvocationSpec",
    "MissingTarget",
    "NameResolutionFailed",
    "NameResolver",
    "NameServiceUnavailable",
    "NotFound",
    "PersistenceDirective",
    "RawCoordinates",
    "RawRequest",
    "ResolvedByName",
    "ResolvedTarget",
    "TargetOutcome",
]
