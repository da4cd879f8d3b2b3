"""Terminal pipeline errors; each one ends the request with an HTML error page."""

from __future__ import annotations


class FindingChartError(Exception):
    kind = "FindingChartError"
    title = "Finding chart error"
    status_code = 400

    def __init__(self, message: str, offending_input: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.offending_input = offending_input


class MissingTarget(FindingChartError):
    kind = "MissingTarget"
    title = "No target specified"


class InvalidNameSyntax(FindingChartError):
    kind = "InvalidNameSyntax"
    title = "Invalid object name"


class NameResolutionFailed(FindingChartError):
    kind = "NameResolutionFailed"
    title = "Could not resolve object name"
    status_code = 404


class NameServiceUnavailable(FindingChartError):
    kind = "NameServiceUnavailable"
    title = "Name resolver unavailable"
    status_code = 502


class CoordinateParseError(FindingChartError):
    kind = "CoordinateParseError"
    title = "Could not parse coordinates"


class FieldWidthParseError(FindingChartError):
    kind = "FieldWidthParseError"
    title = "Invalid field width"


class FieldHeightParseError(FindingChartError):
    kind = "FieldHeightParseError"
    title = "Invalid field height"


class DetectorWidthParseError(FindingChartError):
    kind = "DetectorWidthParseError"
    title = "Invalid detector width"


class DetectorHeightParseError(FindingChartError):
    kind = "DetectorHeightParseError"
    title = "Invalid detector height"


class ChartGenerationFailed(FindingChartError):
    kind = "ChartGenerationFailed"
    title = "Finding chart generation failed"
    status_code = 502
