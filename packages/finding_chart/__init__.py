"""Finding chart request pipeline: target resolution and chart generator invocation."""

from packages.finding_chart.application.chart_service import build_finding_chart
from packages.finding_chart.domain import ChartResult, FindingChartError, RawRequest

__all__ = ["ChartResult", "FindingChartError", "RawRequest", "build_finding_chart"]
