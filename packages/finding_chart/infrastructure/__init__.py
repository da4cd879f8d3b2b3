from packages.finding_chart.infrastructure.chart_generator import SubprocessChartGenerator
from packages.finding_chart.infrastructure.sesame_client import SesameResolver, parse_jpos

__all__ = ["SesameResolver", "SubprocessChartGenerator", "parse_jpos"]
