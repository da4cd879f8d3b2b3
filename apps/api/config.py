from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass

from packages.finding_chart.infrastructure.chart_generator import (
    GENERATOR_EXECUTABLE,
    TIMEOUT_SECONDS as CHART_TIMEOUT_SECONDS,
)
from packages.finding_chart.infrastructure.sesame_client import (
    SESAME_URL,
    TIMEOUT_SECONDS as SESAME_TIMEOUT_SECONDS,
)

DEFAULT_CONTACT_EMAIL = "webmaster@localhost"


def _to_bool(value: str, default: bool) -> bool:
    if not value:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True)
class Settings:
    log_level: str
    sesame_url: str
    sesame_timeout: float
    verify_ssl: bool
    chart_generator: str
    chart_output_dir: str
    chart_timeout: float
    contact_email: str


def get_settings() -> Settings:
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        sesame_url=os.getenv("SESAME_URL", SESAME_URL),
        sesame_timeout=float(os.getenv("SESAME_TIMEOUT", str(SESAME_TIMEOUT_SECONDS))),
        verify_ssl=_to_bool(os.getenv("REQUESTS_VERIFY_SSL", "true"), True),
        chart_generator=os.getenv("CHART_GENERATOR", GENERATOR_EXECUTABLE),
        chart_output_dir=os.getenv("CHART_OUTPUT_DIR", tempfile.gettempdir()),
        chart_timeout=float(os.getenv("CHART_TIMEOUT", str(CHART_TIMEOUT_SECONDS))),
        contact_email=os.getenv("CONTACT_EMAIL", DEFAULT_CONTACT_EMAIL),
    )
