"""SESAME name resolver: resolve object name to J2000 sexagesimal (RA, Dec)."""

from __future__ import annotations

import logging
import re
import urllib.parse
from dataclasses import dataclass

import requests

from packages.finding_chart.domain.errors import NameServiceUnavailable
from packages.finding_chart.domain.models import NotFound, RawCoordinates

logger = logging.getLogger(__name__)

# SESAME XML format (-oxp): "<jpos>10:08:22.31 +11:58:01.9</jpos>"
SESAME_JPOS_RE = re.compile(
    r"<jpos>\s*(\d\d:\d\d:\d\d\.?\d*)\s+([+-]?\d\d:\d\d:\d\d\.?\d*)\s*</jpos>"
)

# The encoded name is appended directly after the '?'.
SESAME_URL = "https://cds.unistra.fr/cgi-bin/nph-sesame/-oxp/SN?"
TIMEOUT_SECONDS = 60


def parse_jpos(text: str) -> RawCoordinates | NotFound:
    match = SESAME_JPOS_RE.search(text)
    if not match:
        return NotFound(reply=text)
    return RawCoordinates(ra=match.group(1), dec=match.group(2), reply=text)


@dataclass
class SesameResolver:
    """Resolve names via CDS SESAME (SIMBAD, then NED, then VizieR). No fallbacks."""

    base_url: str = SESAME_URL
    timeout_seconds: float = TIMEOUT_SECONDS
    verify_ssl: bool = True

    def url_for(self, name: str) -> str:
        return f"{self.base_url}{urllib.parse.quote(name, safe='')}"

    def resolve(self, name: str) -> RawCoordinates | NotFound:
        """Look up an underscore-joined name.

        Raises:
            NameServiceUnavailable: On network error or a non-2xx reply.
        """
        url = self.url_for(name)
        try:
            response = requests.get(url, timeout=self.timeout_seconds, verify=self.verify_ssl)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("sesame_request_failed", extra={"event": "resolve", "target": name})
            raise NameServiceUnavailable(
                "The name resolution service could not be reached. "
                "Try again later, or enter coordinates instead.",
                offending_input=str(exc),
            ) from exc
        return parse_jpos(response.text)
