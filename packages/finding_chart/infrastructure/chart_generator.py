"""Run the external finding-chart generator and capture its image output."""

from __future__ import annotations

import logging
import subprocess
import tempfile
from dataclasses import dataclass, field

from packages.finding_chart.application.invocation import build_invocation
from packages.finding_chart.domain.errors import ChartGenerationFailed
from packages.finding_chart.domain.models import InvocationSpec

logger = logging.getLogger(__name__)

GENERATOR_EXECUTABLE = "get_finding_charts.pl"
TIMEOUT_SECONDS = 120


@dataclass
class SubprocessChartGenerator:
    executable: str = GENERATOR_EXECUTABLE
    output_dir: str = field(default_factory=tempfile.gettempdir)
    timeout_seconds: float = TIMEOUT_SECONDS

    def render(self, spec: InvocationSpec) -> bytes:
        """Spawn the generator once and return its stdout unchanged.

        Raises:
            ChartGenerationFailed: The generator is missing, times out, exits
                non-zero or writes nothing.
        """
        invocation = build_invocation(spec, self.executable, self.output_dir)
        logger.debug("chart_command", extra={"event": "render", "command": invocation.command_line})
        try:
            completed = subprocess.run(
                list(invocation.argv),
                input=invocation.stdin.encode("utf-8"),
                capture_output=True,
                timeout=self.timeout_seconds,
                check=False,
            )
        except FileNotFoundError as exc:
            raise ChartGenerationFailed(
                "The finding chart generator is not installed on this server.",
                offending_input=self.executable,
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise ChartGenerationFailed(
                f"The finding chart generator did not finish within {self.timeout_seconds:g} seconds.",
                offending_input=invocation.stdin.strip(),
            ) from exc

        stderr = completed.stderr.decode("utf-8", errors="replace").strip()
        if completed.returncode != 0:
            raise ChartGenerationFailed(
                f"The finding chart generator exited with status {completed.returncode}.",
                offending_input=stderr or invocation.stdin.strip(),
            )
        if not completed.stdout:
            raise ChartGenerationFailed(
                "The finding chart generator produced no image.",
                offending_input=stderr or invocation.stdin.strip(),
            )
        return completed.stdout
