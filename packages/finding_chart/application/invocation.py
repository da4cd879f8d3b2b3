"""Build the command line for the external finding-chart generator."""

from __future__ import annotations

import shlex
from dataclasses import dataclass

from packages.finding_chart.application.field_params import format_arcmin
from packages.finding_chart.domain.models import InvocationSpec

# The generator splits each input line on a comma optionally followed by a period.
FIELD_DELIMITER = ",."


@dataclass(frozen=True)
class Invocation:
    argv: tuple[str, ...]
    stdin: str

    @property
    def command_line(self) -> str:
        """Equivalent single shell command, for logs and diagnostics."""
        feed = shlex.join(["printf", "%s\\n", self.stdin.rstrip("\n")])
        return f"{feed} | {shlex.join(self.argv)}"


def input_line(spec: InvocationSpec) -> str:
    target = spec.target
    return FIELD_DELIMITER.join((target.name, target.ra, target.dec)) + "\n"


def build_invocation(spec: InvocationSpec, executable: str, output_dir: str) -> Invocation:
    geometry = spec.geometry
    argv = [
        executable,
        "--directory",
        output_dir,
        "--stdout",
        "--quiet",
        "--height",
        format_arcmin(geometry.height),
        "--width",
        format_arcmin(geometry.width),
    ]
    if geometry.show_detector and geometry.detector_width is not None:
        detector_height = geometry.detector_height or geometry.detector_width
        argv += [
            "--detector-width",
            format_arcmin(geometry.detector_width),
            "--detector-height",
            format_arcmin(detector_height),
        ]
    if spec.invert:
        argv.append("--invert")
    return Invocation(argv=tuple(argv), stdin=input_line(spec))
