"""Minimal HTML error page returned when a chart request fails."""

from __future__ import annotations

import html

from packages.finding_chart.domain.errors import FindingChartError


def render_error_page(error: FindingChartError, contact_email: str) -> str:
    title = html.escape(error.title)
    parts = [
        "<!DOCTYPE html>",
        "<html>",
        f"<head><meta charset=\"utf-8\"><title>{title}</title></head>",
        "<body>",
        f"<h1>{title}</h1>",
        f"<p>{html.escape(error.message)}</p>",
    ]
    if error.offending_input:
        parts.append(f"<pre>{html.escape(error.offending_input)}</pre>")
    contact = html.escape(contact_email)
    parts += [
        "<p>If you think this is a bug, please contact "
        f"<a href=\"mailto:{contact}\">{contact}</a>.</p>",
        "</body>",
        "</html>",
    ]
    return "\n".join(parts)
