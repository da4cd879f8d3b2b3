from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from apps.api.main import app, get_generator, get_resolver
from packages.finding_chart.domain.errors import ChartGenerationFailed
from packages.finding_chart.domain.models import InvocationSpec, NotFound, RawCoordinates

NOT_FOUND_REPLY = "<Sesame><INFO>*** Nothing found for <b>Nowhere</b> ***</INFO></Sesame>"


class StubResolver:
    def resolve(self, name: str) -> RawCoordinates | NotFound:
        if name == "M81":
            return RawCoordinates(ra="09:55:33.17", dec="+69:03:55.1", reply="")
        return NotFound(reply=NOT_FOUND_REPLY)


class StubGenerator:
    def __init__(self) -> None:
        self.specs: list[InvocationSpec] = []

    def render(self, spec: InvocationSpec) -> bytes:
        self.specs.append(spec)
        return b"\xff\xd8fake-jpeg"


class FailingGenerator:
    def render(self, spec: InvocationSpec) -> bytes:
        raise ChartGenerationFailed("The finding chart generator exited with status 1.")


@pytest.fixture
def generator() -> StubGenerator:
    return StubGenerator()


@pytest.fixture
def client(generator: StubGenerator) -> Iterator[TestClient]:
    app.dependency_overrides[get_resolver] = StubResolver
    app.dependency_overrides[get_generator] = lambda: generator
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_chart_by_coordinates(client: TestClient, generator: StubGenerator) -> None:
    response = client.get("/finding_chart", params={"ra": "12 30 00", "dec": "+41 16 09"})

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/jpg"
    assert response.content == b"\xff\xd8fake-jpeg"
    assert "set-cookie" not in response.headers
    assert generator.specs[0].target.ra == "12:30:00"


def test_chart_sets_cookies_for_supplied_values(client: TestClient) -> None:
    response = client.get(
        "/finding_chart",
        params={"target": "M81", "field_width": "30", "invert": "1"},
    )

    assert response.status_code == 200
    cookies = response.headers.get_list("set-cookie")
    assert any(c.startswith("field_width=30;") for c in cookies)
    assert any(c.startswith("invert=1;") for c in cookies)
    assert not any(c.startswith("field_height=") for c in cookies)
    assert all("Max-Age=7776000" in c for c in cookies)


def test_unresolved_name_shows_escaped_reply(client: TestClient) -> None:
    response = client.get("/finding_chart", params={"target": "Nowhere"})

    assert response.status_code == 404
    assert response.headers["content-type"].startswith("text/html")
    assert "Could not resolve object name" in response.text
    assert "&lt;b&gt;Nowhere&lt;/b&gt;" in response.text
    assert "<b>Nowhere</b>" not in response.text


def test_bad_field_width_is_html_error(client: TestClient, generator: StubGenerator) -> None:
    response = client.get(
        "/finding_chart",
        params={"ra": "12:00:00", "dec": "+10:00:00", "field_width": "<script>"},
    )

    assert response.status_code == 400
    assert "Invalid field width" in response.text
    assert "&lt;script&gt;" in response.text
    assert "mailto:" in response.text
    assert generator.specs == []


def test_missing_target(client: TestClient) -> None:
    response = client.get("/finding_chart")

    assert response.status_code == 400
    assert "No target specified" in response.text


def test_generator_failure_is_bad_gateway(client: TestClient) -> None:
    app.dependency_overrides[get_generator] = FailingGenerator

    response = client.get("/finding_chart", params={"ra": "1 2 3", "dec": "4 5 6"})

    assert response.status_code == 502
    assert "Finding chart generation failed" in response.text
