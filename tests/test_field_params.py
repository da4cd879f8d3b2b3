from __future__ import annotations

import pytest

from packages.finding_chart.application.field_params import (
    DEFAULT_FIELD_WIDTH,
    MAX_FIELD_WIDTH,
    format_arcmin,
    validate_field_params,
)
from packages.finding_chart.domain.errors import (
    DetectorHeightParseError,
    DetectorWidthParseError,
    FieldHeightParseError,
    FieldWidthParseError,
)
from packages.finding_chart.domain.models import PersistenceDirective, RawRequest


def test_blank_width_defaults_without_directive() -> None:
    geometry, directives = validate_field_params(RawRequest(field_width="  "))

    assert geometry.width == DEFAULT_FIELD_WIDTH == 40
    assert geometry.height == 40
    assert directives == []


def test_width_above_maximum_is_clamped() -> None:
    geometry, directives = validate_field_params(RawRequest(field_width="100"))

    assert geometry.width == MAX_FIELD_WIDTH == 75
    assert geometry.height == 75
    assert directives == [PersistenceDirective("field_width", "75")]


@pytest.mark.parametrize("raw", ["abc", "-10", "1e2", ".5", "12.", "12,5"])
def test_malformed_width_is_an_error(raw: str) -> None:
    with pytest.raises(FieldWidthParseError):
        validate_field_params(RawRequest(field_width=raw))


def test_malformed_height_is_an_error() -> None:
    with pytest.raises(FieldHeightParseError):
        validate_field_params(RawRequest(field_width="20", field_height="twenty"))


def test_explicit_height_is_kept() -> None:
    geometry, directives = validate_field_params(
        RawRequest(field_width=" 20 ", field_height="12.5")
    )

    assert (geometry.width, geometry.height) == (20, 12.5)
    assert directives == [
        PersistenceDirective("field_width", "20"),
        PersistenceDirective("field_height", "12.5"),
    ]


def test_detector_requires_width() -> None:
    with pytest.raises(DetectorWidthParseError):
        validate_field_params(RawRequest(show_detector="1", detector_width=""))


def test_detector_height_defaults_to_width() -> None:
    geometry, directives = validate_field_params(
        RawRequest(show_detector="1", detector_width="13.3")
    )

    assert geometry.show_detector is True
    assert geometry.detector_width == geometry.detector_height == 13.3
    assert directives == [
        PersistenceDirective("show_detector", "1"),
        PersistenceDirective("detector_width", "13.3"),
    ]


def test_malformed_detector_height_is_an_error() -> None:
    with pytest.raises(DetectorHeightParseError):
        validate_field_params(
            RawRequest(show_detector="1", detector_width="10", detector_height="ten")
        )


def test_detector_values_ignored_when_not_shown() -> None:
    geometry, directives = validate_field_params(
        RawRequest(show_detector="0", detector_width="garbage")
    )

    assert geometry.show_detector is False
    assert geometry.detector_width is None
    assert directives == [PersistenceDirective("show_detector", "0")]


def test_invert_directive_only_when_supplied() -> None:
    _, without = validate_field_params(RawRequest())
    _, with_invert = validate_field_params(RawRequest(invert="1"))

    assert without == []
    assert with_invert == [PersistenceDirective("invert", "1")]


def test_format_arcmin() -> None:
    assert format_arcmin(40.0) == "40"
    assert format_arcmin(12.25) == "12.25"


def test_zero_field_width_is_an_error() -> None:
    with pytest.raises(FieldWidthParseError):
        validate_field_params(RawRequest(field_width="0"))


def test_zero_field_height_is_an_error() -> None:
    with pytest.raises(FieldHeightParseError):
        validate_field_params(RawRequest(field_height="0.0"))


def test_zero_detector_width_is_an_error() -> None:
    with pytest.raises(DetectorWidthParseError):
        validate_field_params(RawRequest(show_detector="1", detector_width="0"))
