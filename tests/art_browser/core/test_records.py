import dataclasses

import pytest

from art_browser.core.records import UNKNOWN, Record, normalize_row


def test_normalize_row_trims_and_defaults_blanks():
    record = normalize_row(
        {
            "Neighbourhood": "  Downtown ",
            "Type": "",
            "YearOfInstallation": " 1995 ",
            "geo_point_2d": "49.28,-123.12",
            "SiteName": "ignored",
        }
    )

    assert record == Record(
        neighbourhood="Downtown",
        art_type=UNKNOWN,
        year_of_installation="1995",
        geo_point_2d="49.28,-123.12",
    )


def test_normalize_row_missing_columns():
    record = normalize_row({})

    assert record.neighbourhood == UNKNOWN
    assert record.art_type == UNKNOWN
    assert record.year_of_installation is None
    assert record.geo_point_2d is None


def test_normalize_row_treats_nan_as_absent():
    record = normalize_row({"Neighbourhood": float("nan"), "YearOfInstallation": float("nan")})

    assert record.neighbourhood == UNKNOWN
    assert record.year_of_installation is None


def test_record_is_immutable():
    record = Record(neighbourhood="Downtown")

    with pytest.raises(dataclasses.FrozenInstanceError):
        record.neighbourhood = "West End"
