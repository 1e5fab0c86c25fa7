"""Unit tests for resume date formatting."""

import pytest

from termresume.utils.dates import date_range, format_date


@pytest.mark.unit
@pytest.mark.parametrize(
    "date, expected",
    [
        ("", "Present"),
        (None, "Present"),
        ("2019", "2019"),
        ("2021-03", "Mar 2021"),
        ("2021-12-31", "Dec 2021"),
        ("2021-13", "2021-13"),
        ("Spring 2020", "Spring 2020"),
    ],
)
def test_format_date(date, expected):
    assert format_date(date) == expected


@pytest.mark.unit
def test_date_range_open_ended():
    assert date_range("2021-03", "") == "Mar 2021–Present"


@pytest.mark.unit
def test_date_range_years():
    assert date_range("2005", "2009") == "2005–2009"
