import datetime
import uuid

import pytest

from vipps_login.coercion import parse_bool, parse_date, parse_string, parse_subject


def test_parse_string():
    assert parse_string("Ola") == "Ola"
    assert parse_string("") == ""
    assert parse_string(None) is None


@pytest.mark.parametrize("value", ["true", "True", " TRUE "])
def test_parse_bool_true(value):
    assert parse_bool(value) is True


@pytest.mark.parametrize("value", ["false", "yes", "1", "", "truthy", None])
def test_parse_bool_false(value):
    assert parse_bool(value) is False


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1990-01-31", datetime.date(1990, 1, 31)),
        ("31.01.1990", datetime.date(1990, 1, 31)),
        ("1.2.1990", datetime.date(1990, 2, 1)),
        ("31/01/1990", datetime.date(1990, 1, 31)),
        ("1990-01-31T00:00:00", datetime.date(1990, 1, 31)),
        ("31.01.1990 00:00:00", datetime.date(1990, 1, 31)),
        ("  31.01.1990   12:30 ", datetime.date(1990, 1, 31)),
    ],
)
def test_parse_date(value, expected):
    assert parse_date(value) == expected


@pytest.mark.parametrize("value", [None, "", "01/31/1990", "1990-02-30", "soon"])
def test_parse_date_unparsable(value):
    assert parse_date(value) is None


def test_parse_subject():
    value = "3fa85f64-5717-4562-b3fc-2c963f66afa6"
    assert parse_subject(value) == uuid.UUID(value)
    assert parse_subject("3fa85f64") is None
    assert parse_subject(None) is None
