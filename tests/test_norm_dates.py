from datetime import date

from common.norm.dates import InvalidDate, coerce_date, parse_date_iso


def test_parse_date_iso_basic():
    assert parse_date_iso("2001-09-14") == date(2001, 9, 14)


def test_parse_date_iso_with_time_part():
    assert parse_date_iso("2001-09-14T08:30:00Z") == date(2001, 9, 14)
    assert parse_date_iso("2001-09-14 08:30") == date(2001, 9, 14)


def test_parse_date_iso_invalid():
    assert parse_date_iso("2001-13-01") is None
    assert parse_date_iso("14/09/2001") is None
    assert parse_date_iso("yesterday") is None


def test_coerce_date_absent_is_none():
    assert coerce_date(None) is None
    assert coerce_date("") is None


def test_coerce_date_unparsable_keeps_marker():
    assert coerce_date("not a date") == InvalidDate("not a date")
    assert coerce_date(["2001-09-14", "2002-01-01"]) == InvalidDate(["2001-09-14", "2002-01-01"])
