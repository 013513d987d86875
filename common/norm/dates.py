from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Union
import re

ISO_DATE_RE = re.compile(
    r"""
    (?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})
    (?:[T\ ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?)?
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class InvalidDate:
    """Marker for a date of birth that could not be parsed.

    Coercion never rejects a value; the marker travels with the record and
    the store refuses it on insert.
    """

    raw: Any


def parse_date_iso(raw: str) -> Optional[date]:
    m = ISO_DATE_RE.fullmatch(raw.strip())
    if not m:
        return None

    try:
        return date(int(m.group("year")), int(m.group("month")), int(m.group("day")))
    except ValueError:
        return None


def coerce_date(raw: Any) -> Union[date, InvalidDate, None]:
    if raw is None or raw == "":
        return None
    if not isinstance(raw, str):
        return InvalidDate(raw)
    parsed = parse_date_iso(raw)
    if parsed is None:
        return InvalidDate(raw)
    return parsed
