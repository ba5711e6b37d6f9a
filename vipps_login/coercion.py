"""Total conversions from raw claim values to typed values.

None of these raise: a missing or malformed value yields the field's
empty value instead.
"""

import datetime
import uuid

# Date layouts accepted for Norwegian formatted dates, tried in order.
NORWEGIAN_DATE_FORMATS = (
    "%Y-%m-%d",
    "%d.%m.%Y",
    "%d/%m/%Y",
)


def parse_string(value: str | None) -> str | None:
    """Return the raw claim value, or None when the claim is absent."""
    return value


def parse_bool(value: str | None) -> bool:
    """Return True only when the value is the literal `true`."""
    if not isinstance(value, str):
        return False
    return value.strip().lower() == "true"


def parse_date(value: str | None) -> datetime.date | None:
    """Parse a date claim using Norwegian date conventions.

    A trailing time part, ISO (``1990-01-31T00:00:00``) or space separated
    (``31.01.1990 00:00:00``), is ignored; no timezone adjustment is applied.

    Returns:
        The parsed date, or None if the value is absent or unparsable.
    """
    if not isinstance(value, str):
        return None
    text = value.strip().split("T", 1)[0]
    text = text.split(maxsplit=1)[0] if text else text
    for fmt in NORWEGIAN_DATE_FORMATS:
        try:
            return datetime.datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def parse_subject(value: str | None) -> uuid.UUID | None:
    """Parse the subject identifier, or None if it is not UUID shaped."""
    if not isinstance(value, str):
        return None
    try:
        return uuid.UUID(value.strip())
    except ValueError:
        return None
