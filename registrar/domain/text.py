"""String helpers shared by the codecs and the domain rules.

All helpers are pure. ``split`` mirrors a line scanner that stops at end of
input, so a trailing delimiter does not produce an extra empty field.
"""

WHITESPACE = " \t\r\n"
MIN_EVENT_YEAR = 2025
DATE_LENGTH = 10


def split(value: str, delimiter: str) -> list[str]:
    """Split ``value`` on every ``delimiter``, keeping empty inner segments."""
    if not value:
        return []
    parts = value.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def trim(value: str) -> str:
    """Strip spaces, tabs, CR and LF from both ends."""
    return value.strip(WHITESPACE)


def to_lower(value: str) -> str:
    """ASCII-only lower-casing."""
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in value)


def is_numeric(value: str) -> bool:
    return bool(value) and all("0" <= c <= "9" for c in value)


def is_valid_date(value: str) -> bool:
    """Check a ``DD-MM-YYYY`` date.

    Day is only checked against 1..31 (no month length or leap year rule) and
    the year has a fixed floor of 2025.
    """
    if len(value) != DATE_LENGTH:
        return False
    if value[2] != "-" or value[5] != "-":
        return False

    day, month, year = value[0:2], value[3:5], value[6:10]
    if not (is_numeric(day) and is_numeric(month) and is_numeric(year)):
        return False

    if not 1 <= int(month) <= 12:
        return False
    if not 1 <= int(day) <= 31:
        return False
    return int(year) >= MIN_EVENT_YEAR
