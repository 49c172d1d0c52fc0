from __future__ import annotations

import re

_AU_MOBILE_RE = re.compile(r"^(?:\+?61|0)4\)?(?:[ -]?[0-9]){7}[0-9]$")
_NON_DIGIT_RE = re.compile(r"[^0-9]+")


def is_valid_australian_mobile_number(number: str | None) -> bool:
    """Accepts 04xx xxx xxx, 614xxxxxxxx and +61 4xx xxx xxx, with optional spaces or dashes."""
    if not number:
        return False
    return _AU_MOBILE_RE.match(number) is not None


def format_as_international_mobile_format(mobile: str | None) -> str | None:
    if mobile and mobile.strip() and not mobile.startswith("+"):
        return f"+{mobile}"
    return mobile


def digits_only(number: str | None) -> str | None:
    if number is None or not number.strip():
        return number
    return _NON_DIGIT_RE.sub("", number)
