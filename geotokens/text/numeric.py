"""
Ordinal helpers for numbered street names.
"""
import re
from typing import Optional

_NUMBER_SUFFIX_RE = re.compile(r"^(?P<number>\d+)\s+(?P<name>\w.*)$")

_TENS = {
    "twenty": "2",
    "thirty": "3",
    "forty": "4",
    "fourty": "4",
    "fifty": "5",
    "sixty": "6",
    "seventy": "7",
    "eighty": "8",
    "ninety": "9",
}

_ORDINALS = {
    "first": "1st",
    "second": "2nd",
    "third": "3rd",
    "fourth": "4th",
    "fifth": "5th",
    "sixth": "6th",
    "seventh": "7th",
    "eighth": "8th",
    "ninth": "9th",
}

_WRITTEN_RE = re.compile(
    r"\b(?P<tens>%s)[-\s](?P<nth>%s)\b" % ("|".join(_TENS), "|".join(_ORDINALS)),
    re.IGNORECASE,
)


def ordinal_suffix(num: int) -> str:
    if 10 <= num % 100 <= 20:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(num % 10, "th")


def number_suffix(text: str) -> Optional[str]:
    """'5 Avenue' -> '5th Avenue'; None when text does not start with a bare number."""
    m = _NUMBER_SUFFIX_RE.match(text)
    if not m:
        return None
    num = int(m.group("number"))
    return f"{num}{ordinal_suffix(num)} {m.group('name')}"


def written_numeric(text: str) -> Optional[str]:
    """'Twenty-third Avenue' -> '23rd Avenue'; None when no written ordinal is found."""
    m = _WRITTEN_RE.search(text)
    if not m:
        return None
    numeral = _TENS[m.group("tens").lower()] + _ORDINALS[m.group("nth").lower()]
    return text[:m.start()] + numeral + text[m.end():]
