"""Address normalization — canonical spelling before fuzzy comparison.

Calendar invites and hand-typed assignments spell the same place differently
("317 N 19th St" vs "317 North 19th Street"). Expanding abbreviations to one
canonical form lets the scorer compare words rather than spellings.
"""

from __future__ import annotations

import re
from functools import lru_cache

STREET_SUFFIXES: dict[str, str] = {
    "ALY": "ALLEY",
    "AVE": "AVENUE",
    "AV": "AVENUE",
    "BLVD": "BOULEVARD",
    "CIR": "CIRCLE",
    "CT": "COURT",
    "DR": "DRIVE",
    "FWY": "FREEWAY",
    "HWY": "HIGHWAY",
    "LN": "LANE",
    "PKWY": "PARKWAY",
    "PKY": "PARKWAY",
    "PL": "PLACE",
    "RD": "ROAD",
    "SQ": "SQUARE",
    "ST": "STREET",
    "TER": "TERRACE",
    "TRL": "TRAIL",
}

DIRECTIONALS: dict[str, str] = {
    "N": "NORTH",
    "S": "SOUTH",
    "E": "EAST",
    "W": "WEST",
    "NE": "NORTHEAST",
    "NW": "NORTHWEST",
    "SE": "SOUTHEAST",
    "SW": "SOUTHWEST",
}

UNITS: dict[str, str] = {
    "APT": "APARTMENT",
    "STE": "SUITE",
    "BLDG": "BUILDING",
    "RM": "ROOM",
}

_ONES = [
    "", "FIRST", "SECOND", "THIRD", "FOURTH", "FIFTH", "SIXTH", "SEVENTH",
    "EIGHTH", "NINTH", "TENTH", "ELEVENTH", "TWELFTH", "THIRTEENTH",
    "FOURTEENTH", "FIFTEENTH", "SIXTEENTH", "SEVENTEENTH", "EIGHTEENTH",
    "NINETEENTH",
]
_TENS_ORDINAL = {
    2: "TWENTIETH", 3: "THIRTIETH", 4: "FORTIETH", 5: "FIFTIETH",
    6: "SIXTIETH", 7: "SEVENTIETH", 8: "EIGHTIETH", 9: "NINETIETH",
}
_TENS_CARDINAL = {
    2: "TWENTY", 3: "THIRTY", 4: "FORTY", 5: "FIFTY",
    6: "SIXTY", 7: "SEVENTY", 8: "EIGHTY", 9: "NINETY",
}

_ORDINAL_PATTERN = re.compile(r"^(\d+)(ST|ND|RD|TH)$")
_PUNCTUATION = re.compile(r"[.,;#]")


def ordinal_word(number: int) -> str | None:
    """Spell out an ordinal between 1 and 99 ("19" → "NINETEENTH")."""
    if not 1 <= number <= 99:
        return None
    if number < 20:
        return _ONES[number]
    tens, ones = divmod(number, 10)
    if ones == 0:
        return _TENS_ORDINAL[tens]
    return f"{_TENS_CARDINAL[tens]}-{_ONES[ones]}"


# "NINETEENTH" -> "19"
ORDINAL_WORDS: dict[str, str] = {ordinal_word(n): str(n) for n in range(1, 100)}


def normalize_token(token: str) -> str:
    """Expand a single upper-case token to its canonical spelling.

    Ordinals collapse to their bare number ("19TH" and "NINETEENTH" both
    become "19") so a street written without its suffix still compares
    digit for digit.
    """
    for table in (STREET_SUFFIXES, DIRECTIONALS, UNITS, ORDINAL_WORDS):
        if token in table:
            return table[token]

    match = _ORDINAL_PATTERN.match(token)
    if match:
        return match.group(1)

    return token


@lru_cache(maxsize=4096)
def normalize_address(raw: str | None) -> str:
    """Return the canonical form of an address string.

    - Uppercases
    - Replaces punctuation (. , ; #) with spaces
    - Expands street suffixes, directionals and unit designators
    - Reduces ordinals to their number
    - Collapses whitespace

    Results are memoized; reconciliation scores one query against every
    stored address, so the query is normalized once per distinct string.
    """
    if not raw:
        return ""
    text = _PUNCTUATION.sub(" ", raw.upper())
    return " ".join(normalize_token(t) for t in text.split())
