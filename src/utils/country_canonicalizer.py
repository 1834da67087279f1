"""Country name canonicalization for display listings.

Collapses known alias spellings ("UAE", "U.A.E.", "Palestine", ...) into a
single display form.  Only the ``/options`` country enumeration uses this;
release filtering and aggregation keep matching on the raw spreadsheet
value so that existing filter links keep selecting the same rows.
"""

import re

_WHITESPACE_RE = re.compile(r"\s+")

# Keys are already in normalised form (lower-case, no periods, single spaces).
COUNTRY_ALIASES: dict[str, str] = {
    "uae": "United Arab Emirates",
    "u a e": "United Arab Emirates",
    "palestine": "State of Palestine",
    "kurdistan": "Iraq",
}


def country_key(name: str) -> str:
    """Return the lookup key for *name*: lower-cased, periods removed, whitespace collapsed."""
    key = name.lower().replace(".", "")
    return _WHITESPACE_RE.sub(" ", key).strip()


def canonicalize_country(name: str | None) -> str:
    """Map *name* to its canonical display form.

    Returns ``""`` for empty input and the trimmed original when no alias
    matches.

    >>> canonicalize_country("U.A.E.")
    'United Arab Emirates'
    >>> canonicalize_country("  France ")
    'France'
    """
    if not name:
        return ""
    return COUNTRY_ALIASES.get(country_key(name), name.strip())
