"""City search text normalization and the matching Mongo filter."""

import re

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_city(raw: str) -> str:
    """
    Trim and collapse every interior whitespace run to one space.

    ``"  New   York  "`` -> ``"New York"``. Idempotent.
    """
    return _WHITESPACE_RUN.sub(" ", raw or "").strip()


def city_predicate(normalized: str) -> dict:
    """
    Case-insensitive, unanchored substring match on ``city``.

    The search text is escaped, so ``"St. Louis"`` only matches a literal dot.
    An empty string matches every airport.
    """
    return {"city": {"$regex": re.escape(normalized), "$options": "i"}}
