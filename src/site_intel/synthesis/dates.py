"""Date label extraction for individual findings.

Source dates are often partial ("Q3 2024", "early 2025"), so the result is
a short display label rather than a calendar type. Rules are tried in
order against the whole finding and the first match wins.
"""

from __future__ import annotations

import re
from typing import Callable, Optional, Pattern

FULL_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Canonical 3-letter abbreviations, indexed by month number - 1
MONTH_ABBREVIATIONS = tuple(name[:3] for name in FULL_MONTHS)

_ABBREVIATION_ALIASES = {abbr.lower(): abbr for abbr in MONTH_ABBREVIATIONS}
_ABBREVIATION_ALIASES["sept"] = "Sep"

_FULL_MONTH_PATTERN = re.compile(
    r"\b(" + "|".join(FULL_MONTHS) + r")\s+(?:\d{1,2}(?:st|nd|rd|th)?,?\s+)?(\d{4})\b",
    re.IGNORECASE,
)
_ABBREVIATED_MONTH_PATTERN = re.compile(
    r"\b(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sept|Sep|Oct|Nov|Dec)\.?\s+(\d{4})\b",
    re.IGNORECASE,
)
_NUMERIC_MONTH_PATTERN = re.compile(r"(?<![/\d])(0?[1-9]|1[0-2])/(\d{4})\b")
_QUARTER_PATTERN = re.compile(r"\bQ([1-4])\s*(?:of\s+)?(\d{4})\b", re.IGNORECASE)
_QUALIFIER_PATTERN = re.compile(r"\b(early|mid|late)[\s-]+(\d{4})\b", re.IGNORECASE)
_BARE_YEAR_PATTERN = re.compile(r"\b(202\d)\b")


def _full_month(m: re.Match[str]) -> str:
    return f"{m.group(1).capitalize()} {m.group(2)}"


def _abbreviated_month(m: re.Match[str]) -> str:
    return f"{_ABBREVIATION_ALIASES[m.group(1).lower()]} {m.group(2)}"


def _numeric_month(m: re.Match[str]) -> str:
    return f"{MONTH_ABBREVIATIONS[int(m.group(1)) - 1]} {m.group(2)}"


def _quarter(m: re.Match[str]) -> str:
    return f"Q{m.group(1)} {m.group(2)}"


def _qualifier(m: re.Match[str]) -> str:
    return f"{m.group(1).lower()} {m.group(2)}"


def _bare_year(m: re.Match[str]) -> str:
    return m.group(1)


DATE_RULES: list[tuple[Pattern[str], Callable[[re.Match[str]], str]]] = [
    (_FULL_MONTH_PATTERN, _full_month),
    (_ABBREVIATED_MONTH_PATTERN, _abbreviated_month),
    (_NUMERIC_MONTH_PATTERN, _numeric_month),
    (_QUARTER_PATTERN, _quarter),
    (_QUALIFIER_PATTERN, _qualifier),
    (_BARE_YEAR_PATTERN, _bare_year),
]


def extract_date(text: str) -> Optional[str]:
    """Return a short date label for *text*, or None when it carries no date."""
    if not text:
        return None
    for pattern, render in DATE_RULES:
        match = pattern.search(text)
        if match:
            return render(match)
    return None
