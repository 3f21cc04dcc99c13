"""Keyword-signal risk classification for community sentiment.

Substring matching against two keyword sets; this is not sentiment analysis.
"""

from __future__ import annotations

from site_intel.synthesis.models import RiskLevel

HIGH_SEVERITY_KEYWORDS: frozenset[str] = frozenset(
    {"denied", "rejected", "blocked", "lawsuit", "litigation"}
)

MODERATE_SEVERITY_KEYWORDS: frozenset[str] = frozenset(
    {"opposition", "opposed", "concerns", "controversy", "protest", "appeal", "contested"}
)

# Distinct moderate keywords at which the rating escalates to HIGH.
MODERATE_ESCALATION_THRESHOLD = 2


def matched_keywords(text: str, keywords: frozenset[str]) -> set[str]:
    """Keywords occurring in *text* as case-insensitive substrings."""
    lowered = (text or "").lower()
    return {keyword for keyword in keywords if keyword in lowered}


def classify_risk(community_text: str) -> RiskLevel:
    """Rate the community-sentiment body as low, moderate or high risk."""
    if matched_keywords(community_text, HIGH_SEVERITY_KEYWORDS):
        return RiskLevel.HIGH

    moderate = len(matched_keywords(community_text, MODERATE_SEVERITY_KEYWORDS))
    if moderate >= MODERATE_ESCALATION_THRESHOLD:
        return RiskLevel.HIGH
    if moderate == 1:
        return RiskLevel.MODERATE
    return RiskLevel.LOW
