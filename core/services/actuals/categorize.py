"""Keyword-based expense category suggestions."""
from __future__ import annotations

from typing import Mapping

from core.domain import DEFAULT_EXPENSE_CATEGORY

# First matching category wins, so more specific keywords come first.
CATEGORY_KEYWORDS: Mapping[str, tuple[str, ...]] = {
    "Sub-Consultant": (
        "consultant",
        "subconsultant",
        "structural",
        "survey",
        "geotech",
        "landscape",
        "lighting design",
    ),
    "Printing": ("print", "plot", "copies", "binding"),
    "Travel": (
        "flight",
        "ticket",
        "hotel",
        "travel",
        "taxi",
        "uber",
        "careem",
        "visa",
        "per diem",
        "site visit",
    ),
    "Software License": (
        "license",
        "licence",
        "subscription",
        "autodesk",
        "revit",
        "autocad",
        "rhino",
        "lumion",
        "enscape",
        "adobe",
        "software",
    ),
    "Commission": ("commission", "referral", "agent fee", "brokerage"),
    "Materials": ("material", "sample", "model", "foam", "board", "stationery"),
}


def suggest_expense_category(
    description: str | None,
    keywords: Mapping[str, tuple[str, ...]] = CATEGORY_KEYWORDS,
) -> str:
    text = (description or "").strip().lower()
    if not text:
        return DEFAULT_EXPENSE_CATEGORY
    for category, words in keywords.items():
        if any(word in text for word in words):
            return category
    return DEFAULT_EXPENSE_CATEGORY


__all__ = ["CATEGORY_KEYWORDS", "suggest_expense_category"]
