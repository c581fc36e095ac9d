# ordermatch/core/normalizers.py

"""
Data normalization utilities for orders and transactions.

Records are typed in by hand, so every field the scorer reads goes
through here first.
"""

from datetime import date, datetime
from typing import Any
import re


def normalize_amount(amount: Any) -> float:
    """
    Normalize amount to float.

    Handles:
    - None (missing price)
    - Integers and floats
    - Strings with currency symbols or thousands separators
    """
    if amount is None:
        return 0.0

    if isinstance(amount, (int, float)):
        return float(amount)

    if isinstance(amount, str):
        # Remove currency symbols and commas
        cleaned = re.sub(r'[^\d.-]', '', amount)
        try:
            return float(cleaned)
        except ValueError:
            return 0.0

    return 0.0


def normalize_date(d: Any) -> date | None:
    """
    Normalize date to date object.

    Handles:
    - date and datetime objects
    - ISO strings, with or without a time part
    - US-style and slash-separated strings

    Returns None for anything that is not a real calendar date.
    """
    if d is None:
        return None

    if isinstance(d, datetime):
        return d.date()

    if isinstance(d, date):
        return d

    if isinstance(d, str):
        d = d.strip()
        if not d:
            return None

        # Try ISO format first
        try:
            return datetime.fromisoformat(d.replace('Z', '+00:00')).date()
        except ValueError:
            pass

        formats = [
            '%m/%d/%Y',
            '%Y/%m/%d',
        ]
        for fmt in formats:
            try:
                return datetime.strptime(d, fmt).date()
            except ValueError:
                continue

    return None


def normalize_text(s: str | None) -> str:
    """
    Normalize text for comparison.

    - Lowercase
    - Remove special characters
    - Collapse whitespace
    """
    if not s:
        return ""

    s = s.lower()
    s = re.sub(r'[^a-z0-9\s]', ' ', s)
    s = re.sub(r'\s+', ' ', s).strip()
    return s
