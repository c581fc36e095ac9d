# ordermatch/core/similarity.py

"""
String similarity primitives used by the pair scorer.

Both functions return 0-100 and compare normalized text, so case and
punctuation never count against a match.
"""

from rapidfuzz import fuzz

from ordermatch.core.normalizers import normalize_text


def ratio(a: str | None, b: str | None) -> float:
    """
    Character-level similarity, 2 * matched / (len(a) + len(b)).

    Order-sensitive: "A100" vs "100A" is not a perfect match.
    """
    if _same_value(a, b):
        return 100.0
    a, b = normalize_text(a), normalize_text(b)
    if not a or not b:
        return 0.0
    return fuzz.ratio(a, b)


def token_sort_ratio(a: str | None, b: str | None) -> float:
    """
    Word-order-insensitive similarity.

    Tokens are sorted before comparing, so "Brian Bell" and
    "Bell Brian" score 100.
    """
    if _same_value(a, b):
        return 100.0
    a, b = normalize_text(a), normalize_text(b)
    if not a or not b:
        return 0.0
    return fuzz.token_sort_ratio(a, b)


def _same_value(a: str | None, b: str | None) -> bool:
    # Missing and blank are the same value
    return (a or "") == (b or "")
