# ordermatch/core/__init__.py

from ordermatch.core.matching import match_orders, MatchResult
from ordermatch.core.scoring import score_pair
from ordermatch.core.validation import (
    validate_input_data,
    InvalidInputKind,
    MatchInputError,
)
from ordermatch.core.approval import (
    should_auto_approve,
    auto_correct,
    build_review_records,
    summarize_review,
)
from ordermatch.core.similarity import ratio, token_sort_ratio
from ordermatch.core.normalizers import (
    normalize_amount,
    normalize_date,
    normalize_text,
)

__all__ = [
    "match_orders",
    "MatchResult",
    "score_pair",
    "validate_input_data",
    "InvalidInputKind",
    "MatchInputError",
    "should_auto_approve",
    "auto_correct",
    "build_review_records",
    "summarize_review",
    "ratio",
    "token_sort_ratio",
    "normalize_amount",
    "normalize_date",
    "normalize_text",
]
