# ordermatch/routers/match.py

"""
Matching routes.

Runs the matching engine over posted orders and transactions. Nothing is
stored here; the caller persists the returned review records.
"""

import logging
from typing import Any
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ordermatch.core.matching import match_orders
from ordermatch.core.approval import (
    build_review_records,
    should_auto_approve,
    summarize_review,
)
from ordermatch.core.scoring import score_pair
from ordermatch.models import Order, Transaction

logger = logging.getLogger(__name__)
router = APIRouter()


class MatchRequest(BaseModel):
    # Left untyped so the engine can report malformed input itself
    orders: Any = None
    transactions: Any = None


class ScoreRequest(BaseModel):
    order: Order
    transaction: Transaction


# ============================================
# Main Matching Endpoint
# ============================================

@router.post("/match")
def run_match(request: MatchRequest):
    """
    Match transactions to orders.

    1. Validates and runs the matching engine
    2. Classifies every transaction as approved, pending or rejected
    3. Returns the match result with the review records

    CPU bound, so this is a sync function -- FastAPI runs it in a threadpool.
    """
    if request.orders is None or request.transactions is None:
        raise HTTPException(
            status_code=400,
            detail="Both orders and transactions are required",
        )

    result = match_orders(request.orders, request.transactions)

    records = build_review_records(result)
    review = summarize_review(records)

    return {
        **result.to_dict(),
        "review": [r.model_dump(mode="json", by_alias=True) for r in records],
        "reviewSummary": review.model_dump(),
        "message": review.message,
    }


# ============================================
# Single Pair Score
# ============================================

@router.post("/match/score")
def score_single_pair(request: ScoreRequest):
    """
    Score one order/transaction pair.

    Useful when a reviewer edits a pending transaction and wants to see
    whether it now clears auto-approval.
    """
    score = score_pair(request.order, request.transaction)

    return {
        **score.model_dump(),
        "autoApprove": should_auto_approve(request.order, request.transaction),
    }
