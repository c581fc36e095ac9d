# ordermatch/core/approval.py

"""
Auto-approval policy and review record building.

A matched transaction that scores high enough skips manual review. Its
identity fields are overwritten with the order's so the stored record
agrees with the order it was matched to.
"""

import logging

from ordermatch.models import (
    Order,
    Transaction,
    ReviewRecord,
    ReviewSummary,
)
from ordermatch.core.matching import MatchResult
from ordermatch.core.scoring import MAX_CORE_SCORE, score_pair
from ordermatch.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)

AUTO_APPROVE_THRESHOLD = MAX_CORE_SCORE * settings.auto_approve_ratio  # 76.5


def should_auto_approve(order: Order, transaction: Transaction) -> bool:
    """
    Decide whether a matched pair can skip manual review.

    Uses this pair's own total score, never the group's best score.
    """
    return score_pair(order, transaction).total >= AUTO_APPROVE_THRESHOLD


def auto_correct(order: Order, transaction: Transaction) -> Transaction:
    """
    Copy the order's customer, order ID and item onto the transaction.

    Date, price, type and amount are what the bank recorded and stay.
    """
    return transaction.model_copy(update={
        "customer": order.customer,
        "order_id": order.order_id,
        "item": order.item,
    })


def build_review_records(result: MatchResult) -> list[ReviewRecord]:
    """
    Turn a match result into records for the review workflow.

    - Matched and auto-approvable: approved, identity fields corrected
    - Matched otherwise: pending
    - Unmatched: rejected
    """
    records: list[ReviewRecord] = []

    for group in result.matched:
        for txn in group.transactions:
            if should_auto_approve(group.order, txn):
                records.append(ReviewRecord(
                    transaction=auto_correct(group.order, txn),
                    matched_order=group.order,
                    match_score=txn.match_score or 0,
                    status="approved",
                    auto_corrected=True,
                ))
            else:
                records.append(ReviewRecord(
                    transaction=txn,
                    matched_order=group.order,
                    match_score=txn.match_score or 0,
                    status="pending",
                ))

    for txn in result.unmatched_transactions:
        records.append(ReviewRecord(
            transaction=txn,
            match_score=0,
            status="rejected",
        ))

    return records


def summarize_review(records: list[ReviewRecord]) -> ReviewSummary:
    """Count review records by status."""
    pending = sum(1 for r in records if r.status == "pending")
    approved = sum(1 for r in records if r.status == "approved")
    rejected = sum(1 for r in records if r.status == "rejected")

    logger.info(f"Review: {pending} pending, {approved} approved, {rejected} rejected")

    return ReviewSummary(
        pending=pending,
        approved=approved,
        rejected=rejected,
        message=(
            f"{pending} transactions saved to pending review, "
            f"{approved} auto-approved, {rejected} auto-rejected"
        ),
    )
