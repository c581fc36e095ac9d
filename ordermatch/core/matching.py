# ordermatch/core/matching.py

"""
Core order matching engine.

Scores every order against every transaction, claims transactions for
orders, and splits the input into matched groups and leftovers.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional
import logging
import math

from ordermatch.models import (
    OrderRecord,
    Order,
    Transaction,
    MatchGroup,
    MatchSummary,
)
from ordermatch.core.scoring import score_pair
from ordermatch.core.validation import validate_input_data
from ordermatch.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)

# (transaction index, total score)
Candidate = tuple[int, float]


class MatchResult:
    """Result of a matching run."""

    def __init__(self):
        self.matched: list[MatchGroup] = []
        self.unmatched_orders: list[Order] = []
        self.unmatched_transactions: list[Transaction] = []
        self.total_orders: int = 0
        self.total_transactions: int = 0
        self.duration_ms: int = 0

    @property
    def summary(self) -> MatchSummary:
        matched_transactions = sum(len(g.transactions) for g in self.matched)
        return MatchSummary(
            total_orders=self.total_orders,
            total_transactions=self.total_transactions,
            matched_orders=len(self.matched),
            matched_transactions=matched_transactions,
            unmatched_orders=len(self.unmatched_orders),
            unmatched_transactions=len(self.unmatched_transactions),
            match_rate=(
                matched_transactions / self.total_transactions * 100
                if self.total_transactions else 0
            ),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "matched": [g.model_dump(mode="json", by_alias=True) for g in self.matched],
            "unmatchedOrders": [o.model_dump(mode="json", by_alias=True) for o in self.unmatched_orders],
            "unmatchedTransactions": [
                t.model_dump(mode="json", by_alias=True) for t in self.unmatched_transactions
            ],
            "summary": self.summary.model_dump(),
            "durationMs": self.duration_ms,
        }


def match_orders(
    orders: Any,
    transactions: Any,
    strategy: Optional[str] = None,
) -> MatchResult:
    """
    Match transactions to orders.

    Validates the input, then assigns transactions using one of:
    - "greedy": orders claim transactions in input order; a transaction
      claimed by an earlier order is never offered to a later one
    - "best_score": each transaction goes to the order it scores highest
      against (earliest order on ties)

    Only pairs scoring at least the match threshold are ever assigned.
    """
    validate_input_data(orders, transactions)

    strategy = strategy or settings.assignment_strategy
    if strategy not in _STRATEGIES:
        raise ValueError(f"Unknown assignment strategy: {strategy}")

    start_time = datetime.now()
    result = MatchResult()

    orders = [_as_record(Order, o) for o in orders]
    transactions = [_as_record(Transaction, t) for t in transactions]
    result.total_orders = len(orders)
    result.total_transactions = len(transactions)

    assignments = _STRATEGIES[strategy](orders, transactions)

    for order, candidates in assignments:
        if not candidates:
            continue

        matched_txns = []
        for index, score in candidates:
            logger.debug(f"Order {order.order_id} claimed transaction {index} (score {score:.1f})")
            matched_txns.append(
                transactions[index].model_copy(update={"match_score": _round_score(score)})
            )

        result.matched.append(MatchGroup(
            order=order,
            transactions=matched_txns,
            group_score=_round_score(candidates[0][1]),
        ))

    claimed = {index for _, candidates in assignments for index, _ in candidates}

    # Orders are matched by ID, not position
    matched_order_ids = {g.order.order_id for g in result.matched}
    result.unmatched_orders = [o for o in orders if o.order_id not in matched_order_ids]
    result.unmatched_transactions = [
        t for index, t in enumerate(transactions) if index not in claimed
    ]

    result.duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)

    logger.info(
        f"Matched {len(claimed)}/{len(transactions)} transactions to "
        f"{len(result.matched)}/{len(orders)} orders ({strategy}, {result.duration_ms}ms)"
    )

    return result


def _assign_greedy(
    orders: list[Order],
    transactions: list[Transaction],
) -> list[tuple[Order, list[Candidate]]]:
    """Each order, in input order, claims every unclaimed transaction above threshold."""
    claimed: set[int] = set()
    assignments = []

    for order in orders:
        candidates = _find_candidates(order, transactions, claimed)
        claimed = claimed | {index for index, _ in candidates}
        assignments.append((order, candidates))

    return assignments


def _assign_best_score(
    orders: list[Order],
    transactions: list[Transaction],
) -> list[tuple[Order, list[Candidate]]]:
    """Each transaction goes to its highest-scoring order."""
    best: dict[int, tuple[int, float]] = {}

    for order_index, order in enumerate(orders):
        for index, score in _find_candidates(order, transactions, set()):
            if index not in best or score > best[index][1]:
                best[index] = (order_index, score)

    per_order: list[list[Candidate]] = [[] for _ in orders]
    for index in sorted(best):
        order_index, score = best[index]
        per_order[order_index].append((index, score))

    for candidates in per_order:
        candidates.sort(key=lambda c: c[1], reverse=True)

    return list(zip(orders, per_order))


_STRATEGIES = {
    "greedy": _assign_greedy,
    "best_score": _assign_best_score,
}


def _find_candidates(
    order: Order,
    transactions: list[Transaction],
    exclude: set[int],
) -> list[Candidate]:
    """
    Score an order against every transaction not in exclude.

    Returns candidates at or above the match threshold, best first. The
    sort is stable, so ties keep transaction input order.
    """
    candidates: list[Candidate] = []

    for index, txn in enumerate(transactions):
        if index in exclude:
            continue

        score = score_pair(order, txn)
        if score.total >= settings.match_threshold:
            candidates.append((index, score.total))

    candidates.sort(key=lambda c: c[1], reverse=True)
    return candidates


def _as_record(model: type[OrderRecord], record: Any) -> OrderRecord:
    if isinstance(record, model):
        return record
    if isinstance(record, OrderRecord):
        return model.model_validate(record.model_dump())
    if isinstance(record, Mapping):
        return model.model_validate(dict(record))
    return model.model_validate(record, from_attributes=True)


def _round_score(score: float) -> int:
    """Round half up, clamped to 0-100."""
    return min(100, max(0, math.floor(score + 0.5)))
