# ordermatch/core/scoring.py

"""
Pair scoring for order/transaction matching.

Scoring breakdown (0-100):
- Customer name:  0-30 points (token sort, word order ignored)
- Order ID:       0-35 points (character level)
- Item name:      0-20 points (token sort)
- Price:          0, 5 or 10 points
- Date:           0, 2.5 or 5 points

The first three make up the "core" score (max 85).
"""

from ordermatch.models import OrderRecord, PairScore
from ordermatch.core.normalizers import normalize_amount, normalize_date
from ordermatch.core.similarity import ratio, token_sort_ratio
from ordermatch.config import get_settings

settings = get_settings()

# Points per dimension
CUSTOMER_POINTS = 30
ORDER_ID_POINTS = 35
ITEM_POINTS = 20
PRICE_POINTS = 10
DATE_POINTS = 5

MAX_CORE_SCORE = CUSTOMER_POINTS + ORDER_ID_POINTS + ITEM_POINTS  # 85

# Relative price difference that still earns partial credit
PRICE_TOLERANCE = 0.10


def score_pair(order: OrderRecord, transaction: OrderRecord) -> PairScore:
    """
    Calculate the match score between an order and a transaction.

    Returns a PairScore with per-dimension points, the core and total
    scores, and human-readable factors.
    """
    factors: list[str] = []

    customer_similarity = token_sort_ratio(order.customer, transaction.customer)
    customer_score = customer_similarity * CUSTOMER_POINTS / 100
    if customer_similarity == 100:
        factors.append("Customer name match")

    order_id_similarity = ratio(order.order_id, transaction.order_id)
    order_id_score = order_id_similarity * ORDER_ID_POINTS / 100
    if order_id_similarity == 100:
        factors.append("Order ID exact match")

    item_similarity = token_sort_ratio(order.item, transaction.item)
    item_score = item_similarity * ITEM_POINTS / 100
    if item_similarity == 100:
        factors.append("Item match")

    core = customer_score + order_id_score + item_score

    price_score = _score_price(order.price, transaction.price, factors)
    date_score = _score_date(order.date, transaction.date, factors)

    return PairScore(
        customer_score=customer_score,
        order_id_score=order_id_score,
        item_score=item_score,
        price_score=price_score,
        date_score=date_score,
        core=core,
        total=core + price_score + date_score,
        factors=factors,
    )


def _score_price(order_price, txn_price, factors: list[str]) -> float:
    """Score based on price match (0, 5 or 10 points)."""
    order_amount = normalize_amount(order_price)
    txn_amount = normalize_amount(txn_price)
    diff = abs(order_amount - txn_amount)

    if diff == 0:
        factors.append("Exact price match")
        return PRICE_POINTS
    if order_amount > 0 and diff / order_amount <= PRICE_TOLERANCE:
        factors.append(f"Price within 10% ({diff:.2f} difference)")
        return PRICE_POINTS / 2

    return 0


def _score_date(order_date, txn_date, factors: list[str]) -> float:
    """
    Score based on date sequence (0, 2.5 or 5 points).

    Missing or unparseable dates get partial credit.
    """
    order_day = normalize_date(order_date)
    txn_day = normalize_date(txn_date)

    if order_day is None or txn_day is None:
        factors.append("Date missing or invalid")
        return DATE_POINTS / 2

    days_diff = (txn_day - order_day).days

    if 0 <= days_diff <= settings.forward_date_window_days:
        factors.append(f"Transaction {days_diff} days after order")
        return DATE_POINTS
    elif -settings.backdate_tolerance_days <= days_diff < 0:
        factors.append(f"Transaction {-days_diff} days before order")
        return DATE_POINTS / 2
    else:
        factors.append(f"Dates {abs(days_diff)} days apart (significant gap)")
        return 0
