# ordermatch/models/match.py

from pydantic import BaseModel, Field

from ordermatch.models.records import Order, Transaction


# ============================================
# Pair Scoring
# ============================================

class PairScore(BaseModel):
    """Breakdown of how an (order, transaction) score was calculated."""

    customer_score: float = Field(ge=0, le=30, description="0-30 points for customer name")
    order_id_score: float = Field(ge=0, le=35, description="0-35 points for order ID")
    item_score: float = Field(ge=0, le=20, description="0-20 points for item name")
    price_score: float = Field(ge=0, le=10, description="0, 5 or 10 points for price")
    date_score: float = Field(ge=0, le=5, description="0, 2.5 or 5 points for date")
    core: float = Field(ge=0, le=85, description="Identity fields only")
    total: float = Field(ge=0, le=100, description="Total match score")
    factors: list[str] = Field(default_factory=list, description="Human-readable factors")


# ============================================
# Match Groups
# ============================================

class MatchGroup(BaseModel):
    """An order together with every transaction it claimed."""

    order: Order
    transactions: list[Transaction] = Field(min_length=1)
    group_score: int = Field(alias="groupScore", ge=0, le=100)

    class Config:
        populate_by_name = True


class MatchSummary(BaseModel):
    """Counts for a single matching run."""

    total_orders: int
    total_transactions: int
    matched_orders: int
    matched_transactions: int
    unmatched_orders: int
    unmatched_transactions: int
    match_rate: float
