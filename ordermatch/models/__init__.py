# ordermatch/models/__init__.py

from ordermatch.models.records import (
    OrderRecord,
    Order,
    Transaction,
)
from ordermatch.models.match import (
    PairScore,
    MatchGroup,
    MatchSummary,
)
from ordermatch.models.review import (
    ReviewRecord,
    ReviewStatus,
    ReviewSummary,
)

__all__ = [
    # Records
    "OrderRecord",
    "Order",
    "Transaction",
    # Match
    "PairScore",
    "MatchGroup",
    "MatchSummary",
    # Review
    "ReviewRecord",
    "ReviewStatus",
    "ReviewSummary",
]
