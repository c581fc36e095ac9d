# ordermatch/core/validation.py

"""
Structural validation of matcher input.

Validation is all-or-nothing and runs before any scoring.
"""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

logger = logging.getLogger(__name__)


class InvalidInputKind(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    EMPTY_INPUT = "EMPTY_INPUT"
    MISSING_FIELD = "MISSING_FIELD"


class MatchInputError(Exception):
    """Raised when orders/transactions are not fit for matching."""

    def __init__(
        self,
        kind: InvalidInputKind,
        message: str,
        list_name: Optional[str] = None,
        index: Optional[int] = None,
    ):
        super().__init__(f"{kind.value}: {message}")
        self.kind = kind
        self.message = message
        self.list_name = list_name
        self.index = index


def get_order_id(record: Any) -> Any:
    """Read the order ID from a model or a raw mapping."""
    if isinstance(record, Mapping):
        order_id = record.get("orderId")
        return order_id if order_id is not None else record.get("order_id")
    return getattr(record, "order_id", None)


def validate_input_data(orders: Any, transactions: Any) -> None:
    """
    Check that orders and transactions can be matched.

    Raises MatchInputError:
    - INVALID_INPUT if either argument is not a list
    - EMPTY_INPUT if both lists are empty
    - MISSING_FIELD for the first record without an order ID
    """
    if not isinstance(orders, list):
        _reject(InvalidInputKind.INVALID_INPUT, "orders must be a list")

    if not isinstance(transactions, list):
        _reject(InvalidInputKind.INVALID_INPUT, "transactions must be a list")

    if not orders and not transactions:
        _reject(InvalidInputKind.EMPTY_INPUT, "both orders and transactions are empty")

    for list_name, records in (("order", orders), ("transaction", transactions)):
        for index, record in enumerate(records):
            if not get_order_id(record):
                _reject(
                    InvalidInputKind.MISSING_FIELD,
                    f"{list_name} at index {index} is missing orderId",
                    list_name=list_name,
                    index=index,
                )


def _reject(kind: InvalidInputKind, message: str, **details) -> None:
    logger.warning(f"Rejected matcher input: {kind.value}: {message}")
    raise MatchInputError(kind, message, **details)
