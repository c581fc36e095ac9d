# ordermatch/models/records.py

from datetime import date as date_type
from typing import Optional, Union
from pydantic import BaseModel, Field

# Hand-typed amounts may be blank or carry a currency symbol ("$10.00");
# they are parsed when scored, not rejected here
Amount = Optional[Union[float, str]]


class OrderRecord(BaseModel):
    """Fields shared by orders and transactions. All manually entered."""

    customer: Optional[str] = ""
    order_id: Optional[str] = Field(None, alias="orderId")
    date: Optional[Union[date_type, str]] = None
    item: Optional[str] = ""
    price: Amount = None

    class Config:
        frozen = True
        populate_by_name = True
        coerce_numbers_to_str = True


class Order(OrderRecord):
    """A purchase order."""


class Transaction(OrderRecord):
    """A bank or payment transaction, possibly referencing an order."""

    txn_type: Optional[str] = Field("", alias="txnType")
    txn_amount: Amount = Field(None, alias="txnAmount")

    # Set on the copy returned by the matcher, never on the input
    match_score: Optional[int] = Field(None, alias="matchScore", ge=0, le=100)
