# ordermatch/models/review.py

from typing import Literal, Optional
from pydantic import BaseModel, Field

from ordermatch.models.records import Order, Transaction

ReviewStatus = Literal["pending", "approved", "rejected"]


class ReviewRecord(BaseModel):
    """A transaction as handed to the review workflow."""

    transaction: Transaction
    matched_order: Optional[Order] = Field(None, alias="matchedOrder")
    match_score: int = Field(0, alias="matchScore", ge=0, le=100)
    status: ReviewStatus
    auto_corrected: bool = Field(False, alias="autoCorrected")

    class Config:
        populate_by_name = True


class ReviewSummary(BaseModel):
    """Status counts for a batch of review records."""

    pending: int
    approved: int
    rejected: int
    message: str
