from sqlalchemy import CheckConstraint, Column, Integer, Numeric, Date, DateTime
from rewards.db.db import Base
from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime, date, UTC
from decimal import Decimal

# Signed 64-bit INTEGER range of the backing column; ids are never negative
MIN_ID = 0
MAX_ID = 2**63 - 1


def _utc_now_naive() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)

class Transaction(Base):
    __tablename__ = "transactions"
    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_transactions_amount_non_negative"),
    )
    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    transaction_date = Column(Date, nullable=False)
    created_date = Column(DateTime, default=_utc_now_naive, nullable=False)

    def to_dict(self) -> dict:
        """Convert Transaction instance to the API wire shape."""
        return {
            "id": self.id,
            "customerId": self.customer_id,
            "amount": float(self.amount) if self.amount is not None else None,
            "date": self.transaction_date.isoformat() if self.transaction_date else None,
        }


# Pydantic models for Transaction
class TransactionCreate(BaseModel):
    """Transaction creation request (POST /api/transactions body)"""
    model_config = ConfigDict(populate_by_name=True)
    customer_id: int = Field(..., alias="customerId", ge=MIN_ID, le=MAX_ID)
    amount: Decimal = Field(..., max_digits=10, decimal_places=2, allow_inf_nan=False)
    transaction_date: date = Field(..., alias="date")  # YYYY-MM-DD

    @field_validator("amount")
    @classmethod
    def amount_non_negative(cls, v):
        if v < 0:
            raise ValueError("amount must be greater than or equal to 0")
        return v

class TransactionResponse(BaseModel):
    """Saved transaction as returned to callers"""
    model_config = ConfigDict(populate_by_name=True)
    id: int
    customer_id: int = Field(..., alias="customerId")
    amount: float
    transaction_date: date = Field(..., alias="date")
