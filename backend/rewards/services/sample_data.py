import logging
from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

from rewards.models.transaction import Transaction

logger = logging.getLogger(__name__)

SAMPLE_TRANSACTIONS = [
    {"customer_id": 1, "amount": Decimal("120.00"), "transaction_date": date(2024, 1, 15)},
    {"customer_id": 1, "amount": Decimal("80.00"), "transaction_date": date(2024, 2, 10)},
    {"customer_id": 2, "amount": Decimal("150.00"), "transaction_date": date(2024, 1, 20)},
]


def init_sample_data(db: Session) -> int:
    """Seed demo transactions into an empty table. Returns the number of rows added."""
    if db.query(Transaction).first() is not None:
        logger.info("Transactions table already populated, skipping sample data")
        return 0

    for row in SAMPLE_TRANSACTIONS:
        db.add(Transaction(**row))
    db.commit()
    logger.info("Seeded %d sample transactions", len(SAMPLE_TRANSACTIONS))
    return len(SAMPLE_TRANSACTIONS)
