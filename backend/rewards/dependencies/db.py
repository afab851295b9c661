from typing import Iterator

from sqlalchemy.orm import Session

from rewards.db.db import SessionLocal


def get_db() -> Iterator[Session]:
    # One session per request, always closed when the response is done.
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
