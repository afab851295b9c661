from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from rewards.config import Settings

DATABASE_URL = Settings.DATABASE_URL

# SQLite connections are shared across FastAPI's worker threads
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()
