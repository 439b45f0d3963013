from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from jobly.core.config import settings

# Sync engine; FastAPI runs sync routes in its threadpool, one session per request.
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
