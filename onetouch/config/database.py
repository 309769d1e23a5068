import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from .settings import settings

logger = logging.getLogger(__name__)


def build_engine(url: str, debug: bool = False):
    """Create the pooled engine for the given URL"""
    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # a single shared connection, otherwise every checkout sees an empty database
            options["poolclass"] = StaticPool
        return create_engine(url, echo=debug, **options)

    connect_args = {"sslmode": "require"} if settings.use_ssl else {}
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_recycle=300,
        echo=debug,
        connect_args=connect_args,
    )


# Create engine
engine = build_engine(settings.sqlalchemy_url, settings.debug)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()

# Database dependency
def get_db():
    """Database dependency for FastAPI"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Create products, sales and stock_movements if they do not exist yet"""
    # models must be imported so their tables are registered on Base.metadata
    from onetouch.shared.database import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logger.info("Tables ready: %s", ", ".join(Base.metadata.tables))
