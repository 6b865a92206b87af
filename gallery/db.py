import logging
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

POOL_SETTINGS = {
    'pool_pre_ping': True,
    'pool_recycle': 1800,
}


def normalize_database_url(database_url: str) -> str:
    """Map libpq-style postgres:// URLs onto the psycopg2 dialect."""
    for prefix in ("postgres://", "postgresql://"):
        if database_url.startswith(prefix):
            return "postgresql+psycopg2://" + database_url[len(prefix):]
    return database_url


def init_engine(database_url: str) -> Engine:
    """
    Create the engine for the region store.

    Args:
        database_url: SQLAlchemy connection string, e.g. postgresql+psycopg2://...

    Returns:
        Engine: Pooled engine shared by every request

    Raises:
        ValueError: If no connection string is configured
        sqlalchemy.exc.ArgumentError: If the connection string cannot be parsed
    """
    if not database_url:
        raise ValueError("DATABASE_URL is not set")

    logger.info("Initializing region store...")
    engine = create_engine(normalize_database_url(database_url), **POOL_SETTINGS)
    logger.info(f"Successfully initialized region store ({engine.dialect.name})")
    return engine
