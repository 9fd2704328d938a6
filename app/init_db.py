import logging

from sqlalchemy import text

from app.database import Base, engine
import app.models  # noqa: F401  registers every model on Base.metadata

logger = logging.getLogger(__name__)


def init_db():
    """Check the database is reachable and create missing tables."""
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
    Base.metadata.create_all(bind=engine)
    logger.info("Database connected, tables ready")


def main():
    init_db()
    print("✅ Tables created successfully")

if __name__ == "__main__":
    main()
