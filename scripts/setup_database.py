# scripts/setup_database.py
#!/usr/bin/env python
"""
Simple database setup script for a fresh development database.
Creates all tables straight from the models; use `alembic upgrade head`
for databases that should keep a migration history.
"""
import sys
from pathlib import Path
sys.path.append(str(Path(__file__).parent.parent))

from app.core.database import engine, Base
import app.db.models  # noqa: F401
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def main():
    """Create all tables"""
    try:
        logger.info("Creating database tables...")
        Base.metadata.create_all(bind=engine)
        logger.info(f"Created tables: {', '.join(sorted(Base.metadata.tables))}")
        logger.info("You can now start the application with: uvicorn app.main:app --reload")

    except Exception as e:
        logger.error(f"Error setting up database: {str(e)}")
        sys.exit(1)

if __name__ == "__main__":
    main()
