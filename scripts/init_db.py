"""
Database initialization script

Creates the lookup indexes for every collection:
    python scripts/init_db.py

Drop and recreate them:
    python scripts/init_db.py --reset
"""

import argparse
import asyncio
import sys
from pathlib import Path
from dotenv import load_dotenv

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Load environment variables
load_dotenv()

from app.core.config import settings
from app.core.logging import setup_logging, get_logger
from app.db.indexes import create_indexes, drop_all_indexes
from app.db.mongo import MongoStore

setup_logging()
logger = get_logger("scripts.init_db")


async def init_db(reset: bool):
    store = MongoStore(settings)
    await store.connect()
    try:
        if reset:
            await drop_all_indexes(store)
        await create_indexes(store)
        logger.info(f"✅ Database '{settings.MONGODB_DB_NAME}' initialized")
    finally:
        await store.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create TourNext indexes")
    parser.add_argument("--reset", action="store_true", help="drop custom indexes first")
    args = parser.parse_args()
    asyncio.run(init_db(args.reset))
