"""
Quick check of the MongoDB connection and collection sizes

Run: python scripts/check_db.py
"""

import asyncio
import sys
from pathlib import Path
from dotenv import load_dotenv

sys.path.insert(0, str(Path(__file__).parent.parent))

# Load environment variables
load_dotenv()

from app.core.config import settings
from app.core.logging import setup_logging, get_logger
from app.db.mongo import MongoStore
from utils.constants import ALL_COLLECTIONS

setup_logging()
logger = get_logger("scripts.check_db")


async def check_db():
    """Ping the cluster and report per-collection document counts."""
    print("=" * 60)
    print("  MongoDB Connection Check")
    print("=" * 60 + "\n")

    store = MongoStore(settings)
    try:
        await store.connect()

        if not await store.ping():
            logger.error("❌ Ping failed")
            return

        logger.info("📊 Statistics:")
        for name in ALL_COLLECTIONS:
            count = await store.collection(name).count_documents({})
            logger.info(f"   {name}: {count}")

        indexes = await store.users.index_information()
        logger.info(f"Users indexes: {list(indexes.keys())}")
    finally:
        await store.close()

    print("\n" + "=" * 60)


if __name__ == "__main__":
    asyncio.run(check_db())
