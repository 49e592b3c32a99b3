"""
app/db/indexes.py

Purpose: Database index management

- Lookup indexes for every field the API filters or sorts on
- No unique constraints: user email uniqueness is a pre-insert check
"""

from pymongo import ASCENDING

from app.db.mongo import MongoStore
from app.core.logging import get_logger
from utils.constants import (
    USERS_COLLECTION,
    TOURS_COLLECTION,
    BOOKINGS_COLLECTION,
    TOUR_GUIDES_COLLECTION,
    STORIES_COLLECTION,
    TOUR_PRICE_FIELD,
)

logger = get_logger(__name__)

# collection -> [(field, index name)]
INDEXES = {
    USERS_COLLECTION: [
        ("email", "email_idx"),
        ("role", "role_idx"),
    ],
    TOURS_COLLECTION: [
        ("tour_id", "tour_id_idx"),
        (TOUR_PRICE_FIELD, "tour_price_idx"),
    ],
    BOOKINGS_COLLECTION: [
        ("tourist_email", "tourist_email_idx"),
    ],
    TOUR_GUIDES_COLLECTION: [
        ("guide_id", "guide_id_idx"),
        ("status", "guide_status_idx"),
    ],
    STORIES_COLLECTION: [
        ("story_id", "story_id_idx"),
        ("poster_email", "poster_email_idx"),
    ],
}


async def create_indexes(store: MongoStore):
    """
    Creates all necessary database indexes.
    This function is idempotent - safe to run multiple times.
    """
    try:
        logger.info("Creating database indexes...")

        for collection_name, indexes in INDEXES.items():
            collection = store.collection(collection_name)
            for field, name in indexes:
                await collection.create_index([(field, ASCENDING)], name=name)
                logger.debug(f"Created index on {collection_name}.{field}")

        logger.info("✅ All database indexes created successfully")

    except Exception as e:
        logger.error(f"Failed to create indexes: {str(e)}", exc_info=True)
        raise


async def drop_all_indexes(store: MongoStore):
    """
    Drops all custom indexes (keeps _id index).
    Use with caution! Only for maintenance/migration.
    """
    try:
        logger.warning("Dropping all database indexes...")

        for collection_name in INDEXES:
            await store.collection(collection_name).drop_indexes()

        logger.info("✅ All indexes dropped successfully")

    except Exception as e:
        logger.error(f"Failed to drop indexes: {str(e)}", exc_info=True)
        raise
