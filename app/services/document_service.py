"""
app/services/document_service.py

Purpose: Collection operations shared by every resource

- Filtered scans, optionally sorted
- Random samples
- Awaited inserts
- Deletes by ObjectId with the configured not-found policy
"""

from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorCollection

from app.core.exceptions import ResourceNotFoundError
from app.core.logging import get_logger, LogContext
from app.db.filters import sample_pipeline
from utils.document_utils import serialize_documents
from utils.validation_utils import to_object_id

logger = get_logger(__name__)


async def find_documents(
    collection: AsyncIOMotorCollection,
    query: Dict[str, Any],
    sort_field: Optional[str] = None,
    sort_direction: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    Returns every document matching query, JSON-safe.

    Args:
        collection: Target collection
        query: Filter document ({} matches everything)
        sort_field: Field to sort on, ignored without sort_direction
        sort_direction: pymongo.ASCENDING or pymongo.DESCENDING
    """
    cursor = collection.find(query)
    if sort_field and sort_direction is not None:
        cursor = cursor.sort(sort_field, sort_direction)
    documents = await cursor.to_list(length=None)
    logger.debug(f"{collection.name}: {len(documents)} documents (filter keys: {sorted(query)})")
    return serialize_documents(documents)


async def sample_documents(collection: AsyncIOMotorCollection, size: int) -> List[Dict[str, Any]]:
    """Returns up to `size` randomly chosen documents."""
    cursor = collection.aggregate(sample_pipeline(size))
    documents = await cursor.to_list(length=None)
    return serialize_documents(documents)


async def insert_document(collection: AsyncIOMotorCollection, document: Dict[str, Any]):
    """
    Inserts a copy of document and waits for the acknowledgment.

    Returns:
        pymongo InsertOneResult
    """
    with LogContext(collection=collection.name):
        result = await collection.insert_one(dict(document))
        logger.info(f"Inserted document {result.inserted_id}")
        return result


async def delete_document(collection: AsyncIOMotorCollection, raw_id: str, strict: bool) -> int:
    """
    Deletes the document whose _id is raw_id.

    Args:
        collection: Target collection
        raw_id: ObjectId hex string from the path
        strict: raise ResourceNotFoundError when nothing was deleted

    Returns:
        Number of deleted documents (0 or 1)

    Raises:
        InvalidIdentifierError: raw_id is malformed
        ResourceNotFoundError: strict and no document matched
    """
    object_id = to_object_id(raw_id)

    with LogContext(collection=collection.name, doc_id=raw_id):
        result = await collection.delete_one({"_id": object_id})

        if result.deleted_count == 0:
            logger.info("Delete matched no document")
            if strict:
                raise ResourceNotFoundError(
                    f"No document with id '{raw_id}' in {collection.name}",
                    details={"id": raw_id}
                )
        else:
            logger.info("Document deleted")

        return result.deleted_count
