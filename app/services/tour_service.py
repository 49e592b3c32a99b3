"""
app/services/tour_service.py

Purpose: Tour catalogue

- Random sample or full listing sorted by tour.price
- Lookup by the secondary tour_id
- Create and delete
"""

from typing import Any, Dict, List, Optional

from app.core.exceptions import ResourceNotFoundError
from app.db.mongo import MongoStore
from app.services.document_service import (
    delete_document,
    find_documents,
    insert_document,
    sample_documents,
)
from utils.constants import TOUR_PRICE_FIELD
from utils.document_utils import serialize_document
from utils.validation_utils import parse_sample_size, parse_sort_direction


async def list_tours(
    store: MongoStore,
    random: Optional[str] = None,
    sort: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Lists tours.

    Args:
        random: When present, return that many random tours and ignore sort
        sort: Positive for ascending price, negative for descending, "0" unsorted
    """
    if random:
        return await sample_documents(store.tours, parse_sample_size(random))

    direction = parse_sort_direction(sort)
    return await find_documents(store.tours, {}, TOUR_PRICE_FIELD, direction)


async def get_tour(store: MongoStore, tour_id: str) -> Optional[Dict[str, Any]]:
    """
    Returns the first tour whose tour_id equals tour_id.

    Raises:
        ResourceNotFoundError: strict mode and no tour matched
    """
    tour = await store.tours.find_one({"tour_id": tour_id})
    if tour is None and store.settings.STRICT_NOT_FOUND:
        raise ResourceNotFoundError("Tour not found", details={"tour_id": tour_id})
    return serialize_document(tour)


async def create_tour(store: MongoStore, document: Dict[str, Any]):
    return await insert_document(store.tours, document)


async def delete_tour(store: MongoStore, tour_id: str) -> int:
    return await delete_document(store.tours, tour_id, store.settings.STRICT_NOT_FOUND)
