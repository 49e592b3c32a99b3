"""
app/services/tour_guide_service.py

Purpose: Tour guide applications

- Listing filtered by guide_id, status and country
- Unconditional create
"""

from typing import Any, Dict, List, Mapping

from app.db.filters import TOUR_GUIDE_FILTERS, build_filter
from app.db.mongo import MongoStore
from app.services.document_service import find_documents, insert_document


async def list_tour_guides(store: MongoStore, params: Mapping[str, Any]) -> List[Dict[str, Any]]:
    query = build_filter(TOUR_GUIDE_FILTERS, params)
    return await find_documents(store.tour_guides, query)


async def create_tour_guide(store: MongoStore, document: Dict[str, Any]):
    """Inserts a guide application. No duplicate check on guide_id."""
    return await insert_document(store.tour_guides, document)
