"""
app/services/booking_service.py

Purpose: Tour bookings

- Listing, optionally for one tourist_email
- Create (awaited before the response is sent)
"""

from typing import Any, Dict, List, Mapping

from app.db.filters import BOOKING_FILTERS, build_filter
from app.db.mongo import MongoStore
from app.services.document_service import find_documents, insert_document


async def list_bookings(store: MongoStore, params: Mapping[str, Any]) -> List[Dict[str, Any]]:
    query = build_filter(BOOKING_FILTERS, params)
    return await find_documents(store.bookings, query)


async def create_booking(store: MongoStore, document: Dict[str, Any]):
    return await insert_document(store.bookings, document)
