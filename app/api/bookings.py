"""
app/api/bookings.py

Purpose: Booking endpoints
"""

from fastapi import APIRouter, Body, Depends, Query, status
from typing import Any, Dict, Optional

from app.db.mongo import MongoStore, get_store
from app.schemas.response import InsertResult
from app.services import booking_service

router = APIRouter()


@router.get("/bookings")
async def list_bookings(
    tourist_email: Optional[str] = Query(None),
    store: MongoStore = Depends(get_store),
):
    return await booking_service.list_bookings(store, {"tourist_email": tourist_email})


@router.post("/bookings", status_code=status.HTTP_201_CREATED, response_model=InsertResult)
async def create_booking(
    document: Dict[str, Any] = Body(...),
    store: MongoStore = Depends(get_store),
):
    result = await booking_service.create_booking(store, document)
    return InsertResult.from_result(result)
