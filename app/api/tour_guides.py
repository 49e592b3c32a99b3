"""
app/api/tour_guides.py

Purpose: Tour guide application endpoints
"""

from fastapi import APIRouter, Body, Depends, Query, status
from typing import Any, Dict, Optional

from app.db.mongo import MongoStore, get_store
from app.schemas.response import InsertResult
from app.services import tour_guide_service

router = APIRouter()


@router.get("/tour-guides")
async def list_tour_guides(
    guide_id: Optional[str] = Query(None),
    status_: Optional[str] = Query(None, alias="status"),
    country: Optional[str] = Query(None),
    store: MongoStore = Depends(get_store),
):
    return await tour_guide_service.list_tour_guides(
        store, {"guide_id": guide_id, "status": status_, "country": country}
    )


@router.post("/tour-guides", status_code=status.HTTP_201_CREATED, response_model=InsertResult)
async def create_tour_guide(
    document: Dict[str, Any] = Body(...),
    store: MongoStore = Depends(get_store),
):
    result = await tour_guide_service.create_tour_guide(store, document)
    return InsertResult.from_result(result)
