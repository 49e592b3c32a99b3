"""
app/api/tours.py

Purpose: Tour endpoints

- GET    /tours             ?random=N sample, or all tours sorted by ?sort
- GET    /tours/{tour_id}   lookup by secondary tour_id
- POST   /tours             create
- DELETE /tours/{id}        delete by ObjectId
"""

from fastapi import APIRouter, Body, Depends, Query, Response, status
from typing import Any, Dict, Optional

from app.db.mongo import MongoStore, get_store
from app.schemas.response import InsertResult
from app.services import tour_service

router = APIRouter()


@router.get("/tours")
async def list_tours(
    random: Optional[str] = Query(None, description="Return this many random tours"),
    sort: Optional[str] = Query(None, description="Price order: positive ascending, negative descending, 0 none"),
    store: MongoStore = Depends(get_store),
):
    return await tour_service.list_tours(store, random=random, sort=sort)


@router.get("/tours/{tour_id}")
async def get_tour(tour_id: str, store: MongoStore = Depends(get_store)):
    return await tour_service.get_tour(store, tour_id)


@router.post("/tours", status_code=status.HTTP_201_CREATED, response_model=InsertResult)
async def create_tour(
    document: Dict[str, Any] = Body(...),
    store: MongoStore = Depends(get_store),
):
    result = await tour_service.create_tour(store, document)
    return InsertResult.from_result(result)


@router.delete("/tours/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tour(id: str, store: MongoStore = Depends(get_store)):
    await tour_service.delete_tour(store, id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
