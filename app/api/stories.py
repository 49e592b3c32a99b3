"""
app/api/stories.py

Purpose: Story endpoints

- GET    /stories        ?random=N sample, or ?story_id / ?poster filters
- POST   /stories        create
- DELETE /stories/{id}   delete by ObjectId
"""

from fastapi import APIRouter, Body, Depends, Query, Response, status
from typing import Any, Dict, Optional

from app.db.mongo import MongoStore, get_store
from app.schemas.response import InsertResult
from app.services import story_service

router = APIRouter()


@router.get("/stories")
async def list_stories(
    story_id: Optional[str] = Query(None),
    poster: Optional[str] = Query(None, description="Poster's email"),
    random: Optional[str] = Query(None, description="Return this many random stories"),
    store: MongoStore = Depends(get_store),
):
    return await story_service.list_stories(
        store, {"story_id": story_id, "poster": poster, "random": random}
    )


@router.post("/stories", status_code=status.HTTP_201_CREATED, response_model=InsertResult)
async def create_story(
    document: Dict[str, Any] = Body(...),
    store: MongoStore = Depends(get_store),
):
    result = await story_service.create_story(store, document)
    return InsertResult.from_result(result)


@router.delete("/stories/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_story(id: str, store: MongoStore = Depends(get_store)):
    await story_service.delete_story(store, id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
