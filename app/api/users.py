"""
app/api/users.py

Purpose: User endpoints and guide application transitions

- GET    /users                         filtered listing
- POST   /users                         create (duplicate email -> inserted: false)
- PATCH  /accept-tour-guide             promote user and accept application
- PATCH  /reject-tour-guide/{guide_id}  reject application
- DELETE /users/{id}                    delete by ObjectId
"""

from fastapi import APIRouter, Body, Depends, Query, Response, status
from fastapi.responses import JSONResponse
from typing import Any, Dict, Optional

from app.db.mongo import MongoStore, get_store
from app.schemas.guide import AcceptGuideRequest
from app.schemas.response import (
    AcceptGuideResponse,
    DuplicateUserResponse,
    InsertResult,
    UpdateResult,
)
from app.services import user_service

router = APIRouter()


@router.get("/users")
async def list_users(
    email: Optional[str] = Query(None, description="Exact email"),
    role: Optional[str] = Query(None, description="Exact role"),
    search: Optional[str] = Query(None, description="Case-insensitive match on full_name or email"),
    store: MongoStore = Depends(get_store),
):
    return await user_service.list_users(
        store, {"email": email, "role": role, "search": search}
    )


@router.post("/users", status_code=status.HTTP_201_CREATED)
async def create_user(
    document: Dict[str, Any] = Body(...),
    store: MongoStore = Depends(get_store),
):
    """
    Creates a user. An already registered email is not an error: the
    response is 200 with {"inserted": false}.
    """
    result = await user_service.create_user(store, document)
    if result is None:
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=DuplicateUserResponse().model_dump()
        )
    return InsertResult.from_result(result).model_dump(by_alias=True)


@router.patch("/accept-tour-guide", response_model=AcceptGuideResponse)
async def accept_tour_guide(
    payload: AcceptGuideRequest,
    store: MongoStore = Depends(get_store),
):
    update_user, update_guide = await user_service.accept_tour_guide(
        store, payload.user_email, payload.guide_id
    )
    return AcceptGuideResponse(
        update_user=UpdateResult.from_result(update_user),
        update_guide=UpdateResult.from_result(update_guide),
    )


@router.patch("/reject-tour-guide/{guide_id}", response_model=UpdateResult)
async def reject_tour_guide(guide_id: str, store: MongoStore = Depends(get_store)):
    result = await user_service.reject_tour_guide(store, guide_id)
    return UpdateResult.from_result(result)


@router.delete("/users/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(id: str, store: MongoStore = Depends(get_store)):
    await user_service.delete_user(store, id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
