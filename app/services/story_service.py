"""
app/services/story_service.py

Purpose: Traveller stories

- Random sample, or listing filtered by story_id and poster
- Create (awaited) and delete
"""

from typing import Any, Dict, List, Mapping

from app.db.filters import STORY_FILTERS, build_filter
from app.db.mongo import MongoStore
from app.services.document_service import (
    delete_document,
    find_documents,
    insert_document,
    sample_documents,
)
from utils.validation_utils import parse_sample_size


async def list_stories(store: MongoStore, params: Mapping[str, Any]) -> List[Dict[str, Any]]:
    """
    Lists stories.

    ?random=N returns N random stories and ignores the other filters;
    otherwise ?story_id and ?poster (matched against poster_email) apply.
    """
    random = params.get("random")
    if random:
        return await sample_documents(store.stories, parse_sample_size(random))

    query = build_filter(STORY_FILTERS, params)
    return await find_documents(store.stories, query)


async def create_story(store: MongoStore, document: Dict[str, Any]):
    return await insert_document(store.stories, document)


async def delete_story(store: MongoStore, story_id: str) -> int:
    return await delete_document(store.stories, story_id, store.settings.STRICT_NOT_FOUND)
