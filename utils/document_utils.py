"""
utils/document_utils.py

Purpose: JSON-safe rendering of stored documents
"""

from typing import Any, Dict, List, Optional

from bson import ObjectId


def serialize_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: serialize_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [serialize_value(item) for item in value]
    return value


def serialize_document(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Returns a copy of a stored document with ObjectIds (at any depth) as strings.
    The `_id` key is kept as is so clients see the same shape as the store.
    """
    if document is None:
        return None
    return serialize_value(document)


def serialize_documents(documents: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [serialize_document(document) for document in documents]
