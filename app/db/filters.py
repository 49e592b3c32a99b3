"""
app/db/filters.py

Purpose: Declarative filter construction

- Maps recognized query keys to (field, match kind) pairs
- Absent or empty parameters are left out of the filter entirely
- Exact clauses are ANDed; search clauses become a case-insensitive $or group
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple


class MatchKind(str, Enum):
    EXACT = "exact"
    SEARCH = "search"


@dataclass(frozen=True)
class FilterField:
    """
    One recognized query key.

    fields holds a single stored field for EXACT matches and one or more
    fields for SEARCH (any of them may contain the value).
    """
    param: str
    fields: Tuple[str, ...]
    kind: MatchKind = MatchKind.EXACT

    @classmethod
    def exact(cls, param: str, field: Optional[str] = None) -> "FilterField":
        return cls(param=param, fields=(field or param,), kind=MatchKind.EXACT)

    @classmethod
    def search(cls, param: str, *fields: str) -> "FilterField":
        return cls(param=param, fields=tuple(fields), kind=MatchKind.SEARCH)


def _search_clause(fields: Sequence[str], value: str) -> Dict[str, Any]:
    pattern = re.escape(value)
    return {
        "$or": [
            {field: {"$regex": pattern, "$options": "i"}}
            for field in fields
        ]
    }


def build_filter(spec: Sequence[FilterField], params: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Builds a MongoDB filter document from query parameters.

    Args:
        spec: Recognized keys for the resource
        params: Incoming query parameters (unknown keys are ignored)

    Returns:
        Filter document; {} when no recognized parameter is present
    """
    query: Dict[str, Any] = {}
    search_clauses: List[Dict[str, Any]] = []

    for item in spec:
        value = params.get(item.param)
        if value is None or value == "":
            continue

        if item.kind is MatchKind.EXACT:
            query[item.fields[0]] = value
        else:
            search_clauses.append(_search_clause(item.fields, value))

    if len(search_clauses) == 1:
        query.update(search_clauses[0])
    elif search_clauses:
        query["$and"] = search_clauses

    return query


def sample_pipeline(size: int) -> List[Dict[str, Any]]:
    """Aggregation pipeline returning `size` random documents."""
    return [{"$sample": {"size": size}}]


USER_FILTERS = (
    FilterField.exact("email"),
    FilterField.exact("role"),
    FilterField.search("search", "full_name", "email"),
)

TOUR_GUIDE_FILTERS = (
    FilterField.exact("guide_id"),
    FilterField.exact("status"),
    FilterField.exact("country"),
)

BOOKING_FILTERS = (
    FilterField.exact("tourist_email"),
)

STORY_FILTERS = (
    FilterField.exact("story_id"),
    FilterField.exact("poster", "poster_email"),
)
