"""
app/services/user_service.py

Purpose: User records and the guide application transitions

- Filtered user listing (exact email/role, case-insensitive search)
- Create with a pre-insert email existence check
- Accept a user as tour guide (user role + guide status, compensated)
- Reject a guide application
- Delete by id
"""

from typing import Any, Dict, List, Mapping, Tuple

from app.core.exceptions import (
    GuideAcceptanceError,
    ResourceNotFoundError,
    ValidationError,
)
from app.core.logging import get_logger, LogContext
from app.db.filters import USER_FILTERS, build_filter
from app.db.mongo import MongoStore
from app.services.document_service import delete_document, find_documents, insert_document
from utils.constants import (
    GUIDE_STATUS_ACCEPTED,
    GUIDE_STATUS_REJECTED,
    TOUR_GUIDE_ROLE,
    USERS_COLLECTION,
)

logger = get_logger(__name__)

_MISSING = object()


async def list_users(store: MongoStore, params: Mapping[str, Any]) -> List[Dict[str, Any]]:
    """
    Lists users matching ?email, ?role and ?search.

    Returns:
        Matching user documents (empty list when none match)
    """
    query = build_filter(USER_FILTERS, params)
    return await find_documents(store.users, query)


async def create_user(store: MongoStore, document: Dict[str, Any]):
    """
    Inserts a user unless one with the same email already exists.

    The check and the insert are two operations; concurrent creates for
    the same email can both pass the check.

    Args:
        store: Connected store
        document: User document, must carry `email`

    Returns:
        InsertOneResult, or None when the email is already registered
    """
    email = document.get("email")
    if not isinstance(email, str) or not email.strip():
        raise ValidationError("User document must include an email string", details={"field": "email"})

    with LogContext(collection=USERS_COLLECTION, email=email):
        existing = await store.users.find_one({"email": email})
        if existing:
            logger.info("User already exists, skipping insert")
            return None

        return await insert_document(store.users, document)


async def _require_match(collection, query: Dict[str, Any], label: str):
    document = await collection.find_one(query)
    if document is None:
        raise ResourceNotFoundError(f"{label} not found", details=query)
    return document


async def accept_tour_guide(store: MongoStore, user_email: str, guide_id: str) -> Tuple[Any, Any]:
    """
    Promotes a user to tour guide and marks their application accepted.

    Writes happen in order: user role, then guide status. If the guide
    write fails, the user's previous role is restored before the error is
    raised, so a failed acceptance never leaves a promoted user behind an
    unaccepted application.

    Args:
        store: Connected store
        user_email: Applicant's email
        guide_id: Application's guide_id

    Returns:
        (user UpdateResult, guide UpdateResult)

    Raises:
        ResourceNotFoundError: strict mode and the user or guide does not exist
        GuideAcceptanceError: the guide write failed after the user write
    """
    strict = store.settings.STRICT_NOT_FOUND

    with LogContext(email=user_email, guide_id=guide_id):
        previous_role: Any = _MISSING
        user = await store.users.find_one({"email": user_email})
        if user is not None:
            previous_role = user.get("role", _MISSING)
        elif strict:
            raise ResourceNotFoundError("User not found", details={"email": user_email})

        if strict:
            await _require_match(store.tour_guides, {"guide_id": guide_id}, "Tour guide")

        update_user = await store.users.update_one(
            {"email": user_email},
            {"$set": {"role": TOUR_GUIDE_ROLE}}
        )
        logger.info(f"User role set to '{TOUR_GUIDE_ROLE}' (matched={update_user.matched_count})")

        try:
            update_guide = await store.tour_guides.update_one(
                {"guide_id": guide_id},
                {"$set": {"status": GUIDE_STATUS_ACCEPTED}}
            )
        except Exception as e:
            logger.error(f"Guide status update failed, restoring user role: {e}")
            compensated = await _restore_role(store, user_email, update_user, previous_role)
            raise GuideAcceptanceError(
                "Tour guide acceptance failed; user role "
                + ("restored" if compensated else "could not be restored"),
                details={
                    "user_updated": update_user.modified_count > 0 and not compensated,
                    "guide_updated": False,
                    "compensated": compensated,
                }
            ) from e

        logger.info(f"Guide status set to '{GUIDE_STATUS_ACCEPTED}' (matched={update_guide.matched_count})")
        return update_user, update_guide


async def _restore_role(store: MongoStore, user_email: str, update_user, previous_role: Any) -> bool:
    """
    Undoes the role promotion. Returns True when the user is back to its
    previous state (or was never modified).
    """
    if update_user.modified_count == 0:
        return True

    if previous_role is _MISSING:
        change: Dict[str, Any] = {"$unset": {"role": ""}}
    else:
        change = {"$set": {"role": previous_role}}

    try:
        await store.users.update_one({"email": user_email}, change)
        logger.warning("User role restored after failed guide acceptance")
        return True
    except Exception:
        logger.critical(
            "Could not restore user role after failed guide acceptance",
            exc_info=True
        )
        return False


async def reject_tour_guide(store: MongoStore, guide_id: str):
    """
    Marks a guide application rejected. The user record is untouched.

    Returns:
        UpdateResult

    Raises:
        ResourceNotFoundError: strict mode and no guide matched
    """
    with LogContext(guide_id=guide_id):
        result = await store.tour_guides.update_one(
            {"guide_id": guide_id},
            {"$set": {"status": GUIDE_STATUS_REJECTED}}
        )
        if result.matched_count == 0 and store.settings.STRICT_NOT_FOUND:
            raise ResourceNotFoundError("Tour guide not found", details={"guide_id": guide_id})

        logger.info(f"Guide status set to '{GUIDE_STATUS_REJECTED}'")
        return result


async def delete_user(store: MongoStore, user_id: str) -> int:
    return await delete_document(store.users, user_id, store.settings.STRICT_NOT_FOUND)
