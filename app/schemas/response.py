from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Any


class ErrorResponse(BaseModel):
    """
    Standard error response structure.
    """
    error: str
    code: str
    details: Optional[Any] = None


class InsertResult(BaseModel):
    """
    Insertion acknowledgment, serialized with the driver's camelCase keys.
    """
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool
    inserted_id: str = Field(alias="insertedId")

    @classmethod
    def from_result(cls, result) -> "InsertResult":
        return cls(acknowledged=result.acknowledged, inserted_id=str(result.inserted_id))


class UpdateResult(BaseModel):
    """
    Update acknowledgment.
    """
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool
    matched_count: int = Field(alias="matchedCount")
    modified_count: int = Field(alias="modifiedCount")
    upserted_id: Optional[str] = Field(default=None, alias="upsertedId")

    @classmethod
    def from_result(cls, result) -> "UpdateResult":
        upserted = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_id=str(upserted) if upserted is not None else None,
        )


class DuplicateUserResponse(BaseModel):
    """Returned instead of an insert acknowledgment when the email is taken."""
    inserted: bool = False


class AcceptGuideResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    update_user: UpdateResult = Field(alias="updateUser")
    update_guide: UpdateResult = Field(alias="updateGuide")
