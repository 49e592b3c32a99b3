"""
app/schemas/guide.py

Purpose: Request bodies for the tour guide status transitions
"""

from pydantic import BaseModel, Field
from typing import Optional


class AcceptGuideRequest(BaseModel):
    """
    Body of PATCH /accept-tour-guide.

    `status` is sent by the frontend but the transition always targets
    "accepted"; it is accepted and ignored.
    """
    user_email: str = Field(..., min_length=1, description="Email of the applicant user")
    guide_id: str = Field(..., min_length=1, description="Application's guide_id")
    status: Optional[str] = None
