# 📄 File: app/modules/user_management/presentation/api/schemas/user_schemas.py
# 🧭 Purpose (Layman Explanation):
# This file defines what the API sends back for user records: a single record, a count after
# a bulk create, and the confirmation after a delete.
#
# 🧪 Purpose (Technical Summary):
# Pydantic response schemas for the users endpoints. Serialization uses the camelCase
# ``profilePhoto`` alias; request bodies are read raw so coercion can stay permissive.
#
# 🔗 Dependencies:
# - pydantic for serialization
# - app.modules.user_management.domain.models.user (UserRecord)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1.users

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.user_management.domain.models.user import UserRecord


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class UserResponse(BaseModel):
    """A stored user record as returned by the API."""

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Ana Souza",
                "email": "ana@example.com",
                "password": "secret",
                "description": "Pediatric nutritionist",
                "specialty": "Nutrition",
                "profilePhoto": "1718000000000.png",
                "likes": 12,
                "reviews": 3,
                "stars": 4.5,
            }
        },
    )

    id: int = Field(..., description="Record ID")
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    description: Optional[str] = None
    specialty: Optional[str] = None
    profile_photo: Optional[str] = Field(
        default=None,
        alias="profilePhoto",
        description="Stored photo filename, served under /uploads",
    )
    likes: int = 0
    reviews: int = 0
    stars: float = 0.0

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserResponse":
        return cls.model_validate(record.model_dump())


class BulkCreateResponse(BaseModel):
    """Number of records created by a bulk create."""
    count: int = Field(..., ge=0, description="Records created")


class UserDeleteResponse(BaseModel):
    """Deletion confirmation carrying the removed record."""
    message: str = Field(..., description="Confirmation message")
    user: UserResponse = Field(..., description="The record as it was before deletion")
