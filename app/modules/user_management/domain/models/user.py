# 📄 File: app/modules/user_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines what a "user" record is in this service - name, email, credential, a short description,
# a specialty, an optional profile photo, and how many likes, reviews and stars they have collected
# 🧪 Purpose (Technical Summary):
# Domain model for the UserRecord entity plus the field catalogues (text, numeric, wire aliases)
# shared by field coercion, the repository mapping and the API schemas
# 🔗 Dependencies:
# pydantic, typing
# 🔄 Connected Modules / Calls From:
# field_coercion.py, user_service.py, user_repository.py, user_repository_impl.py, user_schemas.py

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


# Wire (request/response) field names. ``profilePhoto`` keeps the camelCase
# key clients already send; everything else is identical to the attribute name.
TEXT_FIELDS: Tuple[str, ...] = (
    "name",
    "email",
    "password",
    "description",
    "specialty",
    "profilePhoto",
)
NUMERIC_FIELDS: Tuple[str, ...] = ("likes", "reviews", "stars")
RECORD_FIELDS: Tuple[str, ...] = TEXT_FIELDS + NUMERIC_FIELDS

WIRE_TO_ATTRIBUTE: Dict[str, str] = {"profilePhoto": "profile_photo"}


def attribute_name(wire_name: str) -> str:
    """Map a wire field name to the model/column attribute name."""
    return WIRE_TO_ATTRIBUTE.get(wire_name, wire_name)


class UserRecord(BaseModel):
    """
    User record domain model.

    - id (int): assigned by the repository on creation, immutable
    - name, email, password, description, specialty (str, optional)
    - profile_photo (str, optional): filename of the stored photo asset
    - likes, reviews (int): engagement counters, default 0
    - stars (float): rating, default 0.0

    ``email`` is unique across records; the repository enforces it.
    ``password`` is kept exactly as the credential policy produced it.
    """

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    description: Optional[str] = None
    specialty: Optional[str] = None
    profile_photo: Optional[str] = Field(default=None, alias="profilePhoto")
    likes: int = 0
    reviews: int = 0
    stars: float = 0.0

    def to_wire(self) -> Dict[str, Any]:
        """Serialize using wire field names (``profilePhoto``)."""
        return self.model_dump(by_alias=True)
