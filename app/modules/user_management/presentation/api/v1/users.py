# 📄 File: app/modules/user_management/presentation/api/v1/users.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for user records: list them, look one up, create one
# (with an optional profile photo) or many, change them, and delete them.
#
# 🧪 Purpose (Technical Summary):
# FastAPI router mounted at /api/v1/users delegating every operation to UserRecordService.
# Domain exceptions propagate to the application exception handler, which renders the
# uniform error envelope.
#
# 🔗 Dependencies:
# - FastAPI router and status codes
# - app.modules.user_management.presentation.dependencies (service resolution, body readers)
# - app.modules.user_management.presentation.api.schemas.user_schemas (response schemas)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (router inclusion)

"""
Users API Endpoints

Endpoints:
- GET /: List every record
- POST /: Create a record (multipart form with optional profilePhoto file, or JSON)
- POST /bulk: Create many records from a JSON array
- PATCH /bulk: Partially update many records from a JSON array of {id, ...}
- GET /{user_id}: Get one record
- PUT /{user_id}: Replace every field of a record
- DELETE /{user_id}: Delete a record
"""

from typing import List

from fastapi import APIRouter, Depends, Request, status

from app.modules.user_management.domain.services.user_service import UserRecordService
from app.modules.user_management.presentation.api.schemas.user_schemas import (
    BulkCreateResponse,
    UserDeleteResponse,
    UserResponse,
)
from app.modules.user_management.presentation.dependencies import (
    get_user_service,
    read_json_body,
    read_record_payload,
)
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

# Create router
users_router = APIRouter()

_record_errors = {
    400: {"description": "Invalid ID"},
    404: {"description": "User not found"},
}


@users_router.get(
    "",
    response_model=List[UserResponse],
    summary="List users",
    description="Return every user record ordered by ID",
)
async def list_users(
    service: UserRecordService = Depends(get_user_service),
) -> List[UserResponse]:
    users = await service.list_all()
    return [UserResponse.from_record(user) for user in users]


@users_router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    description="Create a user from form fields or JSON, with an optional profilePhoto image",
    responses={
        409: {"description": "Email already registered"},
        413: {"description": "Photo too large"},
        415: {"description": "Photo type not allowed"},
    },
)
async def create_user(
    request: Request,
    service: UserRecordService = Depends(get_user_service),
) -> UserResponse:
    """
    Create a single user record.

    Numeric fields that cannot be parsed are stored as zero. When a photo is
    attached it is stored first; a rejected photo means no record is created.
    """
    fields, asset = await read_record_payload(request)
    user = await service.create(fields, asset)
    return UserResponse.from_record(user)


@users_router.post(
    "/bulk",
    response_model=BulkCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create users in bulk",
    responses={
        400: {"description": "Body is not a non-empty list of objects"},
        409: {"description": "Email already registered"},
    },
)
async def create_users_bulk(
    request: Request,
    service: UserRecordService = Depends(get_user_service),
) -> BulkCreateResponse:
    records = await read_json_body(request)
    count = await service.create_bulk(records)
    return BulkCreateResponse(count=count)


@users_router.patch(
    "/bulk",
    response_model=List[UserResponse],
    summary="Update users in bulk",
    description=(
        "Apply partial updates in order. Each entry must carry an id; the first failing "
        "entry stops the batch and earlier entries stay applied."
    ),
    responses={
        400: {"description": "Invalid batch, missing or invalid id"},
        404: {"description": "User not found"},
        409: {"description": "Email already registered"},
    },
)
async def update_users_bulk(
    request: Request,
    service: UserRecordService = Depends(get_user_service),
) -> List[UserResponse]:
    entries = await read_json_body(request)
    users = await service.update_bulk(entries)
    return [UserResponse.from_record(user) for user in users]


@users_router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user",
    responses=_record_errors,
)
async def get_user(
    user_id: str,
    service: UserRecordService = Depends(get_user_service),
) -> UserResponse:
    user = await service.get_by_id(user_id)
    return UserResponse.from_record(user)


@users_router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Replace user",
    description=(
        "Overwrite every field of a user. Fields left out are reset: text to null, "
        "counters to zero."
    ),
    responses={
        **_record_errors,
        409: {"description": "Email already registered"},
        415: {"description": "Photo type not allowed"},
    },
)
async def update_user(
    user_id: str,
    request: Request,
    service: UserRecordService = Depends(get_user_service),
) -> UserResponse:
    fields, asset = await read_record_payload(request)
    user = await service.update(user_id, fields, asset)
    return UserResponse.from_record(user)


@users_router.delete(
    "/{user_id}",
    response_model=UserDeleteResponse,
    summary="Delete user",
    responses=_record_errors,
)
async def delete_user(
    user_id: str,
    service: UserRecordService = Depends(get_user_service),
) -> UserDeleteResponse:
    result = await service.delete(user_id)
    logger.info(f"User {user_id} deleted via API")
    return UserDeleteResponse(message=result.message, user=UserResponse.from_record(result.record))
