# 📄 File: app/modules/user_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands each web request the user records service that was set up when the app started,
# and turns the raw request (form upload or JSON) into plain fields plus an optional photo.
# 🧪 Purpose (Technical Summary):
# FastAPI dependencies resolving lifespan-owned collaborators from ``app.state`` and
# request-body readers for multipart, urlencoded and JSON payloads.
# 🔗 Dependencies:
# FastAPI, starlette datastructures, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# app.modules.user_management.presentation.api.v1.users

import json
from typing import Any, Dict, Optional, Tuple

from fastapi import Request
from starlette.datastructures import UploadFile

from app.modules.user_management.domain.services.asset_intake import IncomingAsset
from app.modules.user_management.domain.services.user_service import UserRecordService
from app.shared.core.exceptions import DatabaseError, ValidationError

PHOTO_FIELD = "profilePhoto"
_FORM_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


def get_user_service(request: Request) -> UserRecordService:
    """
    Resolve the service built during application startup.

    Raises:
        DatabaseError: If the application started without its persistence layer
    """
    service = getattr(request.app.state, "user_service", None)
    if service is None:
        raise DatabaseError("User service is not initialized", operation="get_user_service")
    return service


async def read_json_body(request: Request) -> Any:
    """Decode the JSON body; an empty body reads as None."""
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except ValueError as e:
        raise ValidationError(f"Malformed JSON body: {e}") from e


async def read_record_payload(request: Request) -> Tuple[Dict[str, Any], Optional[IncomingAsset]]:
    """
    Read record fields and an optional photo from a form or JSON request.

    A file part named ``profilePhoto`` with an empty filename counts as absent.
    Plain text values under ``profilePhoto`` stay in the fields.
    """
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        fields: Dict[str, Any] = {}
        asset: Optional[IncomingAsset] = None
        for key, value in form.multi_items():
            if isinstance(value, UploadFile):
                if key == PHOTO_FIELD and value.filename:
                    asset = IncomingAsset(
                        filename=value.filename,
                        content_type=value.content_type,
                        data=await value.read(),
                    )
                continue
            fields[key] = value
        return fields, asset

    body = await read_json_body(request)
    if body is None:
        return {}, None
    if not isinstance(body, dict):
        raise ValidationError(
            "Request body must be a JSON object",
            details={"received_type": type(body).__name__},
        )
    return body, None
