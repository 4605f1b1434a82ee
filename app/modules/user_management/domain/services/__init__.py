# 📄 File: app/modules/user_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The business logic for user records: cleaning input, checking photos, and running
# single and bulk operations.
# 🧪 Purpose (Technical Summary):
# Package initialization for domain services.
# 🔗 Dependencies:
# field_coercion, credentials, asset_intake, user_service
# 🔄 Connected Modules / Calls From:
# Presentation layer, app.main

from .asset_intake import AssetIntake, IncomingAsset
from .credentials import CredentialPolicy, PlaintextCredentialPolicy
from .field_coercion import FieldCoercion, NumericPolicy, parse_identifier
from .user_service import BulkUpdateOutcome, BulkUpdatePipeline, DeletionResult, UserRecordService

__all__ = [
    "AssetIntake",
    "IncomingAsset",
    "CredentialPolicy",
    "PlaintextCredentialPolicy",
    "FieldCoercion",
    "NumericPolicy",
    "parse_identifier",
    "BulkUpdateOutcome",
    "BulkUpdatePipeline",
    "DeletionResult",
    "UserRecordService",
]
