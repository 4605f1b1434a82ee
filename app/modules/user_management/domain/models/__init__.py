# 📄 File: app/modules/user_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core user data model - what information we store about each user record
# 🧪 Purpose (Technical Summary):
# Package initialization for domain models exporting UserRecord and the field catalogues
# 🔗 Dependencies:
# user.py
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, infrastructure layer, presentation schemas

from .user import (
    NUMERIC_FIELDS,
    RECORD_FIELDS,
    TEXT_FIELDS,
    UserRecord,
    attribute_name,
)

__all__ = [
    "UserRecord",
    "TEXT_FIELDS",
    "NUMERIC_FIELDS",
    "RECORD_FIELDS",
    "attribute_name",
]
