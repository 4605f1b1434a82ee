# 📄 File: app/modules/user_management/domain/services/credentials.py
# 🧭 Purpose (Layman Explanation):
# The single place that decides what happens to a user's password before it is saved.
# Right now it stores the password exactly as given, but this is where hashing would go
# 🧪 Purpose (Technical Summary):
# CredentialPolicy capability boundary for the ``password`` field, with a plaintext
# passthrough implementation used by default
# 🔗 Dependencies:
# abc, typing
# 🔄 Connected Modules / Calls From:
# user_service.py (create, update, bulk operations)

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class CredentialPolicy(ABC):
    """Transforms the credential before it reaches the repository."""

    field_name = "password"

    @abstractmethod
    def prepare(self, raw: Optional[str]) -> Optional[str]:
        """Return the value to persist for a raw credential."""
        pass

    def apply(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Run ``prepare`` on the credential slot of a payload, if present."""
        if self.field_name in payload and payload[self.field_name] is not None:
            payload[self.field_name] = self.prepare(payload[self.field_name])
        return payload


class PlaintextCredentialPolicy(CredentialPolicy):
    """Stores credentials verbatim."""

    def prepare(self, raw: Optional[str]) -> Optional[str]:
        return raw
