# 📄 File: app/modules/user_management/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save, find, update, and delete user records without saying
# which database actually holds them
# 🧪 Purpose (Technical Summary):
# Repository interface for UserRecord persistence; implementations signal not-found and
# uniqueness conflicts with dedicated exceptions and wrap every other failure as StorageError
# 🔗 Dependencies:
# Domain models (UserRecord), typing, abc
# 🔄 Connected Modules / Calls From:
# user_service.py, infrastructure/database/user_repository_impl.py, test fakes

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from ..models.user import UserRecord


class UserRepository(ABC):
    """
    Repository interface for UserRecord data access operations.

    Implementation Notes:
    - Payloads are keyed by model attribute names (``profile_photo``), never wire names
    - Every call is its own unit of persistence; ``create_many`` is all-or-nothing
    - Uniqueness violations raise DuplicateKeyError, missing rows RecordNotFoundError,
      everything else StorageError
    """

    @abstractmethod
    async def get_by_id(self, record_id: int) -> Optional[UserRecord]:
        """
        Get a record by ID.

        Args:
            record_id: Record ID to find

        Returns:
            UserRecord if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[UserRecord]:
        """Return every record ordered by ID."""
        pass

    @abstractmethod
    async def create(self, payload: Dict[str, Any]) -> UserRecord:
        """
        Create a new record.

        Args:
            payload: Coerced field values

        Returns:
            Created UserRecord with its generated ID

        Raises:
            DuplicateKeyError: If the email is already taken
            StorageError: If the database operation fails
        """
        pass

    @abstractmethod
    async def create_many(self, payloads: Sequence[Dict[str, Any]]) -> int:
        """
        Create several records in one transaction.

        Returns:
            int: Number of records created
        """
        pass

    @abstractmethod
    async def update(self, record_id: int, payload: Dict[str, Any]) -> UserRecord:
        """
        Overwrite the given attributes of an existing record.

        Only the keys present in ``payload`` are written; callers decide between
        full replace and partial merge by what they put in it.

        Raises:
            RecordNotFoundError: If no record has this ID
            DuplicateKeyError: If the new email is already taken
            StorageError: If the database operation fails
        """
        pass

    @abstractmethod
    async def delete(self, record_id: int) -> UserRecord:
        """
        Delete a record and return its last state.

        Raises:
            RecordNotFoundError: If no record has this ID
        """
        pass
