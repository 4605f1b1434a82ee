# 📄 File: app/modules/user_management/infrastructure/database/user_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for user records: creating them (one or many at
# once), finding them, changing them and deleting them.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of the UserRepository interface using SQLAlchemy async ORM.
# Every call runs in its own transaction taken from DatabaseSessionManager; integrity
# violations on the email column become DuplicateKeyError; other database failures, and values
# the driver cannot bind, become StorageError.
#
# 🔗 Dependencies:
# - app.modules.user_management.domain.repositories.user_repository (interface)
# - app.modules.user_management.infrastructure.database.models (UserModel)
# - app.shared.infrastructure.database.session (DatabaseSessionManager)
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - app.main (constructed in the lifespan and injected into the service)
# - app.modules.user_management.domain.services.user_service

"""
User Repository Implementation

Maps between UserRecord domain entities and UserModel rows. Payloads arrive
already coerced and keyed by attribute name.
"""

from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.modules.user_management.domain.models.user import UserRecord
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.modules.user_management.infrastructure.database.models import UserModel
from app.shared.core.exceptions import DuplicateKeyError, RecordNotFoundError, StorageError
from app.shared.infrastructure.database.session import DatabaseSessionManager
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

_WRITABLE_COLUMNS = (
    "name",
    "email",
    "password",
    "description",
    "specialty",
    "profile_photo",
    "likes",
    "reviews",
    "stars",
)


class SQLAlchemyUserRepository(UserRepository):
    """
    SQLAlchemy implementation of the UserRepository interface.

    Holds a session manager rather than a session, so each repository call is
    committed (or rolled back) on its own.
    """

    def __init__(self, session_manager: DatabaseSessionManager):
        """
        Initialize the user repository.

        Args:
            session_manager: Source of transactional async sessions
        """
        self._sessions = session_manager

    async def get_by_id(self, record_id: int) -> Optional[UserRecord]:
        try:
            async with self._sessions.get_session() as session:
                user_model = await session.get(UserModel, record_id)
                if user_model is None:
                    logger.debug(f"User not found: {record_id}")
                    return None
                return self._model_to_domain(user_model)

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user {record_id}: {str(e)}")
            raise StorageError(f"Failed to retrieve user: {str(e)}", operation="get_by_id") from e

    async def list_all(self) -> List[UserRecord]:
        try:
            async with self._sessions.get_session() as session:
                result = await session.execute(select(UserModel).order_by(UserModel.id))
                users = [self._model_to_domain(model) for model in result.scalars().all()]

            logger.debug(f"Retrieved {len(users)} users")
            return users

        except SQLAlchemyError as e:
            logger.error(f"Database error listing users: {str(e)}")
            raise StorageError(f"Failed to list users: {str(e)}", operation="list_all") from e

    async def create(self, payload: Dict[str, Any]) -> UserRecord:
        """
        Create a new user row.

        Raises:
            DuplicateKeyError: If the email already exists
            StorageError: For other database errors
        """
        try:
            async with self._sessions.get_session() as session:
                user_model = UserModel(**self._columns(payload))
                session.add(user_model)
                await session.flush()  # Get the generated ID
                user = self._model_to_domain(user_model)

            logger.info(f"Created user with ID: {user.id}")
            return user

        except IntegrityError as e:
            raise self._integrity_error(e, payload) from e

        except (SQLAlchemyError, OverflowError) as e:
            logger.error(f"Database error during user creation: {str(e)}")
            raise StorageError(f"Failed to create user: {str(e)}", operation="create") from e

    async def create_many(self, payloads: Sequence[Dict[str, Any]]) -> int:
        """Insert all payloads in a single transaction."""
        try:
            async with self._sessions.get_session() as session:
                session.add_all([UserModel(**self._columns(payload)) for payload in payloads])
                await session.flush()

            logger.info(f"Created {len(payloads)} users in bulk")
            return len(payloads)

        except IntegrityError as e:
            raise self._integrity_error(e) from e

        except (SQLAlchemyError, OverflowError) as e:
            logger.error(f"Database error during bulk user creation: {str(e)}")
            raise StorageError(f"Failed to create users: {str(e)}", operation="create_many") from e

    async def update(self, record_id: int, payload: Dict[str, Any]) -> UserRecord:
        """
        Write the payload's columns onto an existing row.

        Raises:
            RecordNotFoundError: If the user does not exist
            DuplicateKeyError: If the new email is already taken
            StorageError: For other database errors
        """
        try:
            async with self._sessions.get_session() as session:
                user_model = await session.get(UserModel, record_id)
                if user_model is None:
                    raise RecordNotFoundError(record_id)

                for column, value in self._columns(payload).items():
                    setattr(user_model, column, value)

                await session.flush()
                user = self._model_to_domain(user_model)

            logger.info(f"Updated user: {record_id}")
            return user

        except IntegrityError as e:
            raise self._integrity_error(e, payload) from e

        except (SQLAlchemyError, OverflowError) as e:
            logger.error(f"Database error updating user {record_id}: {str(e)}")
            raise StorageError(f"Failed to update user: {str(e)}", operation="update") from e

    async def delete(self, record_id: int) -> UserRecord:
        try:
            async with self._sessions.get_session() as session:
                user_model = await session.get(UserModel, record_id)
                if user_model is None:
                    logger.debug(f"User not found for deletion: {record_id}")
                    raise RecordNotFoundError(record_id)

                snapshot = self._model_to_domain(user_model)
                await session.delete(user_model)
                await session.flush()

            logger.info(f"Deleted user: {record_id}")
            return snapshot

        except SQLAlchemyError as e:
            logger.error(f"Database error deleting user {record_id}: {str(e)}")
            raise StorageError(f"Failed to delete user: {str(e)}", operation="delete") from e

    # =========================================================================
    # Mapping helpers
    # =========================================================================

    @staticmethod
    def _columns(payload: Dict[str, Any]) -> Dict[str, Any]:
        return {key: value for key, value in payload.items() if key in _WRITABLE_COLUMNS}

    @staticmethod
    def _integrity_error(error: IntegrityError, payload: Optional[Dict[str, Any]] = None) -> Exception:
        text = str(error.orig if error.orig is not None else error).lower()
        if "unique" in text or "duplicate" in text:
            email = (payload or {}).get("email")
            logger.warning(f"User write rejected - email already exists: {email}")
            return DuplicateKeyError(value=email)

        logger.error(f"Integrity error writing user: {text}")
        return StorageError(f"Integrity constraint violated: {text}", operation="write")

    @staticmethod
    def _model_to_domain(user_model: UserModel) -> UserRecord:
        return UserRecord(
            id=user_model.id,
            name=user_model.name,
            email=user_model.email,
            password=user_model.password,
            description=user_model.description,
            specialty=user_model.specialty,
            profile_photo=user_model.profile_photo,
            likes=user_model.likes if user_model.likes is not None else 0,
            reviews=user_model.reviews if user_model.reviews is not None else 0,
            stars=user_model.stars if user_model.stars is not None else 0.0,
        )
