# 📄 File: app/modules/user_management/domain/services/user_service.py
# 🧭 Purpose (Layman Explanation):
# This file contains the business rules for managing user records - creating them one at a time
# or in batches, changing them, removing them, and attaching a profile photo.
# 🧪 Purpose (Technical Summary):
# Domain service orchestrating FieldCoercion, CredentialPolicy, AssetIntake and the UserRepository.
# Owns validation order, full-replace vs partial-merge semantics, and the sequential bulk update
# pipeline that stops at the first failing entry.
# 🔗 Dependencies:
# Domain models, field_coercion, credentials, asset_intake, repository interface, exceptions
# 🔄 Connected Modules / Calls From:
# presentation/api/v1/users.py (through presentation/dependencies.py), app.main (construction)

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from app.shared.core.exceptions import (
    EmptyUpdateError,
    InvalidBatchError,
    MissingIdentifierError,
    RecordNotFoundError,
    UserServiceException,
)
from app.shared.utils.logging import get_logger

from ..models.user import RECORD_FIELDS, UserRecord
from ..repositories.user_repository import UserRepository
from .asset_intake import AssetIntake, IncomingAsset
from .credentials import CredentialPolicy, PlaintextCredentialPolicy
from .field_coercion import FieldCoercion, parse_identifier

logger = get_logger(__name__)


@dataclass
class DeletionResult:
    """What a delete hands back: a confirmation message and the removed record."""
    message: str
    record: UserRecord


@dataclass
class BulkUpdateOutcome:
    """Result of applying one bulk update entry."""
    index: int
    record_id: Optional[int] = None
    status: str = "pending"
    record: Optional[UserRecord] = None
    error: Optional[UserServiceException] = None


# =========================================================================
# BULK UPDATE PIPELINE
# =========================================================================

class BulkUpdatePipeline:
    """
    Applies partial-merge updates one entry at a time, in input order.

    Entries that were applied before a failure stay committed. The failing
    entry's exception is re-raised with ``failed_index`` and ``committed_ids``
    added to its details.
    """

    def __init__(
        self,
        repository: UserRepository,
        coercion: FieldCoercion,
        credentials: CredentialPolicy,
    ):
        self.repository = repository
        self.coercion = coercion
        self.credentials = credentials
        self.outcomes: List[BulkUpdateOutcome] = []

    @property
    def committed_ids(self) -> List[int]:
        return [o.record_id for o in self.outcomes if o.status in ("updated", "unchanged")]

    async def run(self, entries: Sequence[Any]) -> List[BulkUpdateOutcome]:
        self.outcomes = []
        for index, entry in enumerate(entries):
            outcome = BulkUpdateOutcome(index=index)
            try:
                await self._apply(index, entry, outcome)
            except UserServiceException as e:
                outcome.status = "failed"
                outcome.error = e
                self._abort(index, e)
                raise
            self.outcomes.append(outcome)
        return self.outcomes

    async def _apply(self, index: int, entry: Any, outcome: BulkUpdateOutcome) -> None:
        if not isinstance(entry, Mapping):
            raise InvalidBatchError(
                message=f"Entry {index} must be an object",
                received_type=type(entry).__name__,
                index=index,
            )
        if "id" not in entry:
            raise MissingIdentifierError(index)

        record_id = parse_identifier(entry["id"], index=index)
        outcome.record_id = record_id

        payload = self.credentials.apply(self.coercion.coerce_partial(entry, index=index))
        if payload:
            outcome.record = await self.repository.update(record_id, payload)
            outcome.status = "updated"
            return

        # Nothing to write, but the record still has to exist
        record = await self.repository.get_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(record_id)
        outcome.record = record
        outcome.status = "unchanged"

    def _abort(self, index: int, error: UserServiceException) -> None:
        committed = self.committed_ids
        error.details["failed_index"] = index
        error.details["committed_ids"] = committed
        logger.warning(
            f"Bulk update aborted at entry {index}: {error.message}",
            failed_index=index,
            committed_ids=committed,
            error_code=error.error_code,
        )


# =========================================================================
# USER RECORD SERVICE
# =========================================================================

class UserRecordService:
    """
    Domain service for user record operations.

    Single update is a full replace (absent fields reset to their defaults);
    bulk update is a partial merge (only fields present are written).
    """

    def __init__(
        self,
        repository: UserRepository,
        asset_intake: AssetIntake,
        coercion: Optional[FieldCoercion] = None,
        credentials: Optional[CredentialPolicy] = None,
    ):
        self.repository = repository
        self.asset_intake = asset_intake
        self.coercion = coercion or FieldCoercion()
        self.credentials = credentials or PlaintextCredentialPolicy()

    # =========================================================================
    # READS
    # =========================================================================

    async def get_by_id(self, record_id: Any) -> UserRecord:
        """
        Get a record by ID.

        Raises:
            InvalidIdentifierError: If the ID is not an integer
            RecordNotFoundError: If no record has this ID
        """
        parsed_id = parse_identifier(record_id)
        user = await self.repository.get_by_id(parsed_id)
        if user is None:
            logger.debug(f"User not found: {parsed_id}")
            raise RecordNotFoundError(parsed_id)
        return user

    async def list_all(self) -> List[UserRecord]:
        return await self.repository.list_all()

    # =========================================================================
    # CREATION
    # =========================================================================

    async def create(
        self,
        fields: Optional[Mapping[str, Any]],
        asset: Optional[IncomingAsset] = None,
    ) -> UserRecord:
        """
        Create a single record, storing its profile photo first when one is attached.

        Args:
            fields: Raw field values as received
            asset: Optional profile photo upload

        Returns:
            UserRecord: The created record including its ID

        Raises:
            UnsupportedMediaTypeError: If the photo type is not allowed
            ValidationError: If a text field is not a string
            DuplicateKeyError: If the email is already registered
            StorageError: If the repository fails
        """
        photo = await self.asset_intake.accept(asset)

        try:
            payload = self.coercion.coerce_full(fields)
            payload["profile_photo"] = photo
            self.credentials.apply(payload)
            user = await self.repository.create(payload)
        except Exception:
            await self.asset_intake.discard(photo)
            raise

        logger.log_business_event(
            "user_created",
            f"User {user.id} created",
            entity_id=str(user.id),
            entity_type="user",
            extra={"has_photo": photo is not None},
        )
        return user

    async def create_bulk(self, records: Any) -> int:
        """
        Create many records in one repository call.

        Returns:
            int: Number of records created

        Raises:
            InvalidBatchError: If ``records`` is not a non-empty list of objects
        """
        if not isinstance(records, (list, tuple)):
            raise InvalidBatchError(received_type=type(records).__name__)
        if not records:
            raise InvalidBatchError(received_type="empty list")

        payloads = []
        for index, entry in enumerate(records):
            if not isinstance(entry, Mapping):
                raise InvalidBatchError(
                    message=f"Entry {index} must be an object",
                    received_type=type(entry).__name__,
                    index=index,
                )
            payloads.append(self.credentials.apply(self.coercion.coerce_full(entry, index=index)))

        count = await self.repository.create_many(payloads)
        logger.log_business_event(
            "users_bulk_created", f"{count} users created in bulk", extra={"count": count}
        )
        return count

    # =========================================================================
    # UPDATES
    # =========================================================================

    async def update(
        self,
        record_id: Any,
        fields: Optional[Mapping[str, Any]],
        asset: Optional[IncomingAsset] = None,
    ) -> UserRecord:
        """
        Replace every field of an existing record.

        Fields absent from ``fields`` are reset: text to None, counters to zero.
        The photo becomes the new upload if any, else the ``profilePhoto`` value
        sent as text, else None.

        Raises:
            InvalidIdentifierError: If the ID is not an integer
            EmptyUpdateError: If neither a known field nor a photo was sent
            UnsupportedMediaTypeError: If the photo type is not allowed
            ValidationError: If a text field is not a string
            RecordNotFoundError: If no record has this ID
            DuplicateKeyError: If the new email is already registered
        """
        parsed_id = parse_identifier(record_id)

        if asset is None and not self.coercion.has_updatable_field(fields):
            raise EmptyUpdateError(accepted_fields=list(RECORD_FIELDS))

        photo = await self.asset_intake.accept(asset)

        try:
            payload = self.coercion.coerce_full(fields)
            if photo is not None:
                payload["profile_photo"] = photo
            self.credentials.apply(payload)
            user = await self.repository.update(parsed_id, payload)
        except Exception:
            await self.asset_intake.discard(photo)
            raise

        logger.log_business_event(
            "user_updated", f"User {parsed_id} replaced", entity_id=str(parsed_id), entity_type="user"
        )
        return user

    async def update_bulk(self, entries: Any) -> List[UserRecord]:
        """
        Partially update many records, strictly in order.

        An empty list is a no-op. The first failing entry aborts the batch;
        earlier entries stay committed.

        Raises:
            InvalidBatchError: If ``entries`` is not a list, or an entry is not an object
            MissingIdentifierError: If an entry has no ``id``
        """
        if not isinstance(entries, (list, tuple)):
            raise InvalidBatchError(
                message="Request body must be a list of records",
                received_type=type(entries).__name__,
            )

        pipeline = BulkUpdatePipeline(self.repository, self.coercion, self.credentials)
        outcomes = await pipeline.run(entries)

        logger.log_business_event(
            "users_bulk_updated",
            f"{len(outcomes)} users updated in bulk",
            extra={"count": len(outcomes)},
        )
        return [outcome.record for outcome in outcomes]

    # =========================================================================
    # DELETION
    # =========================================================================

    async def delete(self, record_id: Any) -> DeletionResult:
        parsed_id = parse_identifier(record_id)
        user = await self.repository.delete(parsed_id)
        logger.log_business_event(
            "user_deleted", f"User {parsed_id} deleted", entity_id=str(parsed_id), entity_type="user"
        )
        return DeletionResult(
            message=f"User with ID {parsed_id} deleted successfully",
            record=user,
        )
