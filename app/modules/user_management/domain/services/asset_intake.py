# 📄 File: app/modules/user_management/domain/services/asset_intake.py
# 🧭 Purpose (Layman Explanation):
# Checks an uploaded profile photo (is it really an image type we accept, is it small enough)
# and hands it to the file store, giving back the name it was saved under
# 🧪 Purpose (Technical Summary):
# Validates the declared MIME type and size of an optional attachment before persisting it
# through FileManager; returns the stored filename or None when no attachment was sent.
# Also removes a stored file again when the write it belonged to failed
# 🔗 Dependencies:
# app.shared.infrastructure.storage.file_manager, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# user_service.py (create, update), presentation/api/v1/users.py (builds IncomingAsset)

from dataclasses import dataclass
from typing import Optional

from app.shared.core.exceptions import FileStorageError, FileTooLargeError, UnsupportedMediaTypeError
from app.shared.infrastructure.storage.file_manager import FileManager
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class IncomingAsset:
    """An uploaded attachment as received: declared name, declared type and raw bytes."""
    filename: Optional[str]
    content_type: Optional[str]
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


class AssetIntake:
    """Gatekeeper between uploaded attachments and the file store."""

    def __init__(self, file_manager: FileManager):
        self.file_manager = file_manager

    async def accept(self, asset: Optional[IncomingAsset]) -> Optional[str]:
        """
        Validate and store an attachment.

        Args:
            asset: The attachment, or None when the request carried none

        Returns:
            Optional[str]: Stored filename, or None when no attachment was given

        Raises:
            UnsupportedMediaTypeError: Declared type is not in the allow-list
            FileTooLargeError: Attachment exceeds the configured size limit
            FileStorageError: The bytes could not be written
        """
        if asset is None:
            return None

        if not self.file_manager.is_allowed_type(asset.content_type):
            logger.warning(
                f"Rejected upload {asset.filename} with type {asset.content_type}",
                filename=asset.filename,
                content_type=asset.content_type,
            )
            raise UnsupportedMediaTypeError(
                message="File type not allowed. Only JPEG, PNG and GIF images are accepted.",
                filename=asset.filename,
                expected_types=sorted(self.file_manager.allowed_types),
                actual_type=asset.content_type,
            )

        if self.file_manager.max_file_size and asset.size > self.file_manager.max_file_size:
            raise FileTooLargeError(
                max_size_bytes=self.file_manager.max_file_size,
                actual_size_bytes=asset.size,
                filename=asset.filename,
            )

        return await self.file_manager.save(asset.data, asset.filename)

    async def discard(self, filename: Optional[str]) -> None:
        """
        Remove a file stored by ``accept`` whose record write failed.

        Runs while another error is propagating, so a failed removal is
        logged rather than raised.
        """
        if filename is None:
            return

        try:
            await self.file_manager.delete(filename)
        except FileStorageError as e:
            logger.warning(f"Could not remove orphaned upload {filename}: {e.message}", filename=filename)
