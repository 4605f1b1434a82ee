# 📄 File: app/shared/infrastructure/storage/file_manager.py

# 🧭 Purpose (Layman Explanation):
# This file acts like a careful filing clerk for profile photos: it gives every uploaded
# picture a fresh, unique name, saves it to disk, and never writes over an existing picture.

# 🧪 Purpose (Technical Summary):
# Local filesystem asset store rooted at UPLOAD_DIR. Exposes the MIME allow-list and size
# limit, generates strictly increasing millisecond-timestamp filenames, writes bytes with
# exclusive-create semantics off the event loop, and resolves stored names back to paths.

# 🔗 Dependencies:
# - asyncio: Off-loop file writes
# - pathlib: Path handling
# - app.shared.config.settings: upload directory, allow-list, size limit

# 🔄 Connected Modules / Calls From:
# Called by: AssetIntake (profile photo uploads), app.main (static /uploads mount and
# directory creation at startup)

import asyncio
import os
import threading
import time
from pathlib import Path
from typing import BinaryIO, FrozenSet, Optional, Union

from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import FileStorageError
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


class FileManager:
    """
    Append-only local storage for uploaded profile photos.

    Every stored file receives a name of the form
    ``<millisecond-timestamp><original-extension>``. The timestamp source is
    strictly increasing within the process.
    """

    def __init__(
        self,
        upload_dir: Optional[Union[str, Path]] = None,
        allowed_types: Optional[FrozenSet[str]] = None,
        max_file_size: Optional[int] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self.upload_dir = Path(upload_dir or settings.UPLOAD_DIR)
        self.allowed_types = frozenset(allowed_types or settings.allowed_photo_types)
        self.max_file_size = max_file_size if max_file_size is not None else settings.MAX_IMAGE_SIZE

        self._last_stamp = 0
        self._stamp_lock = threading.Lock()

    def initialize(self) -> None:
        """Create the upload directory if needed."""
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"File manager initialized at {self.upload_dir}")

    def is_allowed_type(self, content_type: Optional[str]) -> bool:
        return bool(content_type) and content_type.lower() in self.allowed_types

    def generate_filename(self, original_filename: Optional[str]) -> str:
        """Build a unique name from a monotonic millisecond stamp and the original extension."""
        extension = os.path.splitext(original_filename or "")[1]
        with self._stamp_lock:
            stamp = max(int(time.time() * 1000), self._last_stamp + 1)
            self._last_stamp = stamp
        return f"{stamp}{extension}"

    async def save(self, file_data: Union[bytes, BinaryIO], original_filename: Optional[str]) -> str:
        """
        Store bytes under a freshly generated name.

        Args:
            file_data: Raw bytes or a readable binary stream
            original_filename: Client supplied filename, used for its extension only

        Returns:
            str: The stored filename (not a path)

        Raises:
            FileStorageError: If the file cannot be written
        """
        if hasattr(file_data, 'read'):
            file_bytes = file_data.read()
        else:
            file_bytes = file_data

        filename = self.generate_filename(original_filename)
        target = self.upload_dir / filename

        try:
            await asyncio.to_thread(self._write_exclusive, target, file_bytes)
        except OSError as e:
            logger.error(f"Failed to store file {filename}: {e}")
            raise FileStorageError(
                f"Failed to store uploaded file: {e}",
                operation="save",
                filename=filename,
                storage_path=str(self.upload_dir),
            ) from e

        logger.info(
            f"Stored file {filename}",
            filename=filename,
            size_bytes=len(file_bytes),
        )
        return filename

    async def delete(self, filename: str) -> bool:
        """
        Remove a stored file.

        Returns:
            bool: True if a file was removed, False if it did not exist

        Raises:
            FileStorageError: If the file exists but cannot be removed
        """
        target = self.resolve(filename)
        if not target.exists():
            return False

        try:
            await asyncio.to_thread(target.unlink)
        except OSError as e:
            logger.error(f"Failed to delete file {filename}: {e}")
            raise FileStorageError(
                f"Failed to delete file: {e}",
                operation="delete",
                filename=filename,
                storage_path=str(self.upload_dir),
            ) from e

        logger.info(f"Deleted file {filename}", filename=filename)
        return True

    def resolve(self, filename: str) -> Path:
        """Map a stored filename back to its path on disk."""
        return self.upload_dir / Path(filename).name

    @staticmethod
    def _write_exclusive(target: Path, data: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        # "x" refuses to overwrite an existing asset
        with open(target, "xb") as fh:
            fh.write(data)
