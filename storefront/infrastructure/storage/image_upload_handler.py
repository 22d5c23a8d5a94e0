"""
Product image upload handling.

The handler works in two steps so the caller can validate the whole request
before anything touches storage:

  screen()  - classify the multipart file as ACCEPTED, REJECTED or ABSENT
  persist() - write an accepted file under the storage root and return its path

Files are keyed by the client file name (collisions overwrite) unless the
"unique" naming strategy is configured.
"""

# Standard library imports
import logging
import uuid
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Protocol

# Local application imports
from ...core.exceptions import FileTooLargeError, UnsupportedFileTypeError
from ...domain.constants import (
    ALLOWED_IMAGE_MIME,
    IMAGE_NAMING_UNIQUE,
    UPLOAD_CHUNK_SIZE,
)

logger = logging.getLogger(__name__)


class IncomingFile(Protocol):
    """The part of starlette's UploadFile the handler relies on."""
    filename: Optional[str]

    @property
    def content_type(self) -> Optional[str]: ...

    async def read(self, size: int = -1) -> bytes: ...


class UploadStatus(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    ABSENT = "absent"


@dataclass(frozen=True)
class UploadOutcome:
    """Result of screening or persisting one upload"""
    status: UploadStatus
    path: Optional[str] = None
    original_filename: Optional[str] = None
    content_type: Optional[str] = None
    reason: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.status is UploadStatus.ACCEPTED

    @property
    def rejected(self) -> bool:
        return self.status is UploadStatus.REJECTED

    @property
    def absent(self) -> bool:
        return self.status is UploadStatus.ABSENT


class ImageUploadHandler:
    """Screens and stores product images under a storage root"""

    def __init__(
        self,
        upload_dir: str,
        max_mb: int,
        naming: str = "original",
        allowed_mime: frozenset = ALLOWED_IMAGE_MIME,
    ) -> None:
        self.upload_dir = Path(upload_dir)
        self.max_bytes = max_mb * 1024 * 1024
        self.naming = naming
        self.allowed_mime = allowed_mime

    def screen(self, upload: Optional[IncomingFile]) -> UploadOutcome:
        """
        Classify an upload without writing it
        
        Args:
            upload: Multipart file, or None when the field was not sent
            
        Returns:
            UploadOutcome with status ACCEPTED (path not yet set), REJECTED or ABSENT
        """
        if upload is None or not upload.filename:
            return UploadOutcome(status=UploadStatus.ABSENT)

        content_type = (upload.content_type or "").strip().lower()
        if content_type not in self.allowed_mime:
            logger.info(f"Rejected upload {upload.filename!r} with content type {content_type!r}")
            return UploadOutcome(
                status=UploadStatus.REJECTED,
                original_filename=upload.filename,
                content_type=content_type,
                reason="Only image/jpeg and image/png files are allowed",
            )

        return UploadOutcome(
            status=UploadStatus.ACCEPTED,
            original_filename=upload.filename,
            content_type=content_type,
        )

    async def persist(self, upload: IncomingFile) -> UploadOutcome:
        """
        Write an accepted upload under the storage root
        
        Args:
            upload: Multipart file that screened as ACCEPTED
            
        Returns:
            ACCEPTED UploadOutcome carrying the stored path
            
        Raises:
            UnsupportedFileTypeError: If the upload does not screen as ACCEPTED
            FileTooLargeError: If the upload exceeds the size limit (partial file removed)
        """
        screened = self.screen(upload)
        if not screened.accepted:
            raise UnsupportedFileTypeError(screened.reason or "No image file to store")

        self.upload_dir.mkdir(parents=True, exist_ok=True)
        final_path = self.upload_dir / self._storage_name(screened.original_filename or "")

        size = 0
        with open(final_path, "wb") as f:
            while True:
                chunk = await upload.read(UPLOAD_CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > self.max_bytes:
                    f.close()
                    final_path.unlink(missing_ok=True)
                    raise FileTooLargeError(
                        f"File too large. Max {self.max_bytes // (1024 * 1024)} MB."
                    )
                f.write(chunk)

        logger.info(f"Stored product image {screened.original_filename!r} at {final_path} ({size} bytes)")
        return UploadOutcome(
            status=UploadStatus.ACCEPTED,
            path=final_path.as_posix(),
            original_filename=screened.original_filename,
            content_type=screened.content_type,
        )

    def _storage_name(self, original_filename: str) -> str:
        # Directory components from the client are never honoured
        name = Path(original_filename.replace("\\", "/")).name
        if self.naming == IMAGE_NAMING_UNIQUE or name in ("", ".", ".."):
            return f"{uuid.uuid4().hex}{Path(name).suffix.lower()}"
        return name
