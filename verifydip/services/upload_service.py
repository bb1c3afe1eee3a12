#verifydip/services/upload_service.py
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

from verifydip.core.config import Settings

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


class UploadRejected(ValueError):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class StoredFile:
    file_name: str  # generated name on disk
    original_name: Optional[str]
    content_type: str
    size: int
    path: Path


class UploadService:
    """
    Stores uploaded artwork/audio under upload_dir with a random name.
    Only whitelisted content types are accepted; size is enforced while streaming.
    """

    def __init__(self, settings: Settings):
        self.upload_dir = Path(settings.upload_dir)
        self.max_bytes = settings.max_upload_bytes
        self.allowed_types = set(settings.allowed_upload_types)

    def check_type(self, content_type: Optional[str]) -> str:
        if not content_type or content_type not in self.allowed_types:
            raise UploadRejected("Invalid file type")
        return content_type

    def save(self, upload: UploadFile) -> StoredFile:
        content_type = self.check_type(upload.content_type)

        self.upload_dir.mkdir(parents=True, exist_ok=True)
        file_name = uuid.uuid4().hex
        path = self.upload_dir / file_name

        size = 0
        try:
            with path.open("wb") as out:
                while chunk := upload.file.read(CHUNK_SIZE):
                    size += len(chunk)
                    if size > self.max_bytes:
                        raise UploadRejected("File too large", status_code=413)
                    out.write(chunk)
        except UploadRejected:
            path.unlink(missing_ok=True)
            raise

        logger.info(
            "upload stored",
            extra={"file_name": file_name, "original_name": upload.filename, "size": size},
        )
        return StoredFile(
            file_name=file_name,
            original_name=upload.filename,
            content_type=content_type,
            size=size,
            path=path,
        )
