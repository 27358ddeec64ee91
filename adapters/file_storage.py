"""Local disk storage for uploaded documents."""

import logging
import re
import time
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional

from app.config import settings
from app.exceptions import ServiceValidationError

logger = logging.getLogger("nutritrack.storage")

CHUNK_SIZE = 1024 * 1024
_SAFE_SUFFIX = re.compile(r"^\.[a-z0-9]{1,10}$")


@dataclass
class StoredFile:
    path: Path
    url: str
    size: int


def upload_root() -> Path:
    root = Path(settings.upload_dir)
    root.mkdir(parents=True, exist_ok=True)
    return root


def _stored_name(original_name: Optional[str]) -> str:
    suffix = Path(original_name or "").suffix.lower()
    if not _SAFE_SUFFIX.match(suffix):
        suffix = ""
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:12]}{suffix}"


def save_stream(source: BinaryIO, original_name: Optional[str]) -> StoredFile:
    """
    Copy an upload stream to disk in chunks under a generated name.

    Raises ServiceValidationError when the stream is empty or exceeds the
    configured size limit; the partial file is removed in both cases.
    """
    filename = _stored_name(original_name)
    path = upload_root() / filename
    limit = settings.max_upload_bytes
    size = 0

    try:
        with open(path, "wb") as out:
            while True:
                chunk = source.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > limit:
                    raise ServiceValidationError(
                        f"File exceeds the {settings.max_upload_mb}MB upload limit"
                    )
                out.write(chunk)
        if size == 0:
            raise ServiceValidationError("Uploaded file is empty")
    except Exception:
        path.unlink(missing_ok=True)
        raise

    url = f"{settings.upload_url_prefix.rstrip('/')}/{filename}"
    logger.info("file_stored name=%s size=%d", filename, size)
    return StoredFile(path=path, url=url, size=size)


def path_for_url(url: str) -> Optional[Path]:
    """Map a stored URL back to a file inside the upload directory, if any."""
    prefix = settings.upload_url_prefix.rstrip("/") + "/"
    if not url.startswith(prefix):
        return None
    name = url[len(prefix):]
    if not name or "/" in name or "\\" in name or name in (".", ".."):
        return None
    return upload_root() / name


def delete_by_url(url: str) -> bool:
    """Remove a stored file; returns False when nothing was removed."""
    path = path_for_url(url)
    if path is None or not path.exists():
        logger.warning("file_missing_on_delete url=%s", url)
        return False
    path.unlink()
    logger.info("file_deleted url=%s", url)
    return True
