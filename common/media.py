"""Item images and user avatars.

The core never touches storage. Services return file intents (rename/delete)
describing what a mutation means for stored images, and the API views apply
them here after the database write succeeded. Files are keyed by item locator
or username under `items/` and `avatars/` in `default_storage`.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from django.core.files import File
from django.core.files.storage import default_storage

from .errors import NotValidImage

logger = logging.getLogger(__name__)

ITEM_IMAGES = "items"
AVATARS = "avatars"


@dataclass(frozen=True)
class RenameFile:
    folder: str
    old_key: str
    new_key: str


@dataclass(frozen=True)
class DeleteFile:
    folder: str
    key: str


def storage_path(folder: str, key: str) -> str:
    return f"{folder}/{key}"


def validate_image(upload) -> None:
    """Raise NotValidImage unless the upload declares an image/* content type."""
    content_type = (getattr(upload, "content_type", "") or "").lower()
    if not content_type.startswith("image/"):
        raise NotValidImage()


def save_image(folder: str, key: str, upload) -> str:
    """Store `upload` as the image for `key`, replacing any previous one."""
    validate_image(upload)
    path = storage_path(folder, key)
    if default_storage.exists(path):
        default_storage.delete(path)
    saved = default_storage.save(path, upload)
    logger.info("Stored image %s", saved)
    return saved


def image_url(folder: str, key: str) -> str:
    path = storage_path(folder, key)
    if not default_storage.exists(path):
        return ""
    return default_storage.url(path)


def _rename(intent: RenameFile) -> None:
    old_path = storage_path(intent.folder, intent.old_key)
    new_path = storage_path(intent.folder, intent.new_key)
    if old_path == new_path or not default_storage.exists(old_path):
        return
    if default_storage.exists(new_path):
        default_storage.delete(new_path)
    with default_storage.open(old_path, "rb") as fh:
        default_storage.save(new_path, File(fh))
    default_storage.delete(old_path)
    logger.info("Renamed %s -> %s", old_path, new_path)


def _delete(intent: DeleteFile) -> None:
    path = storage_path(intent.folder, intent.key)
    if default_storage.exists(path):
        default_storage.delete(path)
        logger.info("Deleted %s", path)


def apply_file_intents(intents: Iterable) -> None:
    for intent in intents:
        if isinstance(intent, RenameFile):
            _rename(intent)
        elif isinstance(intent, DeleteFile):
            _delete(intent)
        else:
            raise TypeError(f"Unknown file intent: {intent!r}")
