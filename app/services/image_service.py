"""Image lifecycle around timeline records.

Records hold only a filename. An approved request and the post created from it
share the same file, so a file is removed from disk only once no post and no
request references it any more.
"""

import logging
from typing import Optional

from fastapi import UploadFile
from sqlalchemy.orm import Session

from app.crud import crud_post_request, crud_timeline_post
from app.services.side_effects import SideEffectLog
from app.utils.file_handler import delete_file, save_image

logger = logging.getLogger(__name__)


def has_upload(image: Optional[UploadFile]) -> bool:
    return image is not None and bool(image.filename)


def store_upload(image: Optional[UploadFile]) -> Optional[str]:
    """Validate and save an optional upload; returns the stored filename or None."""
    if not has_upload(image):
        return None
    return save_image(image)


def discard_upload(filename: Optional[str]) -> None:
    """Remove a file saved for a record write that did not go through."""
    if not filename:
        return
    try:
        delete_file(filename)
    except OSError as e:
        logger.error(f"Could not remove orphaned upload {filename}: {e}")


def is_image_referenced(db: Session, filename: str) -> bool:
    return (
        crud_timeline_post.count_by_image(db, filename)
        + crud_post_request.count_by_image(db, filename)
    ) > 0


def release_image(db: Session, filename: Optional[str], log: SideEffectLog) -> None:
    """Delete a no longer used image as a best-effort step."""
    if not filename:
        return

    def _release() -> None:
        if is_image_referenced(db, filename):
            logger.info(f"Image {filename} still referenced, keeping file")
            return
        delete_file(filename)

    log.attempt(f"Deleting image {filename}", _release)
