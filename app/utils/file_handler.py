"""File upload handler for timeline images stored on local disk"""
import logging
import uuid
from pathlib import Path
from typing import Optional, Set, Tuple

from fastapi import UploadFile

from app.config import settings
from app.core.exceptions import InternalError, ResourceLimitError, UnsupportedMediaError, ValidationError

# Setup logging
logger = logging.getLogger(__name__)

# ============================================
# FILE TYPE DEFINITIONS WITH MIME VALIDATION
# ============================================

# Magic bytes signatures for file type validation
MAGIC_BYTES = {
    # JPEG: FFD8FF
    "jpeg": [b"\xff\xd8\xff"],
    # PNG: 89504E47
    "png": [b"\x89PNG\r\n\x1a\n"],
    # GIF: GIF87a or GIF89a
    "gif": [b"GIF87a", b"GIF89a"],
    # WEBP: RIFF....WEBP (checked separately, size field sits in between)
    "webp": [b"RIFF"],
}

# Extension to magic type mapping
EXTENSION_TO_TYPE = {
    ".jpg": "jpeg",
    ".jpeg": "jpeg",
    ".png": "png",
    ".gif": "gif",
    ".webp": "webp",
}

ALLOWED_IMAGE_EXTENSIONS: Set[str] = set(EXTENSION_TO_TYPE)
ALLOWED_IMAGE_MIME_TYPES: Set[str] = {
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/gif",
    "image/webp",
}

FILENAME_PREFIX = "timeline"


# ============================================
# SECURITY VALIDATION FUNCTIONS
# ============================================

def validate_magic_bytes(file_content: bytes, expected_type: str) -> bool:
    """
    Validate file content by checking magic bytes (file signature).

    Args:
        file_content: First few bytes of the file
        expected_type: Expected file type (jpeg, png, gif, webp)

    Returns:
        True if magic bytes match expected type
    """
    if expected_type not in MAGIC_BYTES:
        return False

    if expected_type == "webp":
        return file_content[:4] == b"RIFF" and file_content[8:12] == b"WEBP"

    for signature in MAGIC_BYTES[expected_type]:
        if file_content.startswith(signature):
            return True

    return False


def get_file_extension(filename: str) -> str:
    """Safely get file extension in lowercase."""
    if not filename:
        return ""
    return Path(filename).suffix.lower()


def is_safe_filename(filename: str) -> bool:
    """Stored filenames are bare names generated by ``save_image``; anything with a path part is rejected."""
    if not filename:
        return False
    if filename != Path(filename).name or filename in (".", ".."):
        logger.warning(f"Path traversal attempt detected: {filename}")
        return False
    return True


# ============================================
# MAIN VALIDATION FUNCTION
# ============================================

def validate_image_file(
    upload_file: UploadFile,
    max_size_bytes: Optional[int] = None
) -> Tuple[bytes, str]:
    """
    Validate an uploaded image.

    Args:
        upload_file: FastAPI UploadFile object
        max_size_bytes: Optional custom max size, defaults to settings.MAX_UPLOAD_SIZE

    Returns:
        Tuple of (file_content, file_extension)

    Raises:
        UnsupportedMediaError: extension, MIME type or content is not an allowed image
        ResourceLimitError: file is larger than the limit
        ValidationError: file is empty
    """
    if not upload_file or not upload_file.filename:
        raise ValidationError("Invalid or missing file")

    file_ext = get_file_extension(upload_file.filename)
    content_type = (upload_file.content_type or "").lower()

    if file_ext not in ALLOWED_IMAGE_EXTENSIONS or content_type not in ALLOWED_IMAGE_MIME_TYPES:
        raise UnsupportedMediaError()

    # Read file content
    upload_file.file.seek(0)
    file_content = upload_file.file.read()
    upload_file.file.seek(0)  # Reset for potential re-read

    max_size = max_size_bytes or settings.MAX_UPLOAD_SIZE
    if len(file_content) > max_size:
        size_mb = max_size / (1024 * 1024)
        raise ResourceLimitError(f"Image size must be less than {size_mb:g}MB")

    if len(file_content) == 0:
        raise ValidationError("Empty files are not allowed")

    expected_type = EXTENSION_TO_TYPE[file_ext]
    if not validate_magic_bytes(file_content, expected_type):
        logger.warning(
            f"Magic bytes mismatch - filename: {upload_file.filename}, "
            f"expected_type: {expected_type}"
        )
        raise UnsupportedMediaError("File content does not match its extension")

    return file_content, file_ext


# ============================================
# FILE STORAGE FUNCTIONS
# ============================================

def ensure_upload_dir() -> Path:
    """Ensure upload directory exists and return the path."""
    dir_path = Path(settings.UPLOAD_DIR)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def generate_filename(file_ext: str) -> str:
    """Globally unique stored name: ``timeline_<uuid><ext>``."""
    return f"{FILENAME_PREFIX}_{uuid.uuid4()}{file_ext}"


def save_image(upload_file: UploadFile) -> str:
    """
    Validate and save an uploaded image to the uploads directory.

    Returns:
        str: Stored filename (e.g., timeline_<uuid>.jpg)
    """
    file_content, file_ext = validate_image_file(upload_file)

    filename = generate_filename(file_ext)
    file_path = ensure_upload_dir() / filename

    try:
        with open(file_path, "wb") as f:
            f.write(file_content)
    except OSError as e:
        logger.error(f"Failed to write {file_path}: {e}")
        raise InternalError("Could not store the uploaded image")

    logger.info(f"File saved: {file_path} ({len(file_content)} bytes)")
    return filename


def get_file_path(filename: str) -> Optional[Path]:
    """Absolute path of a stored file, or None for unsafe names."""
    if not is_safe_filename(filename):
        return None
    return Path(settings.UPLOAD_DIR).resolve() / filename


def delete_file(filename: Optional[str]) -> bool:
    """
    Delete a stored image.

    Missing files and empty names are a no-op so deleting twice is safe.
    Other OS errors propagate to the caller.

    Returns:
        True if a file was removed, False otherwise
    """
    if not filename:
        return False

    file_path = get_file_path(filename)
    if file_path is None:
        logger.warning(f"Unsafe file name rejected: {filename}")
        return False

    try:
        file_path.unlink()
    except FileNotFoundError:
        logger.info(f"File already absent: {file_path}")
        return False

    logger.info(f"File deleted: {file_path}")
    return True


def get_file_url(filename: Optional[str]) -> Optional[str]:
    """
    Get public URL path for a stored image.

    Returns:
        e.g. /uploads/timeline/timeline_<uuid>.jpg, or None without a filename
    """
    if not filename:
        return None
    return f"{settings.UPLOAD_URL_PREFIX.rstrip('/')}/{filename}"
