"""Validation of uploaded logo and resume files."""

from dataclasses import dataclass
from pathlib import PurePosixPath

from fastapi import UploadFile

from app.core.exceptions import UploadError

IMAGE_TYPES = {"jpeg", "jpg", "png", "webp", "gif"}
IMAGE_ERROR = "Only image files (jpeg, jpg, png, webp, gif) are allowed."
PDF_ERROR = "Only PDF files are allowed for resumes."
TOO_LARGE_ERROR = "File too large."


@dataclass
class ValidatedUpload:
    """File content accepted for storage."""

    data: bytes
    filename: str
    content_type: str


def _extension(filename: str | None) -> str:
    return PurePosixPath(filename or "").suffix.lower().lstrip(".")


def is_allowed_image(filename: str | None, content_type: str | None) -> bool:
    """Both the extension and the declared type must name an image format."""
    if _extension(filename) not in IMAGE_TYPES:
        return False
    mime = (content_type or "").lower()
    return mime.startswith("image/") and mime.split("/", 1)[1] in IMAGE_TYPES


def is_allowed_pdf(filename: str | None, content_type: str | None) -> bool:
    return _extension(filename) == "pdf" and content_type == "application/pdf"


async def _read_limited(file: UploadFile, max_bytes: int) -> bytes:
    data = await file.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise UploadError(TOO_LARGE_ERROR)
    return data


async def read_image_upload(file: UploadFile, max_bytes: int) -> ValidatedUpload:
    """Validate and read a company logo."""
    if not is_allowed_image(file.filename, file.content_type):
        raise UploadError(IMAGE_ERROR)
    data = await _read_limited(file, max_bytes)
    return ValidatedUpload(data, file.filename or "", file.content_type or "")


async def read_resume_upload(file: UploadFile, max_bytes: int) -> ValidatedUpload:
    """Validate and read a PDF resume."""
    if not is_allowed_pdf(file.filename, file.content_type):
        raise UploadError(PDF_ERROR)
    data = await _read_limited(file, max_bytes)
    return ValidatedUpload(data, file.filename or "", file.content_type or "")
