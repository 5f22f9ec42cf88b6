"""
File uploads: type/size checks, storage on disk and Media bookkeeping.

Files land in UPLOAD_DIR/<images|videos|documents|general>/<uuid4><ext> and
are served back from /uploads/<sub>/<name>.
"""
from __future__ import annotations

import logging
import os
import uuid

from flask import current_app
from sqlalchemy import func

from models import storage
from models.media import Media
from utils.exceptions import InvalidInput

logger = logging.getLogger(__name__)


def subfolder_for(mime_type: str) -> str:
    mime_type = (mime_type or "").lower()
    if mime_type.startswith("image/"):
        return "images"
    if mime_type.startswith("video/"):
        return "videos"
    if "pdf" in mime_type:
        return "documents"
    return "general"


def upload_root() -> str:
    return os.path.abspath(current_app.config["UPLOAD_DIR"])


def _stream_size(file_storage) -> int:
    stream = file_storage.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def too_large_message(max_size: int) -> str:
    return f"File too large. Maximum size is {max_size / 1024 / 1024:g}MB"


def validate_upload(file_storage) -> int:
    """Raise InvalidInput for a missing, disallowed or oversized file; return its size."""
    if file_storage is None or not file_storage.filename:
        raise InvalidInput("No file uploaded")
    allowed = current_app.config["ALLOWED_FILE_TYPES"]
    if file_storage.mimetype not in allowed:
        raise InvalidInput(
            f"File type {file_storage.mimetype} is not allowed. Allowed types: {', '.join(allowed)}"
        )
    max_size = current_app.config["MAX_FILE_SIZE"]
    size = _stream_size(file_storage)
    if size > max_size:
        raise InvalidInput(too_large_message(max_size))
    return size


def save_upload(file_storage, folder: str = "general", alt: str = "", caption: str = "",
                uploaded_by: str = None) -> Media:
    size = validate_upload(file_storage)
    sub = subfolder_for(file_storage.mimetype)
    ext = os.path.splitext(file_storage.filename)[1].lower()
    filename = f"{uuid.uuid4()}{ext}"

    dest_dir = os.path.join(upload_root(), sub)
    os.makedirs(dest_dir, exist_ok=True)
    path = os.path.join(dest_dir, filename)
    file_storage.save(path)

    media = Media(
        filename=filename,
        original_name=file_storage.filename,
        path=path,
        url=f"/uploads/{sub}/{filename}",
        mime_type=file_storage.mimetype,
        size=size,
        alt=alt or "",
        caption=caption or "",
        uploaded_by=uploaded_by,
        folder=folder or "general",
    )
    try:
        storage.new(media)
        storage.save()
    except Exception:
        # keep disk and table in step
        remove_file(path)
        raise
    logger.info("Stored upload %s (%d bytes) as %s", file_storage.filename, size, media.url)
    return media


def remove_file(path: str) -> None:
    if path and os.path.exists(path):
        try:
            os.remove(path)
        except OSError as exc:
            logger.warning("Could not remove %s: %s", path, exc)


def delete_media(media: Media) -> None:
    remove_file(media.path)
    storage.delete(media)
    storage.save()


def media_stats() -> dict:
    session = storage.get_session()
    by_type = (
        session.query(Media.mime_type, func.count(Media.id), func.coalesce(func.sum(Media.size), 0))
        .group_by(Media.mime_type)
        .all()
    )
    total_files = session.query(func.count(Media.id)).scalar() or 0
    total_size = session.query(func.coalesce(func.sum(Media.size), 0)).scalar() or 0
    return {
        "byType": [{"mimeType": m, "count": c, "totalSize": int(s)} for m, c, s in by_type],
        "totalFiles": total_files,
        "totalSize": int(total_size),
    }


def folders() -> list:
    session = storage.get_session()
    return sorted(f for (f,) in session.query(Media.folder).distinct().all() if f)
