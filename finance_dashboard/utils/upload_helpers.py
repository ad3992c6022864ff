import os
import shutil
from pathlib import Path
from uuid import uuid4

from fastapi import UploadFile

from finance_dashboard.core.config import ALLOWED_EXTENSIONS, UPLOAD_DIR


def get_upload_dir() -> Path:
    path = Path(UPLOAD_DIR)
    path.mkdir(parents=True, exist_ok=True)
    return path


def has_allowed_extension(filename: str) -> bool:
    return os.path.splitext(filename or "")[1].lower() in ALLOWED_EXTENSIONS


def upload_size(file: UploadFile) -> int:
    """Size in bytes of the spooled upload; the read position is left at 0."""
    if file.size is not None:
        return file.size
    file.file.seek(0, os.SEEK_END)
    size = file.file.tell()
    file.file.seek(0)
    return size


def save_upload(file: UploadFile, upload_dir: Path) -> Path:
    """Copy the upload to a uniquely named file inside upload_dir."""
    name = os.path.basename(file.filename or "upload.xlsx")
    path = upload_dir / f"{uuid4().hex}-{name}"
    file.file.seek(0)
    with open(path, "wb") as out:
        shutil.copyfileobj(file.file, out)
    return path


def remove_temp_file(path) -> None:
    if path is not None and os.path.exists(path):
        os.remove(path)
