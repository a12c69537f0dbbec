"""Local disk storage for uploaded files."""

import logging
import os
import shutil
import time
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)

UPLOAD_FIELD_NAME = "file"
COPY_CHUNK_BYTES = 1024 * 1024
# Upper bound on name-collision retries within one millisecond.
MAX_NAME_ATTEMPTS = 1000


def ensure_upload_dir(directory: str | Path) -> Path:
    """Create the upload directory if it does not exist yet."""
    path = Path(directory)
    if not path.is_dir():
        path.mkdir(parents=True, exist_ok=True)
        logger.info("Created upload directory %s", path)
    return path


def upload_extension(original_filename: str | None) -> str:
    """Extension of the client's file name, including the dot ('' if none)."""
    if not original_filename:
        return ""
    # Some clients send a full path; only the last component matters.
    basename = os.path.basename(original_filename.replace("\\", "/"))
    return os.path.splitext(basename)[1]


def build_upload_filename(
    fieldname: str,
    original_filename: str | None,
    now_ms: int | None = None,
) -> str:
    """Stored file name: '<fieldname>-<epoch millis><ext>', e.g. 'file-1718000000000.pdf'."""
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    return f"{fieldname}-{now_ms}{upload_extension(original_filename)}"


def _candidate_names(filename: str):
    yield filename
    stem, ext = os.path.splitext(filename)
    for n in range(1, MAX_NAME_ATTEMPTS):
        yield f"{stem}-{n}{ext}"


def save_upload(
    source: BinaryIO,
    directory: str | Path,
    fieldname: str,
    original_filename: str | None,
) -> Path:
    """
    Copy an uploaded stream into directory under a generated name; return the path.

    Files are opened in exclusive-create mode, so two uploads landing on the same
    millisecond get '-1', '-2', ... suffixes instead of overwriting each other.
    Blocking; call from a worker thread when running inside the event loop.
    """
    directory = Path(directory)
    filename = build_upload_filename(fieldname, original_filename)
    for candidate in _candidate_names(filename):
        target = directory / candidate
        try:
            out = open(target, "xb")
        except FileExistsError:
            continue
        with out:
            shutil.copyfileobj(source, out, COPY_CHUNK_BYTES)
        return target
    raise FileExistsError(f"Could not allocate a unique upload name for {filename}")
