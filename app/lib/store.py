# app/lib/store.py
from __future__ import annotations

import mimetypes
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import BinaryIO, List, Optional

from app.config import Config
from app.lib.errors import FileConflict, InvalidArgument, NotFound, StorageError
from app.lib.paths import (
    ROOT_SCOPE,
    resolve_inside,
    split_relative,
    validate_job_name,
    validate_segment,
)
from app.lib.urls import file_url, listing_url
from app.logger import get_logger

log = get_logger(__name__)

CHUNK_SIZE = 1024 * 1024


@dataclass(frozen=True)
class StoredFile:
    job: str
    name: str
    size: int
    url: str


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    size: int
    modified: datetime
    url: Optional[str]
    is_dir: bool


@dataclass(frozen=True)
class FetchedFile:
    path: Path
    name: str
    size: int
    content_type: str


class JobFileStore:
    """
    Files grouped by job under a single root directory.

    A job is nothing more than a directory: there is no metadata beyond its
    existence and mtime. Files directly under the root belong to the
    reserved "root" scope.
    """

    def __init__(self, config: Config):
        self.config = config
        self.root = Path(config.upload_dir)

    def ensure_root(self) -> Path:
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            log.error(f"failed to create upload directory {self.root}: {e}")
            raise StorageError("Failed to create upload directory") from e
        return self.root

    # ------------------------
    # Jobs
    # ------------------------
    def create_job(self, name: str) -> Path:
        validate_job_name(name)
        job_path = resolve_inside(self.root, name)
        try:
            job_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            log.error(f"failed to create job directory {job_path}: {e}")
            raise StorageError("Failed to create job directory") from e
        return job_path

    def submit_job(self, name: str) -> Path:
        # Same contract as create_job; kept apart because the HTTP layer
        # treats an explicit submit differently from an upload-created job.
        return self.create_job(name)

    # ------------------------
    # Upload
    # ------------------------
    def store_file(
        self,
        job_name: str,
        filename: str,
        stream: BinaryIO,
        declared_size: int,
        *,
        base_url: str,
    ) -> StoredFile:
        """
        Copy `stream` to <root>/<job_name>/<filename>, creating the job
        directory if needed. Partial files are removed on failure.
        """
        validate_job_name(job_name)
        validate_segment(filename, "filename")
        limit = self.config.max_file_size
        if declared_size is not None and declared_size > limit:
            raise InvalidArgument(f"File too large. Maximum size is {limit} bytes")

        dest = resolve_inside(self.root, job_name, filename)
        if self.config.on_collision == "reject" and dest.exists():
            raise FileConflict(f"file {filename!r} already exists in job {job_name!r}")

        self.create_job(job_name)

        written = 0
        try:
            with open(dest, "wb") as out:
                while True:
                    chunk = stream.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    written += len(chunk)
                    if written > limit:
                        raise InvalidArgument(f"File too large. Maximum size is {limit} bytes")
                    out.write(chunk)
        except Exception as e:
            self._discard(dest)
            if isinstance(e, OSError):
                log.error(f"failed to save {dest}: {e}")
                raise StorageError("Failed to save file") from e
            raise

        log.info(f"stored {job_name}/{filename} ({written} bytes)")
        return StoredFile(
            job=job_name,
            name=filename,
            size=written,
            url=file_url(base_url, job_name, filename),
        )

    @staticmethod
    def _discard(path: Path) -> None:
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            log.warning(f"failed to remove partial file {path}: {e}")

    # ------------------------
    # Listing
    # ------------------------
    def list_entries(self, relative_path: str = "", *, base_url: str) -> List[DirectoryEntry]:
        """
        Immediate children of <root>/<relative_path>. Order is whatever the
        filesystem returns.
        """
        parts = split_relative(relative_path)
        target = resolve_inside(self.root, *parts)
        if not target.is_dir():
            raise NotFound(f"directory not found: {'/'.join(parts) or '/'}")

        entries: List[DirectoryEntry] = []
        try:
            with os.scandir(target) as it:
                for child in it:
                    try:
                        st = child.stat()
                        is_dir = child.is_dir()
                    except FileNotFoundError:
                        # removed between scandir and stat
                        continue
                    entries.append(self._entry(parts, child.name, st, is_dir, base_url))
        except FileNotFoundError as e:
            raise NotFound(f"directory not found: {'/'.join(parts) or '/'}") from e
        except OSError as e:
            log.error(f"failed to read directory {target}: {e}")
            raise StorageError("Failed to read directory") from e
        return entries

    @staticmethod
    def _entry(parts: List[str], name: str, st: os.stat_result, is_dir: bool, base_url: str) -> DirectoryEntry:
        modified = datetime.fromtimestamp(st.st_mtime, tz=timezone.utc)
        if is_dir:
            url = listing_url(base_url, "/".join(parts + [name]))
            return DirectoryEntry(name=name, size=0, modified=modified, url=url, is_dir=True)

        if not parts:
            url = file_url(base_url, ROOT_SCOPE, name)
        elif len(parts) == 1:
            url = file_url(base_url, parts[0], name)
        else:
            # scope/filename cannot address anything deeper than a job directory
            url = None
        return DirectoryEntry(name=name, size=st.st_size, modified=modified, url=url, is_dir=False)

    # ------------------------
    # Retrieval
    # ------------------------
    def fetch_file(self, scope: str, filename: str) -> FetchedFile:
        validate_segment(scope, "scope")
        validate_segment(filename, "filename")
        if scope == ROOT_SCOPE:
            path = resolve_inside(self.root, filename)
        else:
            path = resolve_inside(self.root, scope, filename)

        if not path.is_file():
            raise NotFound("File not found")
        try:
            size = path.stat().st_size
        except FileNotFoundError as e:
            raise NotFound("File not found") from e
        except OSError as e:
            log.error(f"failed to read {path}: {e}")
            raise StorageError("Failed to read file") from e

        content_type, _ = mimetypes.guess_type(filename)
        return FetchedFile(
            path=path,
            name=filename,
            size=size,
            content_type=content_type or "application/octet-stream",
        )
