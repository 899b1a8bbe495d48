# app/lib/errors.py
from __future__ import annotations


class StoreError(Exception):
    """Base for every failure the job file store reports to callers."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(StoreError):
    status_code = 400


class NotFound(StoreError):
    status_code = 404


class FileConflict(StoreError):
    # only raised when the collision policy is "reject"
    status_code = 409


class StorageError(StoreError):
    status_code = 500
