# app/__init__.py
from .config import Config, config, load_config
from .logger import get_logger
from .lib.errors import StoreError, InvalidArgument, NotFound, FileConflict, StorageError
from .lib.store import JobFileStore, StoredFile, DirectoryEntry, FetchedFile
from .main import app, create_app


__all__ = ["app",
           "create_app",
           "Config",
           "config",
           "load_config",
           "get_logger",
           "JobFileStore",
           "StoredFile",
           "DirectoryEntry",
           "FetchedFile",
           "StoreError",
           "InvalidArgument",
           "NotFound",
           "FileConflict",
           "StorageError",
           ]
