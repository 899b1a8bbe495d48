# app/lib/urls.py
from urllib.parse import quote, urlencode

FILES_PREFIX = "/api/files"


def file_url(base_url: str, scope: str, filename: str) -> str:
    """Retrieval URL for a stored file: <base>/api/files/<scope>/<filename>."""
    base = base_url.rstrip("/")
    return f"{base}{FILES_PREFIX}/{quote(scope, safe='')}/{quote(filename, safe='')}"


def listing_url(base_url: str, relative_path: str) -> str:
    """URL that re-runs the directory listing scoped to relative_path."""
    base = base_url.rstrip("/")
    return f"{base}{FILES_PREFIX}?{urlencode({'path': relative_path})}"
