# app/lib/paths.py
from __future__ import annotations
from pathlib import Path
from typing import List

from app.lib.errors import InvalidArgument

# Scope marker for files living directly under the store root
ROOT_SCOPE = "root"

_SEPARATORS = ("/", "\\")


def validate_segment(value: str | None, kind: str = "name") -> str:
    """
    Check a single user-supplied path component (job name, filename, scope).
    Rejects empty values, traversal tokens, separators and NUL bytes.
    Returns the value unchanged.
    """
    if value is None or not value.strip():
        raise InvalidArgument(f"{kind} is required")
    if value in (".", "..") or ".." in value:
        raise InvalidArgument(f"invalid {kind}: {value!r}")
    if any(sep in value for sep in _SEPARATORS) or "\x00" in value:
        raise InvalidArgument(f"invalid {kind}: {value!r}")
    return value


def validate_job_name(name: str | None) -> str:
    validate_segment(name, "job name")
    if name == ROOT_SCOPE:
        raise InvalidArgument(f"job name {ROOT_SCOPE!r} is reserved")
    return name


def split_relative(path: str | None) -> List[str]:
    """
    Turn a listing path ("", "batch1", "/batch1/") into validated segments.
    An empty result means the store root.
    """
    if not path:
        return []
    if "\\" in path:
        raise InvalidArgument(f"invalid path: {path!r}")
    trimmed = path.strip("/")
    if not trimmed:
        return []
    return [validate_segment(part, "path") for part in trimmed.split("/")]


def resolve_inside(root: Path, *parts: str) -> Path:
    """
    Join parts under root and make sure the resolved result (symlinks
    included) is root itself or lies below it.
    """
    base = root.resolve()
    target = base.joinpath(*parts).resolve()
    if target != base and base not in target.parents:
        raise InvalidArgument("path escapes the upload directory")
    return target
