from __future__ import annotations

import os
from pathlib import Path

CONTENT_TYPES = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".svg": "image/svg+xml",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"
INDEX_DOCUMENT = "index.html"


class AssetForbidden(Exception):
    """Requested path resolves outside the asset root."""


def content_type_for(path: Path) -> str:
    return CONTENT_TYPES.get(path.suffix.lower(), DEFAULT_CONTENT_TYPE)


def resolve_asset(root: Path, request_path: str) -> Path:
    root = Path(os.path.abspath(root))
    rel = request_path.lstrip("/")
    if not rel:
        rel = INDEX_DOCUMENT

    # normpath collapses ".." without touching the filesystem; joining an
    # absolute segment replaces root entirely, which the check below rejects
    candidate = Path(os.path.normpath(os.path.join(root, rel)))
    if candidate != root and root not in candidate.parents:
        raise AssetForbidden(request_path)
    return candidate


def read_asset(path: Path) -> bytes:
    # IsADirectoryError is a plain OSError on some platforms
    if path.is_dir():
        raise FileNotFoundError(str(path))
    return path.read_bytes()
