"""Domain layer: errors and schemas."""

from .errors import EditorError, ErrorCodes
from .schemas import (
    EditorPaths,
    ProjectRecord,
    ScrapedMeta,
    SyncResult,
)

__all__ = [
    "EditorError",
    "ErrorCodes",
    "EditorPaths",
    "ProjectRecord",
    "ScrapedMeta",
    "SyncResult",
]
