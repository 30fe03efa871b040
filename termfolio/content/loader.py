"""
Content Loading

Reads a JSON snapshot of the site's folder and project lists:

    {
        "folders": [{"id": "f1", "name": "Web", "slug": "web"}],
        "projects": [{"id": "p1", "name": "Site", "slug": "site", "folder_id": "f1"}]
    }

The lists are the bodies of GET /api/folders and GET /api/projects, saved
side by side. Either key may be missing.
"""

from __future__ import annotations

import logging
from pathlib import Path

from termfolio.types import ContentSnapshot

logger = logging.getLogger(__name__)


def load_content(path: str | Path) -> ContentSnapshot:
    """
    Load a content snapshot from a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        pydantic.ValidationError: If the JSON doesn't match the schema
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Content file not found: {path}")

    snapshot = ContentSnapshot.model_validate_json(path.read_text(encoding="utf-8"))
    logger.debug(
        "Loaded %d folders and %d projects from %s",
        len(snapshot.folders),
        len(snapshot.projects),
        path,
    )
    return snapshot


def save_content(snapshot: ContentSnapshot, path: str | Path) -> None:
    """Write a snapshot in the format load_content() reads."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(snapshot.model_dump_json(indent=2, exclude_none=True), encoding="utf-8")
