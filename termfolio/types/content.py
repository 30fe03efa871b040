"""
Content Types

Folders and projects as served by the site's REST API
(GET /api/folders, GET /api/projects).

Models:
    - Folder: A named bucket of projects, addressed by slug
    - Project: A leaf item, optionally inside one folder
    - ContentSnapshot: Both lists, as loaded together

Extra fields in API payloads (owner ids, timestamps the terminal never
shows, etc.) are ignored rather than rejected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from termfolio.config import TermConfig
    from termfolio.shell.path_resolver import VirtualFileSystem


class Folder(BaseModel):
    """
    A project folder.

    Attributes:
        id: Database identifier (referenced by Project.folder_id)
        name: Display name
        slug: URL-safe name, used as the directory name in the terminal
    """

    id: str
    name: str
    slug: str
    description: str | None = None
    display_order: int = 0

    model_config = ConfigDict(frozen=True, extra="ignore")


class Project(BaseModel):
    """
    A portfolio project.

    Attributes:
        id: Database identifier
        name: Display name
        slug: URL-safe name, used as the file name in the terminal
        folder_id: Owning folder, or None for a top-level project
        description: Long description shown by `cat`
        status: Free-form status label ("active", "archived", ...)
        tech_stack: Technologies used
        github_url: Repository link
        demo_url: Live demo link
    """

    id: str
    name: str
    slug: str
    folder_id: str | None = None
    description: str | None = None
    status: str | None = None
    tech_stack: list[str] = Field(default_factory=list)
    github_url: str | None = None
    demo_url: str | None = None
    display_order: int = 0
    created_at: str | None = None
    updated_at: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class ContentSnapshot(BaseModel):
    """Folders and projects captured together from the API."""

    folders: list[Folder] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)

    def build_filesystem(self, config: TermConfig | None = None) -> VirtualFileSystem:
        """Construct a VirtualFileSystem over this snapshot."""
        from termfolio.shell.path_resolver import VirtualFileSystem

        return VirtualFileSystem(self.projects, self.folders, config=config)
