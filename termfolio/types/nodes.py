"""
Filesystem Node Types

Synthetic nodes making up the terminal's virtual filesystem.

    /
    ├── usr/
    │   └── <user>/
    │       ├── projects/
    │       │   └── <folder-slug>/
    │       │       └── <project-slug>     (file)
    │       └── <project-slug>             (file, top-level project)
    └── play                               (executable)

FileSystemNode is a tagged union discriminated on `type`, so callers
branch with isinstance() instead of comparing type strings.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from termfolio.types.content import Project


class _Node(BaseModel):
    name: str
    path: tuple[str, ...]

    model_config = ConfigDict(frozen=True)

    @property
    def display_name(self) -> str:
        """Name as `ls` prints it."""
        return self.name


class DirectoryNode(_Node):
    """A navigable container (root, usr, home, projects, each folder)."""

    type: Literal["directory"] = "directory"

    @property
    def display_name(self) -> str:
        return f"{self.name}/"


class FileNode(_Node):
    """
    A project leaf.

    Attributes:
        slug: Project slug
        folder_slug: Slug of the owning folder, None for top-level projects
        metadata: The full project record, rendered by `cat`
    """

    type: Literal["file"] = "file"
    slug: str
    folder_slug: str | None = None
    metadata: Project


class ExecutableNode(_Node):
    """A decorative leaf that launches something instead of navigating."""

    type: Literal["executable"] = "executable"


FileSystemNode = Annotated[
    Union[DirectoryNode, FileNode, ExecutableNode],
    Field(discriminator="type"),
]
