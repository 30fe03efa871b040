"""
Type Definitions

Pydantic models for all data structures.

Content Models (loaded from the site API):
    - Folder, Project - Portfolio content
    - ContentSnapshot - Both lists together

Filesystem Models:
    - DirectoryNode, FileNode, ExecutableNode - Virtual filesystem nodes
    - FileSystemNode - Tagged union of the three

Result Models:
    - PathError, PathLookup - Path resolution outcomes
    - TerminalLine, LineKind - Transcript lines
    - ShellAction, ActionKind - Host side effects
    - CommandResult, Completion - Shell outputs

All types are:
    - Pydantic BaseModel subclasses
    - Serializable to/from JSON
"""

from termfolio.types.content import ContentSnapshot, Folder, Project
from termfolio.types.nodes import DirectoryNode, ExecutableNode, FileNode, FileSystemNode
from termfolio.types.results import (
    ActionKind,
    CommandResult,
    Completion,
    LineKind,
    PathError,
    PathLookup,
    ShellAction,
    TerminalLine,
)

__all__ = [
    # Content Models
    "Folder",
    "Project",
    "ContentSnapshot",
    # Filesystem Models
    "DirectoryNode",
    "FileNode",
    "ExecutableNode",
    "FileSystemNode",
    # Result Models
    "PathError",
    "PathLookup",
    "LineKind",
    "TerminalLine",
    "ActionKind",
    "ShellAction",
    "CommandResult",
    "Completion",
]
