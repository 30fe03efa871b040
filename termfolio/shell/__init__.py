"""
Filesystem Navigation

Virtual filesystem interface for the portfolio terminal.

Modules:
    path_resolver: Virtual filesystem construction and path resolution
    commands: Command implementations (ls, cd, cat, tree, etc.)
    completion: Tab completion
    formatters: Output formatting
    session: Serializable session state and history navigation

Virtual Filesystem Structure:
    /
    ├── usr/
    │   └── {user}/
    │       ├── projects/
    │       │   └── {folder_slug}/
    │       │       └── {project_slug}
    │       └── {project_slug}
    └── play

Commands:
    pwd, ls, cd, cat, nano, tree, history, whoami, finger, clear, quit, help
"""

from termfolio.shell.path_resolver import (
    InvalidContentError,
    VirtualFileSystem,
    format_path,
)
from termfolio.shell.session import HistoryCursor, SessionState

__all__ = [
    "VirtualFileSystem",
    "InvalidContentError",
    "format_path",
    "SessionState",
    "HistoryCursor",
]
