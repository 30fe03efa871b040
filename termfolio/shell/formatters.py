"""
Output Formatting

Plain-text rendering for shell command output. Every function returns a
list of lines; the shell wraps them into TerminalLine objects.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from termfolio.types import DirectoryNode, FileNode, FileSystemNode, Project

if TYPE_CHECKING:
    from termfolio.shell.path_resolver import VirtualFileSystem

HELP_LINES = [
    "Available commands:",
    "  pwd              - print working directory",
    "  ls [path]        - list directory contents",
    "  cd [path]        - change directory",
    "  cd ..            - go up one directory",
    "  cd -             - go back to the previous directory",
    "  cat [file]       - display project information",
    "  tree             - show all folders and projects",
    "  history [n]      - show recent commands",
    "  whoami           - about me",
    "  finger           - how to reach me",
    "  clear            - clear terminal",
    "  quit             - exit",
    "  help             - show this help",
    "",
    "To open the project page:",
    "  cd [filename]             - open project",
    "  cd [path to filename]     - open project (relative)",
    "  nano [filename]           - open project",
    "",
    "Use arrow keys to navigate command history",
    "Use Tab key for auto-completion",
]


def format_help(executable_name: str | None = None) -> list[str]:
    """Help text, mentioning the root executable when there is one."""
    if executable_name is None:
        return list(HELP_LINES)
    return [
        *HELP_LINES[:14],
        f"  {executable_name:<16} - launch the minigame (from any directory)",
        *HELP_LINES[14:],
    ]


_BRANCH = "├─ "
_LAST = "└─ "
_PIPE = "│  "
_SPACE = "   "


def format_listing(nodes: Sequence[FileSystemNode]) -> str:
    """Single `ls` line: names separated by two spaces, directories with '/'."""
    return "  ".join(node.display_name for node in nodes)


def format_project(project: Project) -> list[str]:
    """Lines printed by `cat` for a project file."""
    lines = [f"File: {project.name}", "Type: Project", ""]

    if project.description:
        lines.extend(["Description:", project.description, ""])
    if project.status:
        lines.append(f"Status: {project.status}")
    if project.tech_stack:
        lines.append(f"Tech Stack: {', '.join(project.tech_stack)}")
    if project.github_url:
        lines.append(f"GitHub: {project.github_url}")
    if project.demo_url:
        lines.append(f"Demo: {project.demo_url}")

    return lines


def _tree_label(node: FileSystemNode) -> str:
    if isinstance(node, FileNode):
        project = node.metadata
        return f"{project.name} ({project.status})" if project.status else project.name
    return node.display_name


def format_tree(fs: VirtualFileSystem, path: Sequence[str] | None = None) -> list[str]:
    """
    Box-drawing tree of everything below `path` (default: home).

    Empty directories get an "empty" placeholder line, and a tree with no
    projects at all says so.
    """
    start = fs.home if path is None else list(path)
    lines = ["/" + "/".join(start)]

    def _render(current: Sequence[str], prefix: str) -> None:
        children = fs.list(current)
        if not children:
            lines.append(f"{prefix}{_LAST}empty")
            return
        for index, node in enumerate(children):
            last = index == len(children) - 1
            lines.append(f"{prefix}{_LAST if last else _BRANCH}{_tree_label(node)}")
            if isinstance(node, DirectoryNode):
                _render(node.path, prefix + (_SPACE if last else _PIPE))

    if not any(isinstance(node, FileNode) for _, node in fs.walk(start)):
        lines.append(f"{_LAST}no projects yet")
        return lines

    _render(start, "")
    return lines


def format_history(history: Sequence[str], limit: int | None = None) -> list[str]:
    """Numbered history lines, oldest first, like bash's `history`."""
    offset = 0
    if limit is not None and limit < len(history):
        offset = len(history) - limit
    return [f"{offset + i + 1:>5}  {cmd}" for i, cmd in enumerate(history[offset:])]
