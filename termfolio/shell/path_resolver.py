"""
Virtual Path Resolution

Builds the terminal's read-only filesystem from the folder and project
lists and resolves shell-style paths against it.

Tree Layout:
    /                               root (usr/, optional executable)
    /usr/                           contains the home directory
    /usr/<user>/                    projects/, then top-level projects
    /usr/<user>/projects/           one directory per folder
    /usr/<user>/projects/<folder>/  that folder's projects

Paths are handled as canonical segment lists (["usr", "maxim"]); the
typed form ("/usr/maxim", "~/projects", "../web") only exists at the
edges. Resolution failure returns None, never raises.

Example:
    >>> fs = VirtualFileSystem(projects, folders)
    >>> fs.resolve_path(["usr", "maxim"], "projects/web/site")
    ['usr', 'maxim', 'projects', 'web', 'site']
    >>> fs.get_project_url(fs.get_node(["usr", "maxim", "projects", "web", "site"]))
    '/projects/web/site'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType

from termfolio.config import TermConfig
from termfolio.types import (
    DirectoryNode,
    ExecutableNode,
    FileNode,
    FileSystemNode,
    Folder,
    PathError,
    PathLookup,
    Project,
)

logger = logging.getLogger(__name__)

PROJECTS_DIR = "projects"
HOME_SHORTHAND = "~"

_RESERVED_SEGMENTS = {"", ".", "..", HOME_SHORTHAND}


class InvalidContentError(ValueError):
    """Folder/project lists that cannot form a consistent tree."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__(f"Invalid content ({len(problems)} problems): " + "; ".join(problems))


def format_path(path: Sequence[str]) -> str:
    """Render canonical segments as an absolute path string."""
    return "/" + "/".join(path)


def _key(path: Sequence[str]) -> str:
    return "/".join(path)


class VirtualFileSystem:
    """
    Immutable in-memory filesystem over portfolio content.

    Construct a new instance whenever the folder or project lists change;
    nothing here mutates after __init__, so one instance can be shared
    freely between readers.
    """

    def __init__(
        self,
        projects: Iterable[Project],
        folders: Iterable[Folder],
        *,
        config: TermConfig | None = None,
    ) -> None:
        self.config = config or TermConfig()
        self._home: tuple[str, ...] = tuple(self.config.home_path)
        self._floor: list[str] = list(self.config.floor_path)

        structure = self._build(list(projects), list(folders))
        self._structure: Mapping[str, Mapping[str, FileSystemNode]] = MappingProxyType(
            {key: MappingProxyType(children) for key, children in structure.items()}
        )
        self._root = self._structure[""]

    # === Construction ===

    def _build(
        self, projects: list[Project], folders: list[Folder]
    ) -> dict[str, dict[str, FileSystemNode]]:
        problems: list[str] = []
        home = self._home
        projects_path = home + (PROJECTS_DIR,)

        root: dict[str, FileSystemNode] = {"usr": DirectoryNode(name="usr", path=("usr",))}
        if self.config.include_executable:
            name = self.config.executable_name
            root[name] = ExecutableNode(name=name, path=(name,))

        home_dir: dict[str, FileSystemNode] = {
            PROJECTS_DIR: DirectoryNode(name=PROJECTS_DIR, path=projects_path),
        }
        projects_dir: dict[str, FileSystemNode] = {}
        structure: dict[str, dict[str, FileSystemNode]] = {
            "": root,
            "usr": {home[-1]: DirectoryNode(name=home[-1], path=home)},
            _key(home): home_dir,
            _key(projects_path): projects_dir,
        }

        folder_slugs: dict[str, str] = {}
        for folder in folders:
            if folder.slug in _RESERVED_SEGMENTS or "/" in folder.slug:
                problems.append(f"folder {folder.id!r} has invalid slug {folder.slug!r}")
                continue
            if folder.slug in projects_dir:
                problems.append(f"duplicate folder slug {folder.slug!r} (folder {folder.id!r})")
                continue
            if folder.id in folder_slugs:
                problems.append(f"duplicate folder id {folder.id!r}")
                continue
            path = projects_path + (folder.slug,)
            projects_dir[folder.slug] = DirectoryNode(name=folder.slug, path=path)
            structure[_key(path)] = {}
            folder_slugs[folder.id] = folder.slug

        for project in projects:
            if project.slug in _RESERVED_SEGMENTS or "/" in project.slug:
                problems.append(f"project {project.id!r} has invalid slug {project.slug!r}")
                continue

            if project.folder_id is None:
                parent = home
                folder_slug = None
            else:
                folder_slug = folder_slugs.get(project.folder_id)
                if folder_slug is None:
                    problems.append(
                        f"project {project.slug!r} references unknown folder {project.folder_id!r}"
                    )
                    continue
                parent = projects_path + (folder_slug,)

            children = structure[_key(parent)]
            if project.slug in children:
                problems.append(f"duplicate name {project.slug!r} in {format_path(parent)}")
                continue
            children[project.slug] = FileNode(
                name=project.slug,
                path=parent + (project.slug,),
                slug=project.slug,
                folder_slug=folder_slug,
                metadata=project,
            )

        if problems:
            if self.config.strict_content:
                raise InvalidContentError(problems)
            for problem in problems:
                logger.warning("Skipping content: %s", problem)

        logger.debug(
            "Built virtual filesystem: %d folders, %d projects, %d skipped",
            len(projects_dir),
            sum(isinstance(n, FileNode) for c in structure.values() for n in c.values()),
            len(problems),
        )
        return structure

    # === Properties ===

    @property
    def home(self) -> list[str]:
        """Canonical home path (usr/<user>)."""
        return list(self._home)

    @property
    def root(self) -> DirectoryNode:
        return DirectoryNode(name="/", path=())

    # === Listing and Lookup ===

    def list(self, path: Sequence[str]) -> list[FileSystemNode]:
        """
        Immediate children of a directory, in construction order.

        Returns an empty list when `path` is not a known directory.
        """
        children = self._structure.get(_key(path))
        if children is None:
            return []
        return list(children.values())

    def get_node(self, path: Sequence[str]) -> FileSystemNode | None:
        """Node occupying a canonical path, or None."""
        if not path:
            return self.root
        parent = self._structure.get(_key(path[:-1]))
        if parent is None:
            return None
        return parent.get(path[-1])

    def is_file(self, path: Sequence[str]) -> bool:
        return isinstance(self.get_node(path), FileNode)

    def is_directory(self, path: Sequence[str]) -> bool:
        return isinstance(self.get_node(path), DirectoryNode)

    def is_working_directory(self, path: Sequence[str]) -> bool:
        """Whether a shell may stand in `path`: a directory at or below the floor."""
        return self.is_directory(path) and list(path[: len(self._floor)]) == self._floor

    # === Resolution ===

    def resolve_path(self, current_path: Sequence[str], target: str) -> list[str] | None:
        """
        Resolve a typed path against the tree.

        Args:
            current_path: Working directory as canonical segments
            target: Absolute ("/usr/maxim"), home-relative ("~/projects")
                or relative ("../web", "./site") path

        Returns:
            Canonical segments, or None if nothing exists there
        """
        target = target.strip()

        if target in (HOME_SHORTHAND, HOME_SHORTHAND + "/"):
            return list(self._home)
        if target.startswith(HOME_SHORTHAND + "/"):
            base: list[str] = list(self._home)
            target = target[2:]
        elif target.startswith("/"):
            base = []
        else:
            base = list(current_path)

        resolved = self._apply_segments(base, target.split("/"))
        if resolved is None or self.get_node(resolved) is None:
            return None
        return resolved

    def _apply_segments(self, base: list[str], parts: Iterable[str]) -> list[str] | None:
        resolved = base
        floor = self._floor
        for part in parts:
            if part in ("", "."):
                continue
            if part == "..":
                if len(resolved) > len(floor):
                    resolved.pop()
                continue
            resolved.append(part)

        # Under a home floor nothing outside home is addressable
        if resolved[: len(floor)] != floor:
            return None
        return resolved

    def lookup(self, current_path: Sequence[str], target: str) -> PathLookup:
        """Resolve `target` and return the path, node and any error together."""
        path = self.resolve_path(current_path, target)
        if path is None:
            return PathLookup(target=target, error=PathError.NOT_FOUND)
        return PathLookup(target=target, path=path, node=self.get_node(path))

    # === Navigation ===

    @staticmethod
    def get_project_url(node: FileSystemNode | None) -> str | None:
        """
        Site URL of a project file.

        Returns:
            "/projects/<folder>/<slug>" for projects inside a folder,
            "/projects/<slug>" for top-level projects, None otherwise
        """
        if not isinstance(node, FileNode):
            return None
        if node.folder_slug and node.slug:
            return f"/projects/{node.folder_slug}/{node.slug}"
        if node.slug:
            return f"/projects/{node.slug}"
        return None

    def walk(self, path: Sequence[str] | None = None) -> Iterator[tuple[int, FileSystemNode]]:
        """
        Depth-first pre-order walk below `path` (default: home).

        Yields:
            (depth, node) pairs, depth 0 for the immediate children
        """
        start = list(self._home) if path is None else list(path)

        def _walk(current: list[str], depth: int) -> Iterator[tuple[int, FileSystemNode]]:
            for node in self.list(current):
                yield depth, node
                if isinstance(node, DirectoryNode):
                    yield from _walk(list(node.path), depth + 1)

        yield from _walk(start, 0)

    def __repr__(self) -> str:
        return (
            f"VirtualFileSystem(home={format_path(self._home)!r}, "
            f"directories={len(self._structure)})"
        )
