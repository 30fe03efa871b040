"""
termfolio - Portfolio Terminal Filesystem

The virtual filesystem and shell behind a portfolio site's terminal
emulator: folders and projects become directories and files that can be
listed, navigated and opened with familiar commands.

Example:
    >>> from termfolio import VirtualFileSystem, TerminalShell
    >>> fs = VirtualFileSystem(projects, folders)
    >>> fs.resolve_path(["usr", "maxim"], "projects/web/site")
    ['usr', 'maxim', 'projects', 'web', 'site']
    >>> shell = TerminalShell(fs)
    >>> shell.execute("cd projects/web/site").action.target
    '/projects/web/site'

Main Classes:
    VirtualFileSystem: Path resolution over folders and projects
    TerminalShell: Command execution and session state
    TermConfig: Configuration management
"""

__version__ = "0.1.0"

# Public API - lazy imports keep `import termfolio` cheap for the CLI
def __getattr__(name: str):
    """Lazy import public API components."""

    if name == "VirtualFileSystem":
        from termfolio.shell.path_resolver import VirtualFileSystem
        return VirtualFileSystem

    if name == "InvalidContentError":
        from termfolio.shell.path_resolver import InvalidContentError
        return InvalidContentError

    if name == "TerminalShell":
        from termfolio.api.shell import TerminalShell
        return TerminalShell

    if name == "TermConfig":
        from termfolio.config.settings import TermConfig
        return TermConfig

    if name in ("load_content", "save_content"):
        from termfolio import content
        return getattr(content, name)

    # Types
    if name in ("Folder", "Project", "ContentSnapshot", "FileSystemNode", "CommandResult"):
        from termfolio import types
        return getattr(types, name)

    raise AttributeError(f"module 'termfolio' has no attribute {name!r}")


__all__ = [
    # Main classes
    "VirtualFileSystem",
    "InvalidContentError",
    "TerminalShell",
    "TermConfig",

    # Content loading
    "load_content",
    "save_content",

    # Types
    "Folder",
    "Project",
    "ContentSnapshot",
    "FileSystemNode",
    "CommandResult",

    # Version
    "__version__",
]
