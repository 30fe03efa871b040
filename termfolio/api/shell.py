"""
TerminalShell - Filesystem-Style Navigation Interface

Presents portfolio content as a virtual filesystem navigable with
familiar shell commands. Drives the site's terminal emulator: the host
feeds it typed lines and renders the returned transcript lines, and
performs any returned action (navigate to a project page, launch the
minigame, clear the screen, quit).

Virtual Filesystem Structure:
    /
    ├── usr/
    │   └── maxim/
    │       ├── projects/
    │       │   ├── web/
    │       │   │   └── site
    │       │   └── ...
    │       └── tool
    └── play

Commands:
    pwd     - Print working directory
    cd      - Change directory
    ls      - List directory contents
    cat     - Show project details
    nano    - Open project page
    tree    - Show all folders and projects
    history - Command history
    help    - Command reference

Example:
    >>> shell = TerminalShell(fs)
    >>> shell.cd("projects/web")
    >>> print(shell.ls())
    site
    >>> result = shell.execute("site")
    >>> result.action.target
    '/projects/web/site'
"""

from __future__ import annotations

import logging
import shlex
from collections.abc import Sequence

from termfolio.shell.commands import ALIASES, COMMANDS, execute_command
from termfolio.shell.completion import complete
from termfolio.shell.path_resolver import VirtualFileSystem, format_path
from termfolio.shell.session import HistoryCursor, SessionState
from termfolio.types import ActionKind, CommandResult, Completion, LineKind, TerminalLine

logger = logging.getLogger(__name__)


class TerminalShell:
    """
    Interactive shell over a VirtualFileSystem.

    The filesystem is shared and read-only; all mutable state lives in
    `session`, which the host may persist between page loads.
    """

    def __init__(self, fs: VirtualFileSystem, session: SessionState | None = None) -> None:
        """Initialize shell, resuming `session` if given."""
        self.fs = fs
        self.config = fs.config
        self.session = session or SessionState.start(fs.home)
        if not self.fs.is_working_directory(self.session.path):
            logger.info(
                "Session directory %s is no longer a directory, starting at home",
                format_path(self.session.path),
            )
            self.session.path = fs.home
        self.cursor = HistoryCursor(self.session.history)

    # === Navigation ===

    @property
    def cwd(self) -> list[str]:
        return list(self.session.path)

    @property
    def prompt(self) -> str:
        """Working directory as shown before the `$`."""
        return "/".join(self.session.path)

    def chdir(self, path: Sequence[str]) -> None:
        """Move to an already-validated directory."""
        self.session.previous_path = self.cwd
        self.session.path = list(path)

    def pwd(self) -> str:
        """Print working directory."""
        return format_path(self.cwd)

    def cd(self, path: str = "~") -> CommandResult:
        """Change directory. See termfolio.shell.commands.cmd_cd."""
        return self.execute(f"cd {_quote(path)}")

    def ls(self, path: str | None = None) -> str:
        """List directory contents."""
        command = "ls" if path is None else f"ls {_quote(path)}"
        return self.execute(command).text

    def back(self) -> CommandResult:
        """Go to previous directory (cd -)."""
        return self.execute("cd -")

    # === Content Access ===

    def cat(self, path: str) -> str:
        """Project details for a file."""
        return self.execute(f"cat {_quote(path)}").text

    # === Session Management ===

    def history(self, limit: int = 20) -> list[str]:
        """Get command history for this session."""
        return self.session.history[-limit:] if limit > 0 else []

    @property
    def transcript(self) -> list[TerminalLine]:
        return self.session.transcript

    def complete(self, line: str) -> Completion:
        """Tab completion for a partially typed line."""
        return complete(self.fs, self.cwd, line, command_names())

    # === Execution ===

    def execute(self, command: str) -> CommandResult:
        """
        Execute a shell command string.

        Records the command in history and transcript, applies the
        result's CLEAR or QUIT action to the session, and returns the
        result. NAVIGATE and LAUNCH actions are left to the host.
        """
        stripped = command.strip()
        if not stripped:
            return CommandResult(command="")

        prompt = self.prompt
        result = execute_command(self, stripped)
        result.command = stripped
        logger.debug("%s$ %s -> exit %d", prompt, stripped, result.exit_code)

        self.session.history.append(stripped)
        self.cursor.reset()

        action = result.action.kind if result.action else None
        if action is ActionKind.CLEAR:
            self.session.transcript = []
        elif action is ActionKind.QUIT:
            self.session.reset(self.fs.home)
            self.cursor = HistoryCursor(self.session.history)
        else:
            self.session.transcript.append(
                TerminalLine(kind=LineKind.COMMAND, content=stripped, prompt=prompt)
            )
            self.session.transcript.extend(result.lines)

        return result

    def execute_batch(self, commands: list[str]) -> list[CommandResult]:
        """Execute multiple commands, returning all outputs."""
        return [self.execute(cmd) for cmd in commands]


def command_names() -> list[str]:
    """Every command name the shell accepts, for completion."""
    return [*COMMANDS, *ALIASES]


def _quote(path: str) -> str:
    return shlex.quote(path)
