"""
Shell Commands

Parsing and implementations of the terminal emulator's commands.

Commands:
    pwd                 Print working directory
    ls [path]           List directory contents
    cd [path]           Change directory (opens project files)
    cat <file>          Show project details
    nano <file>         Open a project page
    tree                Show every folder and project
    history [n]         Show recent commands
    whoami, finger      Profile text
    clear, quit, help

A bare word that names a project file (or the executable) reachable from
the working directory opens (or launches) it.

Each handler takes the shell and the argument list and returns a
CommandResult; handlers never raise for user mistakes.
"""

from __future__ import annotations

import shlex
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from termfolio.shell.formatters import (
    format_help,
    format_history,
    format_listing,
    format_project,
    format_tree,
)
from termfolio.shell.path_resolver import format_path
from termfolio.types import (
    ActionKind,
    CommandResult,
    ExecutableNode,
    FileNode,
    LineKind,
    PathError,
    ShellAction,
    TerminalLine,
)

if TYPE_CHECKING:
    from termfolio.api.shell import TerminalShell

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_FOUND = 127

CommandHandler = Callable[["TerminalShell", list[str]], CommandResult]


# =============================================================================
# Command Parsing
# =============================================================================


def parse_command(command: str) -> tuple[str, list[str]]:
    """
    Parse a command string into (cmd_name, args).

    Raises:
        ValueError: On an empty command or unbalanced quotes
    """
    stripped = command.strip()
    if not stripped:
        raise ValueError("Empty command")
    parts = stripped.split(maxsplit=1)
    cmd_name = parts[0]
    arg_text = parts[1] if len(parts) > 1 else ""
    return cmd_name, shlex.split(arg_text)


def _result(
    name: str,
    output: Sequence[str] = (),
    *,
    error: str | None = None,
    action: ShellAction | None = None,
    exit_code: int | None = None,
) -> CommandResult:
    lines = [TerminalLine(kind=LineKind.OUTPUT, content=content) for content in output]
    if error is not None:
        lines.append(TerminalLine(kind=LineKind.ERROR, content=error))
    if exit_code is None:
        exit_code = EXIT_ERROR if error is not None else EXIT_OK
    return CommandResult(command=name, lines=lines, action=action, exit_code=exit_code)


def _navigate(url: str) -> ShellAction:
    return ShellAction(kind=ActionKind.NAVIGATE, target=url)


# =============================================================================
# Command Implementations
# =============================================================================


def cmd_pwd(shell: TerminalShell, args: list[str]) -> CommandResult:
    return _result("pwd", [format_path(shell.cwd)])


def cmd_ls(shell: TerminalShell, args: list[str]) -> CommandResult:
    """
    List directory contents.

    Usage:
        ls                 # working directory
        ls projects/web    # any path; a file lists itself
    """
    if not args:
        return _result("ls", [format_listing(shell.fs.list(shell.cwd))])

    target = args[0]
    found = shell.fs.lookup(shell.cwd, target)
    if found.error is PathError.NOT_FOUND:
        return _result("ls", error=f"ls: cannot access '{target}': No such file or directory")
    if not found.is_directory:
        return _result("ls", [found.node.display_name])
    return _result("ls", [format_listing(shell.fs.list(found.path))])


def cmd_cd(shell: TerminalShell, args: list[str]) -> CommandResult:
    """
    Change directory.

    Usage:
        cd                 # home
        cd ~/projects      # home-relative
        cd ..              # parent
        cd -               # previous directory
        cd site            # a project file opens its page
    """
    target = args[0] if args else "~"

    if target == "-":
        previous = shell.session.previous_path
        if previous is None:
            return _result("cd", error="cd: OLDPWD not set")
        if not shell.fs.is_working_directory(previous):
            return _result(
                "cd", error=f"cd: no such file or directory: {format_path(previous)}"
            )
        shell.chdir(previous)
        return _result("cd", [format_path(previous)])

    found = shell.fs.lookup(shell.cwd, target).require_directory()
    if found.error is PathError.NOT_FOUND:
        return _result("cd", error=f"cd: no such file or directory: {target}")
    if found.error is PathError.NOT_A_DIRECTORY:
        url = shell.fs.get_project_url(found.node)
        if url:
            return _result(
                "cd",
                [f"cd: '{target}' is a project file, opening..."],
                action=_navigate(url),
            )
        return _result("cd", error=f"cd: not a directory: {target}")

    shell.chdir(found.path)
    return _result("cd")


def cmd_cat(shell: TerminalShell, args: list[str]) -> CommandResult:
    """Display project information."""
    if not args:
        return _result("cat", error="cat: missing file operand")

    target = args[0]
    found = shell.fs.lookup(shell.cwd, target).require_leaf()
    if found.error is PathError.NOT_FOUND:
        return _result("cat", error=f"cat: {target}: No such file or directory")
    if found.error is PathError.IS_A_DIRECTORY:
        return _result("cat", error=f"cat: {target}: Is a directory")
    if isinstance(found.node, FileNode):
        return _result("cat", format_project(found.node.metadata))
    return _result("cat", [f"{found.node.name}: No metadata available"])


def cmd_nano(shell: TerminalShell, args: list[str]) -> CommandResult:
    """Open a project page."""
    if not args:
        return _result("nano", error="nano: missing file operand")

    target = args[0]
    opened = run_target(shell, target)
    if opened is not None:
        return opened
    found = shell.fs.lookup(shell.cwd, target)
    if found.error is PathError.NOT_FOUND:
        return _result("nano", error=f"nano: {target}: No such file or directory")
    return _result("nano", error=f"nano: {target}: Not a project file")


def cmd_tree(shell: TerminalShell, args: list[str]) -> CommandResult:
    return _result("tree", format_tree(shell.fs))


def cmd_history(shell: TerminalShell, args: list[str]) -> CommandResult:
    """Numbered command history, optionally only the last N entries."""
    limit = None
    if args:
        try:
            limit = int(args[0])
        except ValueError:
            return _result("history", error=f"history: {args[0]}: numeric argument required")
        if limit < 0:
            return _result("history", error=f"history: {args[0]}: invalid option")
    return _result("history", format_history(shell.session.history, limit))


def cmd_whoami(shell: TerminalShell, args: list[str]) -> CommandResult:
    return _result("whoami", [shell.config.whoami_text])


def cmd_finger(shell: TerminalShell, args: list[str]) -> CommandResult:
    if args and args[0] != shell.config.user:
        return _result("finger", error=f"finger: {args[0]}: no such user.")
    return _result("finger", [shell.config.finger_text])


def cmd_clear(shell: TerminalShell, args: list[str]) -> CommandResult:
    return _result("clear", action=ShellAction(kind=ActionKind.CLEAR))


def cmd_quit(shell: TerminalShell, args: list[str]) -> CommandResult:
    return _result("quit", ["Goodbye!"], action=ShellAction(kind=ActionKind.QUIT))


def cmd_help(shell: TerminalShell, args: list[str]) -> CommandResult:
    executable = shell.config.executable_name if shell.config.include_executable else None
    return _result("help", format_help(executable))


def run_target(shell: TerminalShell, target: str) -> CommandResult | None:
    """
    Open a project file or launch the executable named by `target`.

    Returns:
        The result, or None if `target` is neither
    """
    found = shell.fs.lookup(shell.cwd, target)
    node = found.node
    if isinstance(node, FileNode):
        url = shell.fs.get_project_url(node)
        if url:
            return _result(target, [f"Opening {node.name}..."], action=_navigate(url))
    if isinstance(node, ExecutableNode):
        return _launch(target, node)
    return None


def _launch(command: str, node: ExecutableNode) -> CommandResult:
    return _result(
        command,
        [f"Launching {node.name}..."],
        action=ShellAction(kind=ActionKind.LAUNCH, target=node.name),
    )


COMMANDS: dict[str, CommandHandler] = {
    "pwd": cmd_pwd,
    "ls": cmd_ls,
    "cd": cmd_cd,
    "clear": cmd_clear,
    "nano": cmd_nano,
    "cat": cmd_cat,
    "tree": cmd_tree,
    "history": cmd_history,
    "whoami": cmd_whoami,
    "finger": cmd_finger,
    "help": cmd_help,
    "quit": cmd_quit,
}

ALIASES = {"exit": "quit"}


def execute_command(shell: TerminalShell, command: str) -> CommandResult:
    """Dispatch one command line without touching session history."""
    try:
        cmd_name, args = parse_command(command)
    except ValueError as e:
        return _result(command.strip(), error=f"parse error: {e}")

    handler = COMMANDS.get(ALIASES.get(cmd_name, cmd_name))
    if handler is not None:
        return handler(shell, args)

    # Root executables run from any directory, like commands on PATH
    executable = shell.fs.get_node([cmd_name]) if "/" not in cmd_name else None
    if isinstance(executable, ExecutableNode):
        return _launch(cmd_name, executable)

    opened = run_target(shell, cmd_name)
    if opened is not None:
        return opened
    return _result(cmd_name, error=f"command not found: {cmd_name}", exit_code=EXIT_NOT_FOUND)
