"""
Command-Line Interface

CLI commands for exploring a content snapshot the way the site's
terminal emulator does.

Commands:
    termfolio shell    - Interactive terminal session
    termfolio ls       - List a directory
    termfolio tree     - Show every folder and project
    termfolio resolve  - Print the canonical form of a path
    termfolio open     - Print the page URL of a project file

Usage:
    # Interactive session, remembered between runs
    termfolio shell --content content.json --session ~/.termfolio/session.json

    # One-off queries
    termfolio ls projects --content content.json
    termfolio resolve ../tool --cwd /usr/maxim/projects --content content.json
"""

from __future__ import annotations

import logging
import shlex
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.tree import Tree

from termfolio.api.shell import TerminalShell
from termfolio.config import TermConfig
from termfolio.content import load_content
from termfolio.shell.path_resolver import InvalidContentError, VirtualFileSystem, format_path
from termfolio.shell.session import SessionState
from termfolio.types import (
    ActionKind,
    CommandResult,
    DirectoryNode,
    FileNode,
    LineKind,
)

__all__ = ["main", "app"]

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="termfolio",
    help="Browse portfolio folders and projects as a virtual filesystem",
    no_args_is_help=True,
)
console = Console()

_LINE_STYLES = {
    LineKind.OUTPUT: "",
    LineKind.ERROR: "red",
    LineKind.COMMAND: "bold",
}

ContentOption = typer.Option(
    None,
    "--content", "-f",
    help="Content snapshot (JSON with 'folders' and 'projects')",
)
CwdOption = typer.Option(
    "~",
    "--cwd",
    help="Working directory to resolve relative paths from",
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="TOML configuration file",
        exists=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Load .env, configure logging and read configuration."""
    load_dotenv()
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    ctx.obj = TermConfig.from_file(config) if config else TermConfig()


def _load_filesystem(config: TermConfig, content: Optional[Path]) -> VirtualFileSystem:
    path = content or (Path(config.content_file) if config.content_file else None)
    if path is None:
        console.print("[red]No content file. Pass --content or set TERMFOLIO_CONTENT_FILE.[/]")
        raise typer.Exit(2)

    try:
        snapshot = load_content(path)
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/]")
        raise typer.Exit(1)
    except ValidationError as e:
        console.print(f"[red]Invalid content file {path}:[/]")
        console.print(str(e), markup=False)
        raise typer.Exit(1)

    try:
        return snapshot.build_filesystem(config)
    except InvalidContentError as e:
        console.print(f"[red]Content does not form a valid tree: {path}[/]")
        for problem in e.problems:
            console.print(f"  - {problem}", markup=False)
        raise typer.Exit(1)


def _resolve_cwd(fs: VirtualFileSystem, cwd: str) -> list[str]:
    resolved = fs.resolve_path(fs.home, cwd)
    if resolved is None or not fs.is_directory(resolved):
        console.print(f"[red]--cwd: not a directory: {cwd}[/]")
        raise typer.Exit(1)
    return resolved


def _print_result(result: CommandResult) -> None:
    for line in result.lines:
        console.print(Text(line.content, style=_LINE_STYLES[line.kind]))


@app.command()
def ls(
    ctx: typer.Context,
    path: Optional[str] = typer.Argument(None, help="Directory to list"),
    content: Optional[Path] = ContentOption,
    cwd: str = CwdOption,
) -> None:
    """List directory contents."""
    fs = _load_filesystem(ctx.obj, content)
    shell = TerminalShell(fs, SessionState(path=_resolve_cwd(fs, cwd)))
    result = shell.execute("ls" if path is None else f"ls {shlex.quote(path)}")
    _print_result(result)
    raise typer.Exit(result.exit_code)


@app.command()
def tree(
    ctx: typer.Context,
    content: Optional[Path] = ContentOption,
) -> None:
    """Show every folder and project below home."""
    fs = _load_filesystem(ctx.obj, content)

    root = Tree(f"[bold blue]{format_path(fs.home)}[/]")
    branches: list[Tree] = [root]
    for depth, node in fs.walk():
        del branches[depth + 1:]
        if isinstance(node, DirectoryNode):
            branches.append(branches[depth].add(f"[blue]{node.display_name}[/]"))
        elif isinstance(node, FileNode):
            status = f" [dim]({node.metadata.status})[/]" if node.metadata.status else ""
            branches[depth].add(f"{node.metadata.name}{status}")
    console.print(root)


@app.command()
def resolve(
    ctx: typer.Context,
    target: str = typer.Argument(..., help="Path as typed in the terminal"),
    content: Optional[Path] = ContentOption,
    cwd: str = CwdOption,
) -> None:
    """Print the canonical path a typed path resolves to."""
    fs = _load_filesystem(ctx.obj, content)
    found = fs.lookup(_resolve_cwd(fs, cwd), target)
    if not found.ok:
        console.print(f"[red]resolve: no such file or directory: {target}[/]")
        raise typer.Exit(1)

    console.print(f"{format_path(found.path)}  [dim]({found.node.type})[/]")


@app.command("open")
def open_project(
    ctx: typer.Context,
    target: str = typer.Argument(..., help="Project file to open"),
    content: Optional[Path] = ContentOption,
    cwd: str = CwdOption,
) -> None:
    """Print the page URL of a project file."""
    fs = _load_filesystem(ctx.obj, content)
    found = fs.lookup(_resolve_cwd(fs, cwd), target)
    url = fs.get_project_url(found.node)
    if url is None:
        reason = "no such file or directory" if not found.ok else "not a project file"
        console.print(f"[red]open: {reason}: {target}[/]")
        raise typer.Exit(1)
    console.print(url)


@app.command()
def shell(
    ctx: typer.Context,
    content: Optional[Path] = ContentOption,
    session: Optional[Path] = typer.Option(
        None,
        "--session", "-s",
        help="Session file to resume and keep updated",
    ),
) -> None:
    """Interactive terminal session."""
    config: TermConfig = ctx.obj
    fs = _load_filesystem(config, content)
    session_path = session or (Path(config.session_file) if config.session_file else None)

    state = None
    if session_path is not None and session_path.exists():
        try:
            state = SessionState.load(session_path)
        except ValidationError:
            logger.warning("Ignoring unreadable session file %s", session_path)
    term = TerminalShell(fs, state)

    console.print(Panel(
        "Type [bold]help[/] for available commands, [bold]quit[/] to exit.",
        title=f"termfolio {format_path(fs.home)}",
    ))

    while True:
        try:
            line = console.input(f"[blue]{term.prompt}[/] [dim]$[/] ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        result = term.execute(line)
        _print_result(result)

        action = result.action
        if action is not None and action.kind is ActionKind.NAVIGATE:
            console.print(f"[green]-> {action.target}[/]")
        elif action is not None and action.kind is ActionKind.LAUNCH:
            console.print(f"[yellow]{action.target} only runs in the browser.[/]")
        elif action is not None and action.kind is ActionKind.CLEAR:
            console.clear()
        elif action is not None and action.kind is ActionKind.QUIT:
            if session_path is not None and session_path.exists():
                session_path.unlink()
            return

        if session_path is not None:
            term.session.save(session_path)


def main() -> None:
    """Entry point for the CLI."""
    app()
