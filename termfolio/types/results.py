"""
Result Types

Values returned by path lookups and shell commands.

Lookup Models:
    - PathError: Why a lookup did not yield what the caller needed
    - PathLookup: Resolved path, node, and error (if any)

Shell Models:
    - LineKind, TerminalLine: One line of terminal transcript
    - ActionKind, ShellAction: Side effect the host UI should perform
    - CommandResult: Output of one executed command line
    - Completion: Tab completion candidates and the completed line

None of these carry exceptions: a mistyped path is an expected outcome,
rendered as a shell-style message.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from termfolio.types.nodes import DirectoryNode, ExecutableNode, FileNode, FileSystemNode

# -----------------------------------------------------------------------------
# Lookup Models
# -----------------------------------------------------------------------------


class PathError(str, Enum):
    """Non-fatal lookup failures."""

    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    IS_A_DIRECTORY = "is_a_directory"


class PathLookup(BaseModel):
    """
    Outcome of resolving a typed path.

    Attributes:
        target: The path string as typed
        path: Canonical segments, None when resolution failed
        node: Node at `path`, None when resolution failed
        error: Set when the path is missing or has the wrong kind
    """

    target: str
    path: list[str] | None = None
    node: FileSystemNode | None = None
    error: PathError | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_directory(self) -> bool:
        return isinstance(self.node, DirectoryNode)

    @property
    def is_file(self) -> bool:
        return isinstance(self.node, FileNode)

    @property
    def is_executable(self) -> bool:
        return isinstance(self.node, ExecutableNode)

    def require_directory(self) -> PathLookup:
        """Return a copy flagged NOT_A_DIRECTORY if the node is a leaf."""
        if self.ok and not self.is_directory:
            return self.model_copy(update={"error": PathError.NOT_A_DIRECTORY})
        return self

    def require_leaf(self) -> PathLookup:
        """Return a copy flagged IS_A_DIRECTORY if the node is a directory."""
        if self.ok and self.is_directory:
            return self.model_copy(update={"error": PathError.IS_A_DIRECTORY})
        return self


# -----------------------------------------------------------------------------
# Shell Models
# -----------------------------------------------------------------------------


class LineKind(str, Enum):
    COMMAND = "command"
    OUTPUT = "output"
    ERROR = "error"


class TerminalLine(BaseModel):
    """
    One transcript line.

    For COMMAND lines `prompt` holds the working directory shown before
    the `$`, and `content` holds the command as typed.
    """

    kind: LineKind
    content: str
    prompt: str | None = None

    model_config = ConfigDict(frozen=True)


class ActionKind(str, Enum):
    NAVIGATE = "navigate"
    LAUNCH = "launch"
    CLEAR = "clear"
    QUIT = "quit"


class ShellAction(BaseModel):
    """
    Side effect requested from the host.

    Attributes:
        kind: What to do
        target: Project URL for NAVIGATE, executable name for LAUNCH
    """

    kind: ActionKind
    target: str | None = None

    model_config = ConfigDict(frozen=True)


class CommandResult(BaseModel):
    """Output of one command line."""

    command: str
    lines: list[TerminalLine] = Field(default_factory=list)
    action: ShellAction | None = None
    exit_code: int = 0

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    @property
    def text(self) -> str:
        """Output and error lines joined with newlines."""
        return "\n".join(
            line.content for line in self.lines if line.kind is not LineKind.COMMAND
        )


class Completion(BaseModel):
    """
    Tab completion outcome.

    Attributes:
        options: Every candidate for the last word
        line: The input line after completion (unchanged if ambiguous
            with no longer common prefix)
    """

    options: list[str] = Field(default_factory=list)
    line: str

    @property
    def is_unique(self) -> bool:
        return len(self.options) == 1
