"""
Shell Session State

Everything that survives between commands (working directory, command
history, transcript) lives in one serializable SessionState owned by the
shell. Hosts persist it explicitly with save()/load().
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from termfolio.types import TerminalLine

logger = logging.getLogger(__name__)


class SessionState(BaseModel):
    """
    Per-session terminal state.

    Attributes:
        path: Working directory as canonical segments
        previous_path: Directory before the last `cd`, for `cd -`
        history: Commands as typed, oldest first
        transcript: Lines shown in the terminal
    """

    path: list[str]
    previous_path: list[str] | None = None
    history: list[str] = Field(default_factory=list)
    transcript: list[TerminalLine] = Field(default_factory=list)

    @classmethod
    def start(cls, home: list[str]) -> "SessionState":
        """Fresh session in the home directory."""
        return cls(path=list(home))

    def reset(self, home: list[str]) -> None:
        """Forget everything and return home (used by `quit`)."""
        self.path = list(home)
        self.previous_path = None
        self.history = []
        self.transcript = []

    def save(self, path: str | Path) -> None:
        """Write state as JSON."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2))
        logger.debug("Saved session to %s (%d commands)", path, len(self.history))

    @classmethod
    def load(cls, path: str | Path) -> "SessionState":
        """
        Read state written by save().

        Raises:
            FileNotFoundError: If the file doesn't exist
            pydantic.ValidationError: If the file isn't a valid session
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Session file not found: {path}")
        return cls.model_validate_json(path.read_text())


class HistoryCursor:
    """
    Up/down arrow navigation over command history.

    Index -1 means "not browsing": the input line is the user's own.
    """

    def __init__(self, history: list[str]) -> None:
        self._history = history
        self.index = -1

    def up(self) -> str | None:
        """Step to an older command; None if there is no history."""
        if not self._history:
            return None
        if self.index == -1:
            self.index = len(self._history) - 1
        else:
            self.index = max(0, self.index - 1)
        return self._history[self.index]

    def down(self) -> str | None:
        """Step to a newer command; "" once past the newest, None if not browsing."""
        if self.index == -1:
            return None
        self.index += 1
        if self.index >= len(self._history):
            self.index = -1
            return ""
        return self._history[self.index]

    def reset(self) -> None:
        self.index = -1
