"""Tests for session state persistence and history navigation."""

import pytest
from pydantic import ValidationError

from termfolio.api.shell import TerminalShell
from termfolio.shell.session import HistoryCursor, SessionState
from termfolio.types import LineKind

HOME = ["usr", "maxim"]


class TestSessionState:
    """Test SessionState lifecycle and JSON persistence."""

    def test_start_at_home(self):
        state = SessionState.start(HOME)
        assert state.path == HOME
        assert state.previous_path is None
        assert state.history == []
        assert state.transcript == []

    def test_save_and_load(self, shell, tmp_path):
        shell.execute_batch(["cd projects/web", "ls"])
        path = tmp_path / "state" / "session.json"

        shell.session.save(path)
        loaded = SessionState.load(path)

        assert loaded.path == ["usr", "maxim", "projects", "web"]
        assert loaded.previous_path == HOME
        assert loaded.history == ["cd projects/web", "ls"]
        assert loaded.transcript[-1].kind is LineKind.OUTPUT
        assert loaded.transcript[-1].content == "site  blog"

    def test_loaded_session_drives_new_shell(self, shell, fs, tmp_path):
        shell.cd("projects")
        path = tmp_path / "session.json"
        shell.session.save(path)

        resumed = TerminalShell(fs, SessionState.load(path))
        assert resumed.pwd() == "/usr/maxim/projects"

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Session file not found"):
            SessionState.load(tmp_path / "missing.json")

    def test_load_invalid_file(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text('{"history": []}')
        with pytest.raises(ValidationError):
            SessionState.load(path)

    def test_reset(self):
        state = SessionState(path=["usr"], previous_path=HOME, history=["cd .."])
        state.reset(HOME)
        assert state.path == HOME
        assert state.previous_path is None
        assert state.history == []


class TestHistoryCursor:
    """Test up/down arrow semantics."""

    def test_empty_history(self):
        cursor = HistoryCursor([])
        assert cursor.up() is None
        assert cursor.down() is None

    def test_up_walks_back_and_stops_at_oldest(self):
        cursor = HistoryCursor(["pwd", "ls", "cd projects"])
        assert cursor.up() == "cd projects"
        assert cursor.up() == "ls"
        assert cursor.up() == "pwd"
        assert cursor.up() == "pwd"

    def test_down_past_newest_clears_input(self):
        cursor = HistoryCursor(["pwd", "ls"])
        cursor.up()
        cursor.up()
        assert cursor.down() == "ls"
        assert cursor.down() == ""
        assert cursor.index == -1
        assert cursor.down() is None

    def test_reset(self):
        cursor = HistoryCursor(["pwd"])
        cursor.up()
        cursor.reset()
        assert cursor.index == -1
