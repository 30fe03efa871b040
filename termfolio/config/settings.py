"""
TermConfig - Configuration Management

Sensible defaults with full override capability.

Example:
    >>> # Use defaults (reads from environment)
    >>> fs = VirtualFileSystem(projects, folders)

    >>> # Explicit configuration
    >>> config = TermConfig(user="maxim", traversal_floor="home")
    >>> fs = VirtualFileSystem(projects, folders, config=config)

    >>> # From config file
    >>> config = TermConfig.from_file("./termfolio.toml")

Environment Variables:
    TERMFOLIO_USER - Home directory name under /usr
    TERMFOLIO_TRAVERSAL_FLOOR - "root" or "home"
    TERMFOLIO_INCLUDE_EXECUTABLE - "1"/"0", whether /play exists
    TERMFOLIO_STRICT_CONTENT - "1"/"0", reject malformed content
    TERMFOLIO_CONTENT_FILE - Default content snapshot for the CLI
    TERMFOLIO_SESSION_FILE - Where the CLI keeps shell session state
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, cast

# TOML support: tomllib is built-in for Python 3.11+, use tomli for 3.10
try:
    import tomllib

    def _load_toml(path: Path) -> dict[str, Any]:
        with open(path, "rb") as f:
            return cast(dict[str, Any], tomllib.load(f))

except ImportError:
    import tomli

    def _load_toml(path: Path) -> dict[str, Any]:
        with open(path, "rb") as f:
            return cast(dict[str, Any], tomli.load(f))


logger = logging.getLogger(__name__)

TRAVERSAL_FLOORS = ("root", "home")

_TRUTHY = {"1", "true", "yes", "on"}


def _env_bool(value: str) -> bool:
    return value.strip().lower() in _TRUTHY


_TOML_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def _toml_string(value: str) -> str:
    """Quote `value` as a TOML basic string."""
    escaped = "".join(_TOML_ESCAPES.get(char, char) for char in value)
    return f'"{escaped}"'


class TermConfig:
    """Configuration for termfolio."""

    # === Filesystem Layout ===

    user: str = "maxim"
    """Home directory name; home is /usr/<user>"""

    traversal_floor: str = "root"
    """Where `..` stops: "root" (the / directory) or "home" (/usr/<user>)"""

    include_executable: bool = True
    """Whether the root holds the decorative executable"""

    executable_name: str = "play"
    """Name of the root executable (launches the minigame)"""

    strict_content: bool = True
    """Reject duplicate slugs and unknown folder ids instead of skipping them"""

    # === Shell Text ===

    whoami_text: str = (
        "hi. im maxim, a developer who enjoys building interesting projects and "
        "sharing the journey. this is my devlog where i document progress, "
        "thoughts, and learnings from various projects."
    )
    """Output of `whoami`"""

    finger_text: str = (
        "my dms are open on X/Twitter at @MaximKabaev21. "
        "always open to discuss anything."
    )
    """Output of `finger`"""

    navigation_delay_ms: int = 500
    """Pause hosts should leave between "Opening ..." and navigating"""

    # === Files ===

    content_file: str | None = None
    """Default content snapshot (JSON) for the CLI"""

    session_file: str | None = None
    """Where the CLI persists shell session state between runs"""

    def __init__(self, **kwargs: Any) -> None:
        """
        Initialize configuration.

        Args:
            **kwargs: Override any configuration option
        """
        # Load from environment first
        self._load_from_env()

        # Apply explicit overrides
        for key, value in kwargs.items():
            if key not in self.option_names():
                raise ValueError(f"Unknown configuration option: {key}")
            setattr(self, key, value)

        self._validate()

    def _validate(self) -> None:
        """Reject option values that can't form a filesystem."""
        if self.traversal_floor not in TRAVERSAL_FLOORS:
            raise ValueError(
                f"traversal_floor must be one of {TRAVERSAL_FLOORS}, "
                f"got {self.traversal_floor!r}"
            )
        if not self.user or "/" in self.user or self.user in (".", "..", "~"):
            raise ValueError(f"user must be a single path segment, got {self.user!r}")

    def _load_from_env(self) -> None:
        """Load configuration from environment variables."""
        import os

        if user := os.getenv("TERMFOLIO_USER"):
            self.user = user
        if floor := os.getenv("TERMFOLIO_TRAVERSAL_FLOOR"):
            self.traversal_floor = floor
        if flag := os.getenv("TERMFOLIO_INCLUDE_EXECUTABLE"):
            self.include_executable = _env_bool(flag)
        if flag := os.getenv("TERMFOLIO_STRICT_CONTENT"):
            self.strict_content = _env_bool(flag)
        if content := os.getenv("TERMFOLIO_CONTENT_FILE"):
            self.content_file = content
        if session := os.getenv("TERMFOLIO_SESSION_FILE"):
            self.session_file = session

    @classmethod
    def option_names(cls) -> tuple[str, ...]:
        """Names of all configuration options."""
        return tuple(cls.__annotations__)

    @property
    def home_path(self) -> list[str]:
        """Canonical segments of the home directory."""
        return ["usr", self.user]

    @property
    def floor_path(self) -> list[str]:
        """Canonical segments `..` never climbs above."""
        return self.home_path if self.traversal_floor == "home" else []

    @classmethod
    def from_file(cls, path: str | Path) -> "TermConfig":
        """
        Load configuration from TOML file.

        Example TOML:
            [filesystem]
            user = "maxim"
            traversal_floor = "home"

            [shell]
            whoami_text = "hello"

            [files]
            content_file = "content.json"

        Args:
            path: Path to TOML configuration file

        Returns:
            TermConfig instance with values from file

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If the file names an unknown option
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        data = _load_toml(path)

        # Sections only group options; keys are not prefixed
        flat_config: dict[str, Any] = {}
        for key, value in data.items():
            if isinstance(value, dict):
                flat_config.update(value)
            else:
                flat_config[key] = value

        logger.debug("Loaded %d config options from %s", len(flat_config), path)
        return cls(**flat_config)

    @classmethod
    def from_env(cls) -> "TermConfig":
        """Load configuration from environment variables only."""
        return cls()

    def to_file(self, path: str | Path) -> None:
        """
        Save configuration to TOML file.

        Options left at None are omitted.

        Args:
            path: Path to write TOML configuration file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        sections: dict[str, dict[str, str | int | bool | None]] = {
            "filesystem": {
                "user": self.user,
                "traversal_floor": self.traversal_floor,
                "include_executable": self.include_executable,
                "executable_name": self.executable_name,
                "strict_content": self.strict_content,
            },
            "shell": {
                "whoami_text": self.whoami_text,
                "finger_text": self.finger_text,
                "navigation_delay_ms": self.navigation_delay_ms,
            },
            "files": {
                "content_file": self.content_file,
                "session_file": self.session_file,
            },
        }

        # Build TOML string manually (avoids extra dependency)
        lines = ["# termfolio configuration", ""]

        for section_name, section_values in sections.items():
            lines.append(f"[{section_name}]")
            for key, value in section_values.items():
                if isinstance(value, str):
                    lines.append(f"{key} = {_toml_string(value)}")
                elif isinstance(value, bool):
                    lines.append(f"{key} = {str(value).lower()}")
                elif isinstance(value, int):
                    lines.append(f"{key} = {value}")
            lines.append("")

        path.write_text("\n".join(lines))

    def with_overrides(self, **kwargs: Any) -> "TermConfig":
        """Return new config with specified overrides."""
        new_config = TermConfig.__new__(TermConfig)
        for key in self.option_names():
            setattr(new_config, key, getattr(self, key))
        for key, value in kwargs.items():
            if key not in self.option_names():
                raise ValueError(f"Unknown configuration option: {key}")
            setattr(new_config, key, value)
        new_config._validate()
        return new_config
