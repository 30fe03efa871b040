"""
Public API Layer

This module contains the user-facing API classes.

Modules:
    shell: TerminalShell class - filesystem-style navigation

Design Principles:
    - The filesystem is built once per content snapshot and never mutated
    - Shell state is explicit and serializable, never module-global
    - User mistakes come back as output lines, not exceptions
"""

from termfolio.api.shell import TerminalShell

__all__ = ["TerminalShell"]
