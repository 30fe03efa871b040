"""
Configuration System

Manages configuration for termfolio with a layered approach.

Configuration Priority (highest to lowest):
    1. Programmatic (passed to TermConfig())
    2. Environment variables (TERMFOLIO_* prefix)
    3. Built-in defaults

Config files are loaded explicitly with TermConfig.from_file(); their
values are applied as programmatic overrides.

Modules:
    settings: TermConfig class
"""

from termfolio.config.settings import TermConfig

__all__ = ["TermConfig"]
