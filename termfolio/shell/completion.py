"""
Tab Completion

The first word completes against command names; later words complete
against the virtual filesystem, relative to the working directory or to
the directory named before the last '/'.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence

from termfolio.shell.path_resolver import VirtualFileSystem
from termfolio.types import Completion


def get_completions(
    fs: VirtualFileSystem,
    current_path: Sequence[str],
    partial: str,
    command_names: Iterable[str],
) -> list[str]:
    """Candidates for the last word of `partial`."""
    words = partial.split(" ")
    last = words[-1]

    if len(words) == 1:
        return [name for name in command_names if name.startswith(last)]

    if "/" in last:
        head, _, _ = last.rpartition("/")
        resolved = fs.resolve_path(current_path, head or "/")
        if resolved is None:
            return []
        prefix = head + "/"
        candidates = [prefix + node.display_name for node in fs.list(resolved)]
    else:
        candidates = [node.display_name for node in fs.list(current_path)]

    return [candidate for candidate in candidates if candidate.startswith(last)]


def complete(
    fs: VirtualFileSystem,
    current_path: Sequence[str],
    line: str,
    command_names: Iterable[str],
) -> Completion:
    """
    Complete the last word of `line`.

    A single candidate replaces the word; several candidates extend it to
    their longest common prefix.
    """
    if not line.strip():
        return Completion(line=line)

    options = get_completions(fs, current_path, line, command_names)
    if not options:
        return Completion(line=line)

    words = line.split(" ")
    if len(options) == 1:
        words[-1] = options[0]
    else:
        common = os.path.commonprefix(options)
        if len(common) > len(words[-1]):
            words[-1] = common

    return Completion(options=options, line=" ".join(words))
