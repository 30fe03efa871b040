"""Shared fixtures: a small portfolio and the filesystem built from it."""

import pytest

from termfolio.api.shell import TerminalShell
from termfolio.config import TermConfig
from termfolio.shell.path_resolver import VirtualFileSystem
from termfolio.types import Folder, Project


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TERMFOLIO_USER",
        "TERMFOLIO_TRAVERSAL_FLOOR",
        "TERMFOLIO_INCLUDE_EXECUTABLE",
        "TERMFOLIO_STRICT_CONTENT",
        "TERMFOLIO_CONTENT_FILE",
        "TERMFOLIO_SESSION_FILE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def folders() -> list[Folder]:
    return [
        Folder(id="f1", name="Web", slug="web"),
        Folder(id="f2", name="Games", slug="games"),
    ]


@pytest.fixture
def projects() -> list[Project]:
    return [
        Project(
            id="p1",
            name="Site",
            slug="site",
            folder_id="f1",
            description="Personal website and devlog.",
            status="active",
            tech_stack=["Next.js", "TypeScript"],
            github_url="https://github.com/maxim/site",
            demo_url="https://maxim.dev",
        ),
        Project(id="p2", name="Tool", slug="tool", folder_id=None, status="archived"),
        Project(id="p3", name="Blog", slug="blog", folder_id="f1"),
    ]


@pytest.fixture
def fs(projects: list[Project], folders: list[Folder]) -> VirtualFileSystem:
    return VirtualFileSystem(projects, folders, config=TermConfig())


@pytest.fixture
def shell(fs: VirtualFileSystem) -> TerminalShell:
    return TerminalShell(fs)
