"""Tests for loading content snapshots from JSON."""

import json

import pytest
from pydantic import ValidationError

from termfolio.config import TermConfig
from termfolio.content import load_content, save_content
from termfolio.shell.path_resolver import InvalidContentError
from termfolio.types import ContentSnapshot, Folder, Project


def _write(path, data) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


class TestLoadContent:
    def test_load(self, tmp_path):
        path = tmp_path / "content.json"
        _write(
            path,
            {
                "folders": [{"id": "f1", "name": "Web", "slug": "web"}],
                "projects": [
                    {"id": "p1", "name": "Site", "slug": "site", "folder_id": "f1"},
                    {"id": "p2", "name": "Tool", "slug": "tool", "folder_id": None},
                ],
            },
        )

        snapshot = load_content(path)

        assert [f.slug for f in snapshot.folders] == ["web"]
        assert [p.slug for p in snapshot.projects] == ["site", "tool"]
        assert snapshot.projects[1].folder_id is None

    def test_missing_keys_default_to_empty(self, tmp_path):
        path = tmp_path / "content.json"
        _write(path, {"projects": [{"id": "p1", "name": "Site", "slug": "site"}]})
        snapshot = load_content(path)
        assert snapshot.folders == []
        assert len(snapshot.projects) == 1

    def test_api_fields_are_ignored(self, tmp_path):
        path = tmp_path / "content.json"
        _write(
            path,
            {
                "projects": [
                    {"id": "p1", "name": "Site", "slug": "site", "user_id": "u9", "views": 12}
                ]
            },
        )
        project = load_content(path).projects[0]
        assert not hasattr(project, "user_id")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Content file not found"):
            load_content(tmp_path / "missing.json")

    def test_schema_violation(self, tmp_path):
        path = tmp_path / "content.json"
        _write(path, {"projects": [{"id": "p1", "name": "No slug"}]})
        with pytest.raises(ValidationError):
            load_content(path)


class TestSaveContent:
    def test_save_then_load(self, tmp_path, projects, folders):
        snapshot = ContentSnapshot(folders=folders, projects=projects)
        path = tmp_path / "out" / "content.json"

        save_content(snapshot, path)

        assert load_content(path) == snapshot
        assert "github_url" not in json.loads(path.read_text())["projects"][1]


class TestBuildFilesystem:
    def test_build(self, projects, folders):
        fs = ContentSnapshot(folders=folders, projects=projects).build_filesystem()
        assert fs.is_file(["usr", "maxim", "projects", "web", "site"])
        assert fs.is_directory(["usr", "maxim", "projects", "games"])

    def test_build_with_config(self, projects, folders):
        snapshot = ContentSnapshot(folders=folders, projects=projects)
        fs = snapshot.build_filesystem(TermConfig(user="alice"))
        assert fs.is_file(["usr", "alice", "tool"])

    def test_build_rejects_invalid_tree(self):
        snapshot = ContentSnapshot(
            projects=[Project(id="p1", name="Lost", slug="lost", folder_id="missing")],
            folders=[Folder(id="f1", name="Web", slug="web")],
        )
        with pytest.raises(InvalidContentError):
            snapshot.build_filesystem()
