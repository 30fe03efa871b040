"""Tests for TermConfig layering."""

import pytest

from termfolio.config import TermConfig


class TestDefaults:
    def test_defaults(self):
        config = TermConfig()
        assert config.user == "maxim"
        assert config.traversal_floor == "root"
        assert config.include_executable is True
        assert config.executable_name == "play"
        assert config.strict_content is True
        assert config.content_file is None

    def test_derived_paths(self):
        config = TermConfig()
        assert config.home_path == ["usr", "maxim"]
        assert config.floor_path == []
        assert TermConfig(traversal_floor="home").floor_path == ["usr", "maxim"]


class TestOverrides:
    def test_environment(self, monkeypatch):
        monkeypatch.setenv("TERMFOLIO_USER", "alice")
        monkeypatch.setenv("TERMFOLIO_TRAVERSAL_FLOOR", "home")
        monkeypatch.setenv("TERMFOLIO_INCLUDE_EXECUTABLE", "0")
        monkeypatch.setenv("TERMFOLIO_STRICT_CONTENT", "false")
        monkeypatch.setenv("TERMFOLIO_CONTENT_FILE", "content.json")

        config = TermConfig()

        assert config.user == "alice"
        assert config.traversal_floor == "home"
        assert config.include_executable is False
        assert config.strict_content is False
        assert config.content_file == "content.json"

    def test_kwargs_beat_environment(self, monkeypatch):
        monkeypatch.setenv("TERMFOLIO_USER", "alice")
        assert TermConfig(user="bob").user == "bob"

    def test_unknown_option(self):
        with pytest.raises(ValueError, match="Unknown configuration option: colour"):
            TermConfig(colour="green")

    def test_derived_path_is_not_an_option(self):
        with pytest.raises(ValueError, match="Unknown configuration option"):
            TermConfig(home_path=["home", "alice"])

    def test_invalid_floor(self):
        with pytest.raises(ValueError, match="traversal_floor"):
            TermConfig(traversal_floor="basement")

    def test_with_overrides(self):
        config = TermConfig()
        changed = config.with_overrides(user="carol")
        assert changed.user == "carol"
        assert changed.executable_name == "play"
        assert config.user == "maxim"

    def test_with_overrides_unknown(self):
        with pytest.raises(ValueError):
            TermConfig().with_overrides(colour="green")

    def test_with_overrides_validates_floor(self):
        with pytest.raises(ValueError, match="traversal_floor"):
            TermConfig().with_overrides(traversal_floor="basement")

    @pytest.mark.parametrize("user", ["", "a/b", "..", "~"])
    def test_invalid_user(self, user):
        with pytest.raises(ValueError, match="single path segment"):
            TermConfig(user=user)
        with pytest.raises(ValueError, match="single path segment"):
            TermConfig().with_overrides(user=user)


class TestFiles:
    def test_from_file(self, tmp_path):
        path = tmp_path / "termfolio.toml"
        path.write_text(
            "[filesystem]\n"
            'user = "dana"\n'
            'traversal_floor = "home"\n'
            "include_executable = false\n"
            "\n"
            "[shell]\n"
            'finger_text = "find me at @dana"\n'
        )

        config = TermConfig.from_file(path)

        assert config.user == "dana"
        assert config.traversal_floor == "home"
        assert config.include_executable is False
        assert config.finger_text == "find me at @dana"

    def test_from_file_top_level_keys(self, tmp_path):
        path = tmp_path / "termfolio.toml"
        path.write_text('executable_name = "snake"\n')
        assert TermConfig.from_file(path).executable_name == "snake"

    def test_from_file_unknown_key(self, tmp_path):
        path = tmp_path / "termfolio.toml"
        path.write_text("[shell]\ncolour = 'green'\n")
        with pytest.raises(ValueError, match="colour"):
            TermConfig.from_file(path)

    def test_from_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            TermConfig.from_file(tmp_path / "missing.toml")

    def test_to_file_round_trip(self, tmp_path):
        original = TermConfig(
            user="erin",
            traversal_floor="home",
            whoami_text="line one\nline two\twith a tab",
            finger_text='say "hi" on X \\ back',
            session_file="/tmp/session.json",
        )
        path = tmp_path / "out" / "termfolio.toml"

        original.to_file(path)
        loaded = TermConfig.from_file(path)

        for name in TermConfig.option_names():
            assert getattr(loaded, name) == getattr(original, name), name
