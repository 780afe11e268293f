"""Tests for GlobalConfig loading, saving, and field updates."""

from pathlib import Path

import pytest

from branchstack.core.config_store import (
    CONFIG_ENV_VAR,
    FakeConfigStore,
    GlobalConfig,
    RealConfigStore,
    config_field_as_string,
    update_config_field,
)
from branchstack.core.errors import ConfigError


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "config.toml"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    return path


def test_missing_file_gives_defaults(config_path: Path) -> None:
    store = RealConfigStore()

    assert not store.exists()
    assert store.load_or_default() == GlobalConfig()


def test_default_path_is_under_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    assert RealConfigStore().path() == tmp_path / ".branchstack" / "config.toml"


def test_load_partial_file_fills_defaults(config_path: Path) -> None:
    config_path.write_text('trunk_branch = "develop"\n', encoding="utf-8")

    config = RealConfigStore().load()

    assert config == GlobalConfig(trunk_branch="develop")


def test_malformed_toml_raises_config_error(config_path: Path) -> None:
    config_path.write_text("trunk_branch = \n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Malformed config file"):
        RealConfigStore().load()


def test_wrong_type_raises_config_error(config_path: Path) -> None:
    config_path.write_text('delete_remote_branches = "yes"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="delete_remote_branches"):
        RealConfigStore().load()


def test_save_round_trips_and_keeps_comments(config_path: Path) -> None:
    config_path.write_text('# my settings\nremote = "upstream"\n', encoding="utf-8")
    store = RealConfigStore()

    store.save(GlobalConfig(trunk_branch="trunk", remote="upstream"))

    text = config_path.read_text(encoding="utf-8")
    assert "# my settings" in text
    assert store.load() == GlobalConfig(trunk_branch="trunk", remote="upstream")


def test_save_creates_parent_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "nested" / "config.toml"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    RealConfigStore().save(GlobalConfig(delete_remote_branches=False))

    assert RealConfigStore().load().delete_remote_branches is False


def test_update_config_field() -> None:
    config = GlobalConfig()

    assert update_config_field(config, "trunk_branch", "develop").trunk_branch == "develop"
    assert update_config_field(config, "remote", " upstream ").remote == "upstream"
    updated = update_config_field(config, "delete_remote_branches", "FALSE")
    assert updated.delete_remote_branches is False


@pytest.mark.parametrize(
    ("field_name", "value"),
    [
        ("trunk_branch", "  "),
        ("delete_remote_branches", "maybe"),
        ("unknown", "x"),
    ],
)
def test_update_config_field_rejects_bad_input(field_name: str, value: str) -> None:
    with pytest.raises(ConfigError):
        update_config_field(GlobalConfig(), field_name, value)


def test_config_field_as_string() -> None:
    config = GlobalConfig()

    assert config_field_as_string(config, "trunk_branch") == "main"
    assert config_field_as_string(config, "delete_remote_branches") == "true"
    with pytest.raises(ConfigError, match="Unknown config key"):
        config_field_as_string(config, "nope")


def test_fake_store_without_config() -> None:
    store = FakeConfigStore()

    assert not store.exists()
    assert store.load_or_default() == GlobalConfig()
    with pytest.raises(ConfigError):
        store.load()

    store.save(GlobalConfig(remote="fork"))
    assert store.load().remote == "fork"
