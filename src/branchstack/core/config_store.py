"""Global configuration data structures and loading.

Provides immutable global config data loaded from ~/.branchstack/config.toml
(or the file named by BRANCHSTACK_CONFIG). Loaded once at the CLI entry
point and stored in StackContext.
"""

import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from pathlib import Path

import tomlkit

from branchstack.core.errors import ConfigError

CONFIG_ENV_VAR = "BRANCHSTACK_CONFIG"

DEFAULT_TRUNK_BRANCH = "main"
DEFAULT_REMOTE = "origin"


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    All fields are read-only after construction.
    """

    trunk_branch: str = DEFAULT_TRUNK_BRANCH
    remote: str = DEFAULT_REMOTE
    delete_remote_branches: bool = True


CONFIG_KEYS = ("trunk_branch", "remote", "delete_remote_branches")


def _parse_boolean_value(value: str, field_name: str) -> bool:
    """Parse "true"/"false" (case-insensitive) into a bool."""
    if value.lower() not in ("true", "false"):
        raise ConfigError(f"Invalid boolean value for {field_name}: {value}")
    return value.lower() == "true"


def _unknown_key(field_name: str) -> ConfigError:
    return ConfigError(
        f"Unknown config key: {field_name}", [f"Valid keys: {', '.join(CONFIG_KEYS)}"]
    )


def update_config_field(current: GlobalConfig, field_name: str, value: str) -> GlobalConfig:
    """Return a copy of `current` with one field set from its string form.

    Raises:
        ConfigError: If the field name is unknown or the value is invalid
    """
    match field_name:
        case "trunk_branch" | "remote":
            if not value.strip():
                raise ConfigError(f"{field_name} cannot be empty")
            return replace(current, **{field_name: value.strip()})
        case "delete_remote_branches":
            return replace(current, delete_remote_branches=_parse_boolean_value(value, field_name))
        case _:
            raise _unknown_key(field_name)


def config_field_as_string(config: GlobalConfig, field_name: str) -> str:
    """Render one field the way it is written in the TOML file."""
    if field_name not in CONFIG_KEYS:
        raise _unknown_key(field_name)
    value = getattr(config, field_name)
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


class ConfigStore(ABC):
    """Abstract interface for global config operations.

    Provides dependency injection for global config access, enabling
    in-memory implementations for tests without touching filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if global config exists."""
        ...

    @abstractmethod
    def load(self) -> GlobalConfig:
        """Load global config.

        Raises:
            ConfigError: If the config is malformed
        """
        ...

    @abstractmethod
    def save(self, config: GlobalConfig) -> None:
        """Save global config."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the global config file (for messages)."""
        ...

    def load_or_default(self) -> GlobalConfig:
        """Load config, falling back to defaults when no file exists."""
        if not self.exists():
            return GlobalConfig()
        return self.load()


class RealConfigStore(ConfigStore):
    """Production implementation that reads/writes the TOML config file."""

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> GlobalConfig:
        """Load global config from disk.

        Missing keys take their defaults; keys of the wrong type are rejected.
        """
        config_path = self.path()
        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Malformed config file {config_path}: {e}") from e

        defaults = GlobalConfig()
        trunk_branch = data.get("trunk_branch", defaults.trunk_branch)
        remote = data.get("remote", defaults.remote)
        delete_remote_branches = data.get(
            "delete_remote_branches", defaults.delete_remote_branches
        )

        if not isinstance(trunk_branch, str) or not trunk_branch:
            raise ConfigError(f"'trunk_branch' must be a non-empty string in {config_path}")
        if not isinstance(remote, str) or not remote:
            raise ConfigError(f"'remote' must be a non-empty string in {config_path}")
        if not isinstance(delete_remote_branches, bool):
            raise ConfigError(f"'delete_remote_branches' must be true or false in {config_path}")

        return GlobalConfig(
            trunk_branch=trunk_branch,
            remote=remote,
            delete_remote_branches=delete_remote_branches,
        )

    def save(self, config: GlobalConfig) -> None:
        """Write config, preserving existing comments and formatting."""
        config_path = self.path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        if config_path.exists():
            doc = tomlkit.parse(config_path.read_text(encoding="utf-8"))
        else:
            doc = tomlkit.document()
            doc.add(tomlkit.comment("Global branchstack configuration"))

        doc["trunk_branch"] = config.trunk_branch
        doc["remote"] = config.remote
        doc["delete_remote_branches"] = config.delete_remote_branches

        config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")

    def path(self) -> Path:
        override = os.environ.get(CONFIG_ENV_VAR)
        if override:
            return Path(override).expanduser()
        return Path.home() / ".branchstack" / "config.toml"


class FakeConfigStore(ConfigStore):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: GlobalConfig | None = None) -> None:
        """Initialize in-memory config store.

        Args:
            config: Initial config state (None = config doesn't exist)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> GlobalConfig:
        if self._config is None:
            raise ConfigError(f"Global config not found at {self.path()}")
        return self._config

    def save(self, config: GlobalConfig) -> None:
        self._config = config

    def path(self) -> Path:
        return Path("/fake/branchstack/config.toml")
