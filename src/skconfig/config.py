"""Locate, read and update the skaffold global config file."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Final

import yaml
from pydantic import ValidationError

from skconfig.models import ContextConfig, GlobalConfig

DEFAULT_CONFIG_LOCATION: Final[Path] = Path(".skaffold") / "config"
DEFAULT_KUBECONTEXT: Final[str] = "default"


class ConfigError(RuntimeError):
    """Raised when the global config cannot be located, read, or written."""


class ConfigIOError(ConfigError):
    """Raised when the config file is missing, unreadable, or unwritable."""


class ConfigParseError(ConfigError):
    """Raised when the config file does not contain a valid global config."""


class ConfigSerializationError(ConfigError):
    """Raised when a config cannot be marshaled to YAML."""


class ConfigNotFoundError(ConfigError):
    """Raised when no config entry matches the requested kube-context."""


def resolve_config_file(config_file: Path | str | None = None) -> Path:
    """Return the absolute path of the global config file.

    Args:
        config_file: Explicit config path; defaults to `~/.skaffold/config`.

    Returns:
        Absolute path to an existing config file.

    Raises:
        ConfigIOError: If the home directory is unknown or the file does not exist.
    """
    if config_file is not None and config_file != "":
        path = Path(config_file).expanduser().absolute()
    else:
        try:
            home = Path.home()
        except RuntimeError as exc:
            msg = f"resolving config file location: retrieving home directory: {exc}"
            raise ConfigIOError(msg) from exc
        path = home / DEFAULT_CONFIG_LOCATION

    if not path.exists():
        msg = f"resolving config file location: {path} does not exist"
        raise ConfigIOError(msg)
    return path


def read_config_for_file(path: Path | str) -> GlobalConfig:
    """Read and parse the global config stored at `path`.

    Args:
        path: Location of the config file.

    Returns:
        Parsed GlobalConfig with context entries in file order.

    Raises:
        ConfigIOError: If the file cannot be read.
        ConfigParseError: If the contents are not a valid global config.
    """
    config_path = Path(path)
    try:
        raw_bytes = config_path.read_bytes()
    except OSError as exc:
        msg = f"reading global config: {exc}"
        raise ConfigIOError(msg) from exc

    raw = _load_yaml_mapping(raw_bytes)
    try:
        return GlobalConfig.model_validate(raw)
    except ValidationError as exc:
        msg = f"unmarshalling global skaffold config: {exc}"
        raise ConfigParseError(msg) from exc


def read_config(config_file: Path | str | None = None) -> GlobalConfig:
    """Locate the global config file and parse it."""
    return read_config_for_file(resolve_config_file(config_file))


def get_config_for_kubecontext(
    kubecontext: str,
    *,
    config_file: Path | str | None = None,
    use_global: bool = False,
) -> ContextConfig:
    """Return the config entry for `kubecontext`, or the global entry.

    Args:
        kubecontext: Resolved kube-context name.
        config_file: Explicit config path override.
        use_global: Whether to return the global entry instead.

    Returns:
        The first matching entry, or the global entry when requested.

    Raises:
        ConfigNotFoundError: If no entry matches `kubecontext`.
    """
    config = read_config(config_file)
    if use_global:
        return _global_entry(config)

    entry = _find_entry(config, kubecontext)
    if entry is None:
        msg = f"no config entry found for kube-context {kubecontext}"
        raise ConfigNotFoundError(msg)
    return entry


def get_or_create_config_for_kubecontext(
    kubecontext: str,
    *,
    config_file: Path | str | None = None,
    use_global: bool = False,
) -> ContextConfig:
    """Return the config entry for `kubecontext`, creating and persisting it when missing.

    Args:
        kubecontext: Resolved kube-context name.
        config_file: Explicit config path override.
        use_global: Whether to return the global entry instead.

    Returns:
        The existing or newly created entry.

    Raises:
        ConfigIOError: If the updated config cannot be written.
        ConfigSerializationError: If the updated config cannot be marshaled.
    """
    config_path = resolve_config_file(config_file)
    config = read_config_for_file(config_path)
    if use_global:
        return _global_entry(config)

    entry = _find_entry(config, kubecontext)
    if entry is not None:
        return entry

    new_entry = ContextConfig(kube_context=kubecontext)
    updated = config.model_copy(update={"context_configs": [*config.context_configs, new_entry]})
    write_full_config(updated, config_path)
    return new_entry


def write_full_config(config: GlobalConfig, path: Path | str) -> None:
    """Overwrite `path` with the YAML form of `config`.

    Raises:
        ConfigSerializationError: If the config cannot be marshaled.
        ConfigIOError: If the file cannot be written.
    """
    contents = dump_yaml(config.to_yaml_payload())
    try:
        Path(path).write_text(contents, encoding="utf-8")
    except OSError as exc:
        msg = f"writing global config: {exc}"
        raise ConfigIOError(msg) from exc


def dump_yaml(payload: dict[str, Any]) -> str:
    """Serialize a mapping to YAML, keeping key order."""
    try:
        return yaml.safe_dump(payload, sort_keys=False)
    except yaml.YAMLError as exc:
        msg = f"marshaling config: {exc}"
        raise ConfigSerializationError(msg) from exc


def _global_entry(config: GlobalConfig) -> ContextConfig:
    """Return the global entry, or an empty one when the file has none."""
    if config.global_config is None:
        return ContextConfig()
    return config.global_config


def _find_entry(config: GlobalConfig, kubecontext: str) -> ContextConfig | None:
    """Return the first entry whose kube-context equals `kubecontext`."""
    for entry in config.context_configs:
        if entry.kube_context == kubecontext:
            return entry
    return None


def _load_yaml_mapping(raw_bytes: bytes) -> dict[str, Any]:
    """Parse YAML bytes ensuring a mapping result."""
    try:
        raw = yaml.safe_load(raw_bytes)
    except yaml.YAMLError as exc:
        msg = f"unmarshalling global skaffold config: {exc}"
        raise ConfigParseError(msg) from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        msg = "unmarshalling global skaffold config: expected a YAML mapping"
        raise ConfigParseError(msg)
    return raw
