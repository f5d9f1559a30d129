"""Public exports for the skconfig package."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version
from pathlib import Path

from .config import (
    DEFAULT_CONFIG_LOCATION,
    DEFAULT_KUBECONTEXT,
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigSerializationError,
    get_config_for_kubecontext,
    get_or_create_config_for_kubecontext,
    read_config,
    read_config_for_file,
    resolve_config_file,
    write_full_config,
)
from .kubecontext import KubeContextError, current_kube_context, resolve_kubecontext
from .models import ConfigOptions, ContextConfig, GlobalConfig


def _load_local_version() -> str:
    """Return the package version declared in pyproject.toml when metadata is unavailable."""
    pyproject_path = Path(__file__).resolve().parents[2] / "pyproject.toml"
    try:
        raw_text = pyproject_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return "0.0.0"

    try:
        data = tomllib.loads(raw_text)
    except tomllib.TOMLDecodeError:
        return "0.0.0"

    project_section = data.get("project")
    if isinstance(project_section, dict):
        version_value = project_section.get("version")
        if isinstance(version_value, str) and version_value.strip():
            return version_value.strip()
    return "0.0.0"


try:
    __version__ = pkg_version("skconfig")
except PackageNotFoundError:
    __version__ = _load_local_version()

__all__ = [
    "DEFAULT_CONFIG_LOCATION",
    "DEFAULT_KUBECONTEXT",
    "ConfigError",
    "ConfigIOError",
    "ConfigNotFoundError",
    "ConfigOptions",
    "ConfigParseError",
    "ConfigSerializationError",
    "ContextConfig",
    "GlobalConfig",
    "KubeContextError",
    "__version__",
    "current_kube_context",
    "get_config_for_kubecontext",
    "get_or_create_config_for_kubecontext",
    "read_config",
    "read_config_for_file",
    "resolve_config_file",
    "resolve_kubecontext",
    "write_full_config",
]
