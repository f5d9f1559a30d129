"""Output formatting utilities for config entries."""

from __future__ import annotations

from skconfig.config import dump_yaml
from skconfig.models import ContextConfig, GlobalConfig


def format_config_yaml(config: GlobalConfig | ContextConfig) -> str:
    """Return the YAML document for a whole config or a single entry.

    Args:
        config: Global config or context entry to render.

    Returns:
        YAML text terminated by a newline.

    Raises:
        ConfigSerializationError: If the payload cannot be marshaled.
    """
    return dump_yaml(config.to_yaml_payload())
