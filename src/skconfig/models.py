"""Core data models for the skaffold global configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContextConfig(BaseModel):
    """Settings that apply to a single kube-context (or globally)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")

    kube_context: str = Field(default="", alias="kube-context")
    default_repo: str | None = Field(default=None, alias="default-repo")
    local_cluster: bool | None = Field(default=None, alias="local-cluster")
    insecure_registries: list[str] = Field(default_factory=list, alias="insecure-registries")

    @field_validator("kube_context", mode="before")
    @classmethod
    def coerce_kube_context(cls, value: Any) -> str:
        """Treat an explicit YAML null as an unset kube-context."""
        if value is None:
            return ""
        return value

    @field_validator("insecure_registries", mode="before")
    @classmethod
    def coerce_registries(cls, value: Any) -> list[str]:
        """Accept a null registry list as empty."""
        if value is None:
            return []
        if not isinstance(value, list):
            msg = "Expected a list of strings"
            raise ValueError(msg)
        return value

    def to_yaml_payload(self) -> dict[str, Any]:
        """Return the YAML mapping for this record, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_defaults=True)


class GlobalConfig(BaseModel):
    """Contents of the global config file: one global record plus per-context records."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    global_config: ContextConfig | None = Field(default=None, alias="global")
    context_configs: list[ContextConfig] = Field(default_factory=list, alias="kubeContexts")

    @field_validator("context_configs", mode="before")
    @classmethod
    def coerce_context_configs(cls, value: Any) -> Any:
        """Accept a null context list as empty."""
        if value is None:
            return []
        return value

    def to_yaml_payload(self) -> dict[str, Any]:
        """Return the YAML mapping persisted to disk."""
        payload: dict[str, Any] = {}
        if self.global_config is not None:
            payload["global"] = self.global_config.to_yaml_payload()
        payload["kubeContexts"] = [entry.to_yaml_payload() for entry in self.context_configs]
        return payload


class ConfigOptions(BaseModel):
    """Options for a single CLI invocation."""

    model_config = ConfigDict(frozen=True)

    config_file: Path | None = None
    kubecontext: str | None = None
    use_global: bool = False
    show_all: bool = False

    @field_validator("kubecontext")
    @classmethod
    def normalize_kubecontext(cls, value: str | None) -> str | None:
        """Return None for an empty kube-context override."""
        return value or None

    @field_validator("config_file", mode="before")
    @classmethod
    def expand_config_file(cls, value: Any) -> Path | None:
        """Expand user paths without touching the filesystem."""
        if value is None or value == "":
            return None
        if isinstance(value, Path):
            return value.expanduser()
        return Path(str(value)).expanduser()
