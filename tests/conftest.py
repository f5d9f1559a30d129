"""Shared pytest fixtures for skconfig."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from .payloads import GlobalConfigPayload


@pytest.fixture
def global_config_payload() -> GlobalConfigPayload:
    """Provide a config with a global entry and three kube-context entries."""
    return {
        "global": {
            "default-repo": "gcr.io/shared",
        },
        "kubeContexts": [
            {
                "kube-context": "prod",
                "default-repo": "gcr.io/prod",
            },
            {
                "kube-context": "minikube",
                "local-cluster": True,
            },
            {
                "kube-context": "prod",
                "default-repo": "gcr.io/shadowed",
            },
        ],
    }


@pytest.fixture
def write_config(tmp_path: Path):
    """Return a helper that writes a payload to a config file under tmp_path."""

    def _write(payload: GlobalConfigPayload | str, name: str = "config") -> Path:
        config_path = tmp_path / ".skaffold" / name
        config_path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(payload, str):
            config_path.write_text(payload, encoding="utf-8")
        else:
            config_path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
        return config_path

    return _write


@pytest.fixture
def config_file(write_config, global_config_payload: GlobalConfigPayload) -> Path:
    """Write the canonical config payload to disk."""
    return write_config(global_config_payload)


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the home directory at tmp_path."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path
