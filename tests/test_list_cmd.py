"""Tests for the list command logic."""

from __future__ import annotations

from pathlib import Path

import pytest
from rich.console import Console

from skconfig._internal.commands.list_cmd import execute_list_command
from skconfig._internal.output.formatters import format_config_yaml
from skconfig._internal.state import CLIState
from skconfig.config import ConfigNotFoundError
from skconfig.models import ConfigOptions, ContextConfig, GlobalConfig


def _state() -> CLIState:
    return CLIState(
        console=Console(record=True, width=200),
        err_console=Console(record=True, width=200),
        verbose=False,
    )


def test_format_config_yaml_renders_new_entry() -> None:
    """A bare entry renders as a single kube-context key."""
    assert format_config_yaml(ContextConfig(kube_context="staging")) == "kube-context: staging\n"


def test_format_config_yaml_keeps_key_order() -> None:
    """The global section precedes kubeContexts."""
    config = GlobalConfig(
        global_config=ContextConfig(default_repo="gcr.io/shared"),
        context_configs=[ContextConfig(kube_context="prod")],
    )

    assert format_config_yaml(config) == (
        "global:\n  default-repo: gcr.io/shared\nkubeContexts:\n- kube-context: prod\n"
    )


def test_execute_list_command_prints_selected_entry(config_file: Path) -> None:
    """The selected entry is rendered to the output console only."""
    state = _state()
    options = ConfigOptions(config_file=config_file, kubecontext="prod")

    rendered = execute_list_command(state, options, provider=lambda: "ignored")

    assert rendered == "kube-context: prod\ndefault-repo: gcr.io/prod\n"
    assert state.console.export_text() == rendered
    assert state.err_console.export_text() == ""


def test_execute_list_command_uses_default_context_when_unset(write_config) -> None:
    """An empty current context selects the `default` entry."""
    path = write_config({"kubeContexts": [{"kube-context": "default", "local-cluster": False}]})
    state = _state()

    rendered = execute_list_command(state, ConfigOptions(config_file=path), provider=lambda: "")

    assert rendered == "kube-context: default\nlocal-cluster: false\n"


def test_execute_list_command_prints_nothing_on_failure(config_file: Path) -> None:
    """Lookup failures propagate before anything is written."""
    state = _state()

    with pytest.raises(ConfigNotFoundError):
        execute_list_command(state, ConfigOptions(config_file=config_file, kubecontext="staging"))

    assert state.console.export_text() == ""
