"""Kube-context resolution for config lookups."""

from __future__ import annotations

from collections.abc import Callable

import yaml
from kubernetes import config as kube_config
from kubernetes.config import ConfigException
from rich.console import Console
from rich.markup import escape

from skconfig.config import DEFAULT_KUBECONTEXT

ContextProvider = Callable[[], str]


class KubeContextError(RuntimeError):
    """Raised when the current kube-context cannot be determined."""


def current_kube_context() -> str:
    """Return the name of the active kube-context from the user's kubeconfig.

    Returns:
        The active context name, or an empty string when none is set.

    Raises:
        KubeContextError: If the kubeconfig cannot be loaded.
    """
    try:
        _, active_context = kube_config.list_kube_config_contexts()
    except (ConfigException, OSError, yaml.YAMLError) as exc:
        raise KubeContextError(str(exc)) from exc

    if not active_context:
        return ""
    name = active_context.get("name")
    return name if isinstance(name, str) else ""


def resolve_kubecontext(
    override: str | None,
    *,
    provider: ContextProvider = current_kube_context,
    console: Console | None = None,
) -> str:
    """Return the kube-context used to select config entries.

    An explicit override always wins. Otherwise the provider is consulted and any
    failure or empty answer falls back to `default`.

    Args:
        override: Kube-context supplied by the caller, if any.
        provider: Zero-argument query returning the current kube-context.
        console: Optional Rich console for diagnostics.

    Returns:
        A non-empty kube-context name.
    """
    if override:
        return override

    try:
        context = provider()
    except KubeContextError as exc:
        if console is not None:
            console.print(f"[warning]Warning: retrieving current kubectl context: {escape(str(exc))}[/warning]")
        return DEFAULT_KUBECONTEXT

    if not context:
        if console is not None:
            console.log("[info]no context currently set, falling back to default[/info]")
        return DEFAULT_KUBECONTEXT
    return context
