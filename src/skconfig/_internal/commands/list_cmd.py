"""List command implementation."""

from __future__ import annotations

from skconfig._internal.output.formatters import format_config_yaml
from skconfig._internal.state import CLIState
from skconfig.config import get_config_for_kubecontext, read_config
from skconfig.kubecontext import ContextProvider, current_kube_context, resolve_kubecontext
from skconfig.models import ConfigOptions


def execute_list_command(
    state: CLIState,
    options: ConfigOptions,
    *,
    provider: ContextProvider = current_kube_context,
) -> str:
    """Render the requested config values and print them.

    Args:
        state: CLI state.
        options: Flags for this invocation.
        provider: Query used when no kube-context override is given.

    Returns:
        The rendered YAML document.

    Raises:
        ConfigError: If the config cannot be located, read, or rendered.
    """
    kubecontext = resolve_kubecontext(options.kubecontext, provider=provider, console=state.err_console)

    if options.show_all:
        rendered = format_config_yaml(read_config(options.config_file))
    else:
        entry = get_config_for_kubecontext(
            kubecontext,
            config_file=options.config_file,
            use_global=options.use_global,
        )
        rendered = format_config_yaml(entry)

    state.console.print(rendered, markup=False, emoji=False, end="")
    return rendered
