"""Shared TypedDict payloads for tests."""

from __future__ import annotations

from typing import NotRequired, TypedDict

# YAML keys contain dashes and the reserved word `global`, so the functional syntax is used.
ContextConfigPayload = TypedDict(
    "ContextConfigPayload",
    {
        "kube-context": NotRequired[str],
        "default-repo": NotRequired[str],
        "local-cluster": NotRequired[bool],
        "insecure-registries": NotRequired[list[str]],
    },
)

GlobalConfigPayload = TypedDict(
    "GlobalConfigPayload",
    {
        "global": NotRequired[ContextConfigPayload],
        "kubeContexts": list[ContextConfigPayload],
    },
)
