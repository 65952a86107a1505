"""Dotted-key access into nested actor data (``system.details.cr``)."""

from typing import Any


def get_property(data: Any, key: str, default: Any = None) -> Any:
    """Walk ``key`` through nested mappings; return ``default`` on any miss."""
    node = data
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return node


def set_property(data: dict, key: str, value: Any) -> None:
    """Assign ``value`` at ``key``, creating intermediate dicts as needed."""
    *parents, leaf = key.split(".")
    node = data
    for part in parents:
        child = node.get(part)
        if not isinstance(child, dict):
            child = {}
            node[part] = child
        node = child
    node[leaf] = value
