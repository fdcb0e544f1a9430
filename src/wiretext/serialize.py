"""Dump and reload WireText trees as JSON."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from wiretext.exceptions import TreeLoadError
from wiretext.schemas import RootNode


def tree_to_dict(tree: RootNode) -> dict[str, Any]:
    """Return the tree as plain JSON-compatible data."""
    return tree.model_dump(mode="json")


def serialize_tree(tree: RootNode, *, indent: int | None = 2) -> str:
    """Serialize a tree to JSON (``type``/``name``/``ratio``/``children``/``text``)."""
    return tree.model_dump_json(indent=indent)


def load_tree(data: str | bytes | dict[str, Any]) -> RootNode:
    """Rebuild a tree from a JSON dump or its decoded dict.

    Raises:
        TreeLoadError: If the data is not a valid tree dump.
    """
    try:
        if isinstance(data, dict):
            return RootNode.model_validate(data)
        return RootNode.model_validate_json(data)
    except ValidationError as exc:
        raise TreeLoadError(f"Invalid WireText tree: {exc}") from exc
