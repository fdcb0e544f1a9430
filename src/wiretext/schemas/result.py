"""Compilation output model."""

from __future__ import annotations

from pydantic import BaseModel

from wiretext.schemas.tree import RootNode


class CompileResult(BaseModel):
    """Every artifact derived from one WireText source."""

    tree: RootNode
    width: int
    ascii: str
    html: str
    tree_json: str
