"""Shared schemas for wiretext."""

from wiretext.schemas.result import CompileResult
from wiretext.schemas.tree import GroupNode, Node, Ratio, RootNode, RowNode, SectionNode

__all__ = [
    "CompileResult",
    "GroupNode",
    "Node",
    "Ratio",
    "RootNode",
    "RowNode",
    "SectionNode",
]
