"""wiretext: compile WireText wireframes into ASCII layouts and HTML."""

from wiretext.ascii_renderer import render_ascii
from wiretext.compiler import CompileOptions, compile_wiretext
from wiretext.exceptions import (
    InvalidNestingError,
    TreeLoadError,
    UnmatchedCloseError,
    WiretextError,
    WiretextSyntaxError,
)
from wiretext.html_renderer import render_html_document
from wiretext.normalize import normalize_row_text
from wiretext.parser import parse_wiretext
from wiretext.schemas import (
    CompileResult,
    GroupNode,
    Ratio,
    RootNode,
    RowNode,
    SectionNode,
)
from wiretext.serialize import load_tree, serialize_tree
from wiretext.text_wrap import wrap_line

__all__ = [
    "CompileOptions",
    "CompileResult",
    "GroupNode",
    "InvalidNestingError",
    "Ratio",
    "RootNode",
    "RowNode",
    "SectionNode",
    "TreeLoadError",
    "UnmatchedCloseError",
    "WiretextError",
    "WiretextSyntaxError",
    "compile_wiretext",
    "load_tree",
    "normalize_row_text",
    "parse_wiretext",
    "render_ascii",
    "render_html_document",
    "serialize_tree",
    "wrap_line",
]
