"""Compilation pipeline for WireText -> ASCII, HTML and JSON."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from wiretext.ascii_renderer import render_ascii
from wiretext.config import WIRETEXT_DEFAULT_WIDTH, WIRETEXT_MIN_WIDTH
from wiretext.html_renderer import render_html_document
from wiretext.html_utils import prettify_document
from wiretext.parser import parse_wiretext
from wiretext.schemas import CompileResult, GroupNode, Node, RootNode, SectionNode
from wiretext.serialize import serialize_tree

logger = logging.getLogger(__name__)


@dataclass
class CompileOptions:
    """Options for compiling a WireText source.

    Attributes:
        width: Requested ASCII width; clamped to ``WIRETEXT_MIN_WIDTH``.
        pretty_html: If True, re-indent the HTML document with BeautifulSoup.
        json_indent: Indentation of the JSON tree dump (None for compact).
    """

    width: int = WIRETEXT_DEFAULT_WIDTH
    pretty_html: bool = False
    json_indent: int | None = 2


def clamp_width(width: int | None) -> int:
    """Apply the caller-side minimum width."""
    if not width:
        return max(WIRETEXT_MIN_WIDTH, WIRETEXT_DEFAULT_WIDTH)
    return max(WIRETEXT_MIN_WIDTH, width)


def compile_wiretext(source: str, options: CompileOptions | None = None) -> CompileResult:
    """Parse ``source`` once and render every output format.

    Raises:
        WiretextSyntaxError: If the source cannot be parsed.
    """
    opts = options or CompileOptions()
    tree = parse_wiretext(source)
    width = clamp_width(opts.width)

    ascii_text = "\n".join(render_ascii(tree, width))
    html = render_html_document(tree)
    if opts.pretty_html:
        html = prettify_document(html)
    tree_json = serialize_tree(tree, indent=opts.json_indent)

    logger.debug(
        "Compiled WireText: %d nodes, width %d, %d ASCII chars, %d HTML chars",
        count_nodes(tree.children),
        width,
        len(ascii_text),
        len(html),
    )
    return CompileResult(tree=tree, width=width, ascii=ascii_text, html=html, tree_json=tree_json)


def count_nodes(nodes: Iterable[Node | RootNode]) -> int:
    """Count nodes in the given subtrees."""
    total = 0
    for node in nodes:
        total += 1
        if isinstance(node, (RootNode, SectionNode, GroupNode)):
            total += count_nodes(node.children)
    return total
