"""Render a WireText tree as a standalone HTML document."""

from __future__ import annotations

import re
from typing import Sequence

from wiretext.normalize import is_table_row
from wiretext.schemas import GroupNode, Node, RootNode, RowNode, SectionNode
from wiretext.segments import escape_html, inline_text_html, segment_html

SEMANTIC_TAGS = frozenset({"header", "footer", "nav", "main", "section", "aside", "article"})

_SEPARATOR_CELL_RE = re.compile(r"^:?-{3,}:?$")

STYLESHEET = """
<style>
  html,body{margin:0;padding:0;background:#f8fafc;color:#111827;font:14px/1.45 "SF Pro Text","Segoe UI",sans-serif;}
  .root{padding:10px;display:grid;gap:10px;}
  .group{display:flex;gap:10px;align-items:stretch;min-width:0;}
  .section{display:grid;gap:8px;min-width:0;}
  .section.frame{border:1px solid #cfd8e3;border-radius:10px;padding:10px;background:#fff;}
  .wt-row{display:flex;gap:8px;align-items:flex-start;flex-wrap:wrap;min-width:0;}
  .wt-cell{display:grid;gap:6px;min-width:0;flex:0 1 auto;}
  .wt-grow{flex:1 1 220px;}
  .wt-input{display:grid;gap:4px;}
  .wt-input label{font-size:12px;color:#4b5563;font-weight:600;}
  .wt-input input,.wt-input textarea{font:inherit;border:1px solid #d1d9e4;border-radius:8px;padding:7px 9px;background:#fff;}
  .wt-input textarea{min-height:86px;resize:vertical;}
  .wt-btn{display:inline-block;border:1px solid #c8d2df;border-radius:8px;padding:7px 11px;background:#fff;font-weight:600;color:#263142;}
  .wt-btn.primary{background:#0f766e;border-color:#0f766e;color:#f0fdfa;}
  .wt-choice{display:inline-flex;align-items:center;gap:6px;color:#374151;}
  .wt-link{color:#1d4ed8;text-decoration:underline;}
  .wt-icon{display:inline-block;padding:2px 7px;border:1px solid #d5dce7;border-radius:999px;background:#f3f6fb;font-size:12px;color:#334155;}
  .wt-badge{display:inline-block;padding:2px 8px;border-radius:999px;background:#e9eef9;color:#3248a8;font-size:12px;font-weight:600;}
  .wt-table{width:100%;border-collapse:collapse;background:#fff;border:1px solid #d6dce6;}
  .wt-table th,.wt-table td{border:1px solid #d6dce6;padding:6px 8px;vertical-align:top;text-align:left;}
  .wt-table th{background:#f1f5f9;font-weight:700;}
  hr{border:0;border-top:1px solid #d7dce4;margin:4px 0;}
  h1,h2,h3,h4,h5,h6{margin:2px 0 0;line-height:1.2;}
  p{margin:0;}
  ul,ol{margin:0;padding-left:20px;}
</style>
"""


def render_html_document(tree: RootNode) -> str:
    """Render the complete HTML document (embedded stylesheet included)."""
    return (
        '<!doctype html><html><head><meta charset="utf-8" />'
        f"{STYLESHEET}</head><body>{render_node(tree)}</body></html>"
    )


def render_node(node: RootNode | Node) -> str:
    """Render one node and its subtree as an HTML fragment."""
    if isinstance(node, RootNode):
        return f'<div class="root">{_render_children(node.children)}</div>'
    if isinstance(node, GroupNode):
        return f'<div class="group">{_render_children(node.children)}</div>'
    if isinstance(node, SectionNode):
        return _render_section(node)
    if isinstance(node, RowNode):
        return render_row(node.text)
    raise TypeError(f"Unsupported node: {type(node).__name__}")


def semantic_tag(name: str) -> str:
    """Pick the HTML tag for a section name, defaulting to ``section``."""
    lowered = name.lower()
    return lowered if lowered in SEMANTIC_TAGS else "section"


def split_cells(line: str) -> list[str]:
    """Split a row on ``|`` outside double quotes, dropping empty cells."""
    cells: list[str] = []
    current: list[str] = []
    in_quote = False
    for char in line:
        if char == '"':
            in_quote = not in_quote
        if char == "|" and not in_quote:
            cells.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    cells.append("".join(current).strip())
    return [cell for cell in cells if cell]


def parse_table_cells(text: str) -> list[str]:
    """Split a ``| a | b |`` table row into trimmed cells."""
    return [cell.strip() for cell in text.strip()[1:-1].split("|")]


def is_separator_row(cells: Sequence[str]) -> bool:
    """Return True for a header separator such as ``|---|:---:|``."""
    return all(_SEPARATOR_CELL_RE.match(cell) for cell in cells)


def render_row(text: str) -> str:
    """Render one non-table row as a flex row of widget cells."""
    text = text.strip()
    if "|" in text and not is_table_row(text):
        cells = "".join(
            f'<div class="wt-cell">{segment_html(cell)}</div>' for cell in split_cells(text)
        )
        return f'<div class="wt-row">{cells}</div>'
    return f'<div class="wt-row"><div class="wt-cell wt-grow">{segment_html(text)}</div></div>'


def render_table(rows: Sequence[str]) -> str:
    """Merge consecutive table rows into one ``<table>``.

    The first row is the header. A second row made only of dash runs is a
    separator and is dropped; otherwise it is an ordinary body row.
    """
    parsed = [parse_table_cells(row) for row in rows]
    if not parsed:
        return ""
    header = parsed[0]
    body_start = 2 if len(parsed) > 1 and is_separator_row(parsed[1]) else 1

    head_cells = "".join(f"<th>{inline_text_html(cell)}</th>" for cell in header)
    body_rows = "".join(
        "<tr>" + "".join(f"<td>{inline_text_html(cell)}</td>" for cell in row) + "</tr>"
        for row in parsed[body_start:]
    )
    return (
        f'<table class="wt-table"><thead><tr>{head_cells}</tr></thead>'
        f"<tbody>{body_rows}</tbody></table>"
    )


def _render_section(section: SectionNode) -> str:
    tag = semantic_tag(section.name)
    css_class = "section frame" if section.ratio else "section"
    style = f' style="flex:{section.ratio.n} 1 0%"' if section.ratio else ""
    return (
        f'<{tag} class="{css_class}"{style} data-wt="{escape_html(section.name)}">'
        f"{_render_children(section.children)}</{tag}>"
    )


def _render_children(children: Sequence[Node]) -> str:
    out: list[str] = []
    table_rows: list[str] = []
    for child in children:
        if isinstance(child, RowNode) and is_table_row(child.text):
            table_rows.append(child.text)
            continue
        if table_rows:
            out.append(render_table(table_rows))
            table_rows = []
        out.append(render_node(child))
    if table_rows:
        out.append(render_table(table_rows))
    return "".join(out)
