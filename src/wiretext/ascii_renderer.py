"""Lay out a WireText tree as fixed-width ASCII text."""

from __future__ import annotations

import math
from typing import Sequence

from wiretext.config import COLUMN_GAP, EMPTY_SECTION_PLACEHOLDER, MIN_COLUMN_WIDTH
from wiretext.normalize import normalize_row_text
from wiretext.schemas import GroupNode, Node, RootNode, RowNode, SectionNode
from wiretext.text_wrap import wrap_line

_FRAME_CORNER = "+"
_FRAME_EDGE = "|"
_FRAME_RULE = "-"


def render_ascii(tree: RootNode | Node, width: int) -> list[str]:
    """Render a tree to lines of at most ``width`` columns.

    Callers clamp ``width`` to a sane minimum; every column is still floored
    at 18 characters, so narrow widths may overflow.
    """
    if isinstance(tree, RootNode):
        return trim_blank(
            [line for child in tree.children for line in render_ascii(child, width)]
        )
    if isinstance(tree, GroupNode):
        return _render_group(tree, width)
    if isinstance(tree, SectionNode):
        return _render_section(tree, width)
    if isinstance(tree, RowNode):
        return wrap_line(normalize_row_text(tree.text), max(width, MIN_COLUMN_WIDTH))
    raise TypeError(f"Unsupported node: {type(tree).__name__}")


def column_widths(children: Sequence[Node], total: int) -> list[int]:
    """Distribute ``total`` columns among side-by-side children.

    Ratioed sections share the width in proportion to their ratios, the rest
    split it evenly. The remainder is handed out one column at a time; when
    every column sits at the floor, the overflow is accepted.
    """
    count = max(len(children), 1)
    ratios = [
        child.ratio.value if isinstance(child, SectionNode) and child.ratio else None
        for child in children
    ]
    ratio_sum = sum(ratio for ratio in ratios if ratio is not None)

    widths: list[int] = []
    for ratio in ratios:
        if ratio is not None and ratio_sum > 0:
            widths.append(max(MIN_COLUMN_WIDTH, math.floor(total * ratio / ratio_sum)))
        else:
            widths.append(max(MIN_COLUMN_WIDTH, total // count))

    used = sum(widths) + max(len(children) - 1, 0) * COLUMN_GAP
    while used < total:
        widths[(total - used) % len(widths)] += 1
        used += 1
    while used > total:
        index = (used - total) % len(widths)
        if widths[index] <= MIN_COLUMN_WIDTH:
            break
        widths[index] -= 1
        used -= 1
    return widths


def should_frame_section(section: SectionNode) -> bool:
    """Frame ratioed sections, except wrappers around a group of ratioed sections."""
    if section.ratio is None:
        return False
    if len(section.children) == 1 and isinstance(section.children[0], GroupNode):
        inner = section.children[0].children
        if inner and all(
            isinstance(child, SectionNode) and child.ratio for child in inner
        ):
            return False
    return True


def frame(lines: Sequence[str], width: int) -> list[str]:
    """Draw a ``+--+`` border around lines, wrapping them to the interior width."""
    interior = max(width, MIN_COLUMN_WIDTH) - 2
    border = _FRAME_CORNER + _FRAME_RULE * interior + _FRAME_CORNER
    body: list[str] = []
    for line in lines:
        if line.startswith((_FRAME_CORNER, _FRAME_EDGE)):
            parts = [line[:interior]]
        else:
            parts = wrap_line(line, interior)
        body.extend(f"{_FRAME_EDGE}{part.ljust(interior)}{_FRAME_EDGE}" for part in parts)
    return [border, *body, border]


def trim_blank(lines: Sequence[str]) -> list[str]:
    """Drop leading and trailing whitespace-only lines."""
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return list(lines[start:end])


def _render_group(group: GroupNode, width: int) -> list[str]:
    if not group.children:
        return [""]
    if len(group.children) == 1:
        return trim_blank(render_ascii(group.children[0], width))

    widths = column_widths(group.children, width)
    blocks = [
        trim_blank(render_ascii(child, child_width)) or [""]
        for child, child_width in zip(group.children, widths)
    ]
    return _join_columns(blocks, widths)


def _render_section(section: SectionNode, width: int) -> list[str]:
    framed = should_frame_section(section)
    inner_width = max(width - 2, MIN_COLUMN_WIDTH) if framed else max(width, MIN_COLUMN_WIDTH)

    stacked: list[str] = []
    for index, child in enumerate(section.children):
        if index:
            stacked.append("")
        stacked.extend(render_ascii(child, inner_width))

    inner = trim_blank(stacked) or [EMPTY_SECTION_PLACEHOLDER]
    return frame(inner, width) if framed else inner


def _join_columns(blocks: Sequence[Sequence[str]], widths: Sequence[int]) -> list[str]:
    height = max(len(block) for block in blocks)
    padded = [_pad_to_height(block, height, w) for block, w in zip(blocks, widths)]
    gap = " " * COLUMN_GAP
    return [gap.join(column[row] for column in padded).rstrip() for row in range(height)]


def _pad_to_height(lines: Sequence[str], height: int, width: int) -> list[str]:
    out = [line[:width].ljust(width) for line in lines]
    out.extend(" " * width for _ in range(height - len(out)))
    return out
