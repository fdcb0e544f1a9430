"""Parse WireText source into a tree of sections, groups and rows."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Literal

from wiretext.config import INDENT_STEP
from wiretext.exceptions import InvalidNestingError, UnmatchedCloseError
from wiretext.schemas import GroupNode, Node, Ratio, RootNode, RowNode, SectionNode

_SECTION_RE = re.compile(r"^(\S+)(?:\s+(\d+)/(\d+))?$")
_LINE_BREAK_RE = re.compile(r"\r\n?")

OPEN_GROUP = "["
CLOSE_GROUP = "]"
SECTION_MARKER = "="

_NESTABLE_KINDS = {"root", "section", "group"}


@dataclass
class _OpenNode:
    """A node still accepting children while it sits on the parse stack."""

    kind: Literal["root", "section", "group"]
    indent: int
    name: str = ""
    ratio: Ratio | None = None
    children: list[Node] = field(default_factory=list)

    def freeze(self) -> Node:
        children = tuple(self.children)
        if self.kind == "section":
            return SectionNode(name=self.name, ratio=self.ratio, children=children)
        return GroupNode(children=children)

    def freeze_root(self) -> RootNode:
        return RootNode(children=tuple(self.children))


def parse_wiretext(source: str) -> RootNode:
    """Parse WireText source into a frozen tree.

    Nesting comes from 2-space indentation and from explicit ``[``/``]``
    groups. Groups close only on ``]``; indentation never closes them.

    Raises:
        UnmatchedCloseError: On a ``]`` with no open group.
        InvalidNestingError: On an attempt to nest under row content.
    """
    lines = _LINE_BREAK_RE.sub("\n", source).split("\n")
    stack: list[_OpenNode] = [_OpenNode(kind="root", indent=-1)]

    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip()
        if not line.strip():
            continue

        indent = indent_level(line)
        trimmed = line.lstrip()

        if trimmed == CLOSE_GROUP:
            _close_group(stack, line_no)
            continue

        _collapse_to_indent(stack, indent)
        parent = stack[-1]
        if parent.kind not in _NESTABLE_KINDS:
            raise InvalidNestingError(line_no, "cannot nest under row content")

        if trimmed == OPEN_GROUP:
            stack.append(_OpenNode(kind="group", indent=indent))
        elif trimmed.startswith(SECTION_MARKER):
            name, ratio = parse_section_header(trimmed)
            stack.append(_OpenNode(kind="section", indent=indent, name=name, ratio=ratio))
        else:
            parent.children.append(RowNode(text=trimmed))

    while len(stack) > 1:
        _pop_and_attach(stack)

    return stack[0].freeze_root()


def indent_level(line: str) -> int:
    """Count leading spaces in steps of two."""
    return (len(line) - len(line.lstrip(" "))) // INDENT_STEP


def parse_section_header(line: str) -> tuple[str, Ratio | None]:
    """Split ``=NAME`` or ``=NAME N/D`` into a name and an optional ratio.

    Anything else keeps the whole remainder as the name. Zero in either part
    of the ratio, or a ratio too long to convert, is not a ratio.
    """
    rest = line[len(SECTION_MARKER) :].strip()
    match = _SECTION_RE.match(rest)
    if not match:
        return rest, None
    name, numerator, denominator = match.groups()
    if numerator is None:
        return name, None
    try:
        n, d = int(numerator), int(denominator)
    except ValueError:
        # Past the interpreter's int-string digit limit.
        return rest, None
    if n == 0 or d == 0:
        return rest, None
    return name, Ratio(n=n, d=d)


def _pop_and_attach(stack: list[_OpenNode]) -> _OpenNode:
    top = stack.pop()
    stack[-1].children.append(top.freeze())
    return top


def _collapse_to_indent(stack: list[_OpenNode], indent: int) -> None:
    while len(stack) > 1:
        top = stack[-1]
        if top.kind == "group" or indent > top.indent:
            return
        _pop_and_attach(stack)


def _close_group(stack: list[_OpenNode], line_no: int) -> None:
    while len(stack) > 1:
        if _pop_and_attach(stack).kind == "group":
            return
    raise UnmatchedCloseError(line_no, "encountered ']' without matching '['")
