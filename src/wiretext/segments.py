"""Map inline WireText segments to small HTML widget fragments.

Dispatch is an ordered table of ``(pattern, builder)`` pairs; the first
pattern that matches a segment decides its widget. The order matters:
headings are tried before checkboxes, primary buttons before plain ones,
labelled inputs before bare ones.
"""

from __future__ import annotations

import re
from html import escape
from typing import Callable

from wiretext.config import KNOWN_INPUT_TYPES
from wiretext.normalize import humanize_field

SegmentBuilder = Callable[[re.Match[str]], str]

_INLINE_SPLIT_RE = re.compile(r"(_[^_]+_|`\([^)]+\)`)")
_LINK_RE = re.compile(r"^_([^_]+)_$")
_BADGE_RE = re.compile(r"^`\(([^)]+)\)`$")


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` for element text and attribute values."""
    return escape(text, quote=True)


def inline_text_html(raw: str) -> str:
    """Render running text, turning ``_links_`` and `` `(badges)` `` into markup."""
    out: list[str] = []
    for part in _INLINE_SPLIT_RE.split(raw.strip()):
        if not part:
            continue
        link = _LINK_RE.match(part)
        if link:
            out.append(_link(link.group(1)))
            continue
        badge = _BADGE_RE.match(part)
        if badge:
            out.append(_badge(badge.group(1)))
            continue
        out.append(escape_html(part))
    return "".join(out)


def segment_html(segment: str) -> str:
    """Render one trimmed segment through the first matching builder."""
    text = segment.strip()
    if not text:
        return ""
    for pattern, builder in SEGMENT_RULES:
        match = pattern.match(text)
        if match:
            return builder(match)
    return f"<p>{inline_text_html(text)}</p>"


def _link(label: str) -> str:
    return f'<a href="#" class="wt-link">{escape_html(label)}</a>'


def _badge(label: str) -> str:
    return f'<span class="wt-badge">{escape_html(label)}</span>'


def _input_field(label: str, control: str) -> str:
    return f'<div class="wt-input"><label>{escape_html(label)}</label>{control}</div>'


def _textarea(placeholder: str | None) -> str:
    return f'<textarea placeholder="{escape_html(placeholder or "")}"></textarea>'


def _input(input_type: str, placeholder: str | None) -> str:
    return f'<input type="{input_type}" placeholder="{escape_html(placeholder or "")}" />'


def _known_input_type(name: str) -> str:
    return name if name in KNOWN_INPUT_TYPES else "text"


def _heading(match: re.Match[str]) -> str:
    level = min(len(match.group(1)), 6)
    return f"<h{level}>{inline_text_html(match.group(2))}</h{level}>"


def _rule(match: re.Match[str]) -> str:
    return "<hr />"


def _bullet_item(match: re.Match[str]) -> str:
    return f"<ul><li>{inline_text_html(match.group(1))}</li></ul>"


def _ordered_item(match: re.Match[str]) -> str:
    return f"<ol><li>{inline_text_html(match.group(1))}</li></ol>"


def _choice(input_type: str) -> SegmentBuilder:
    def build(match: re.Match[str]) -> str:
        checked = " checked" if (match.group(1) or "").lower() == "x" else ""
        label = inline_text_html(match.group(2)) if match.group(2) else ""
        return f'<label class="wt-choice"><input type="{input_type}"{checked} />{label}</label>'

    return build


def _button(primary: bool) -> SegmentBuilder:
    css_class = "wt-btn primary" if primary else "wt-btn"

    def build(match: re.Match[str]) -> str:
        return f'<button class="{css_class}">{escape_html(match.group(1))}</button>'

    return build


def _labelled_textarea(match: re.Match[str]) -> str:
    return _input_field(match.group(1).strip(), _textarea(match.group(2)))


def _default_textarea(match: re.Match[str]) -> str:
    return _input_field("text", _textarea(match.group(1)))


def _labelled_input(match: re.Match[str]) -> str:
    label, field, placeholder = match.groups()
    return _input_field(label.strip(), _input(_known_input_type(field), placeholder))


def _bare_input(match: re.Match[str]) -> str:
    field, placeholder = match.groups()
    label = field if field in KNOWN_INPUT_TYPES else humanize_field(field)
    return _input_field(label, _input(_known_input_type(field), placeholder))


def _icon(match: re.Match[str]) -> str:
    return f'<span class="wt-icon">{escape_html(match.group(1))}</span>'


def _badge_only(match: re.Match[str]) -> str:
    return _badge(match.group(1))


def _link_only(match: re.Match[str]) -> str:
    return _link(match.group(1))


SEGMENT_RULES: tuple[tuple[re.Pattern[str], SegmentBuilder], ...] = (
    (re.compile(r"^(#{1,6})\s+(.+)$"), _heading),
    (re.compile(r"^---$"), _rule),
    (re.compile(r"^-\s+(.+)$"), _bullet_item),
    (re.compile(r"^\d+\.\s+(.+)$"), _ordered_item),
    (re.compile(r"^\[(x| )?\]\s*(.+)?$", re.IGNORECASE), _choice("checkbox")),
    (re.compile(r"^\((x| )?\)\s*(.+)?$", re.IGNORECASE), _choice("radio")),
    (re.compile(r'^!!"([^"]+)"$'), _button(primary=True)),
    (re.compile(r"^!!([^\s|]+)$"), _button(primary=True)),
    (re.compile(r'^!"([^"]+)"$'), _button(primary=False)),
    (re.compile(r"^!([^\s|]+)$"), _button(primary=False)),
    (re.compile(r'^([^:]+):\s*\^\^\s*(?:"([^"]*)")?$'), _labelled_textarea),
    (re.compile(r'^\^\^\s*(?:"([^"]*)")?$'), _default_textarea),
    (re.compile(r'^([^:]+):\s*\^([a-zA-Z0-9_]+)\s*(?:"([^"]*)")?$'), _labelled_input),
    (re.compile(r'^\^([a-zA-Z0-9_]+)\s*(?:"([^"]*)")?$'), _bare_input),
    (re.compile(r"^i:([a-zA-Z0-9_-]+)$"), _icon),
    (re.compile(r"^`\(([^)]+)\)`$"), _badge_only),
    (re.compile(r"^_([^_]+)_$"), _link_only),
)
