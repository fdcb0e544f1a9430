"""Rewrite WireText inline markup into plain text for the ASCII layout."""

from __future__ import annotations

import re

from wiretext.config import KNOWN_INPUT_TYPES

_HEADING_RE = re.compile(r"^#+\s+")
_BULLET_RE = re.compile(r"^[-*]\s+")
_NUMBERED_RE = re.compile(r"^\d+\.\s+")
_BADGE_RE = re.compile(r"`\(([^)]*)\)`")
_TEXTAREA_PLACEHOLDER_RE = re.compile(r'^\^\^\s+"([^"]+)"$')
_TEXTAREA_RE = re.compile(r"^\^\^$")
_INPUT_RE = re.compile(r"\^([a-zA-Z0-9_]+)")
_PRIMARY_BUTTON_QUOTED_RE = re.compile(r'!!"([^"]+)"')
_BUTTON_QUOTED_RE = re.compile(r'!"([^"]+)"')
_PRIMARY_BUTTON_RE = re.compile(r"!!([^\s|]+)")
_BUTTON_RE = re.compile(r"!([^\s|]+)")
_ICON_RE = re.compile(r"i:([a-zA-Z0-9_\-]+)")
_LINK_RE = re.compile(r"_([^_]+)_")
_TABLE_PIPE_RE = re.compile(r"\s*\|\s*")
_WHITESPACE_RE = re.compile(r"\s+")


def is_table_row(text: str) -> bool:
    """Return True for pipe-delimited table syntax (leading and trailing pipe)."""
    text = text.strip()
    return text.startswith("|") and text.endswith("|")


def humanize_field(name: str) -> str:
    """Turn a field identifier like ``first_name`` into ``first name``."""
    return name.replace("_", " ")


def normalize_row_text(text: str) -> str:
    """Normalize one row of inline markup into plain text.

    The substitutions run in a fixed order; later ones see the output of
    earlier ones.
    """
    text = text.strip()
    table_row = is_table_row(text)

    out = _HEADING_RE.sub("", text)
    out = _BULLET_RE.sub("- ", out)
    out = _NUMBERED_RE.sub("", out)
    out = _BADGE_RE.sub(r"(\1)", out)
    out = _TEXTAREA_PLACEHOLDER_RE.sub(r"[textarea: \1]", out)
    out = _TEXTAREA_RE.sub("[textarea]", out)
    out = _INPUT_RE.sub(_replace_input, out)
    out = _PRIMARY_BUTTON_QUOTED_RE.sub(r"[! \1]", out)
    out = _BUTTON_QUOTED_RE.sub(r"[\1]", out)
    out = _PRIMARY_BUTTON_RE.sub(r"[! \1]", out)
    out = _BUTTON_RE.sub(r"[\1]", out)
    out = _ICON_RE.sub(r"<\1>", out)
    out = _LINK_RE.sub(r"\1", out)

    # Outside tables a pipe only separates cells.
    out = _TABLE_PIPE_RE.sub(" | ", out) if table_row else out.replace("|", " ")
    return _WHITESPACE_RE.sub(" ", out).strip()


def _replace_input(match: re.Match[str]) -> str:
    field = match.group(1)
    if field in KNOWN_INPUT_TYPES:
        return f"[{field}]"
    return f"{humanize_field(field)}: [text]"
