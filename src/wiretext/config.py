"""Local configuration for wiretext."""

from __future__ import annotations

import os


DEFAULT_WIDTH = 120
DEFAULT_MIN_WIDTH = 60

# Language constants; these shape the layout and are not overridable.
MIN_COLUMN_WIDTH = 18
COLUMN_GAP = 3
INDENT_STEP = 2
EMPTY_SECTION_PLACEHOLDER = "(empty)"
KNOWN_INPUT_TYPES = frozenset(
    {
        "text",
        "password",
        "date",
        "time",
        "phone",
        "email",
        "number",
        "url",
        "search",
        "tel",
        "color",
        "file",
        "range",
    }
)

WIRETEXT_DEFAULT_WIDTH = int(os.getenv("WIRETEXT_DEFAULT_WIDTH", str(DEFAULT_WIDTH)))
WIRETEXT_MIN_WIDTH = int(os.getenv("WIRETEXT_MIN_WIDTH", str(DEFAULT_MIN_WIDTH)))
