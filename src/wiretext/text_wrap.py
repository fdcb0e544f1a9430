"""Greedy word wrapping for fixed-width ASCII output."""

from __future__ import annotations

from collections import deque


def wrap_line(text: str, width: int) -> list[str]:
    """Wrap text greedily to ``width`` columns.

    Words longer than ``width`` are hard-split into ``width``-sized chunks and
    packed like ordinary words. Always returns at least one line.
    """
    text = text or ""
    if not text:
        return [""]
    if width <= 1:
        return [text[:1]]

    words = deque(text.split())
    lines: list[str] = []
    current = ""

    while words:
        word = words.popleft()
        if not current:
            if len(word) <= width:
                current = word
            else:
                lines.append(word[:width])
                words.appendleft(word[width:])
            continue
        candidate = f"{current} {word}"
        if len(candidate) <= width:
            current = candidate
        else:
            lines.append(current)
            current = ""
            words.appendleft(word)

    if current:
        lines.append(current)
    return lines or [""]
