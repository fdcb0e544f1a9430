"""Shared HTML utilities for rendered WireText documents."""

from __future__ import annotations

from collections import Counter

try:
    from bs4 import BeautifulSoup
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML post-processing (pip install beautifulsoup4)."
    ) from exc


def prettify_document(html: str) -> str:
    """Re-indent a rendered document for reading."""
    soup = BeautifulSoup(html, "lxml")
    return soup.prettify()


def collect_markup_stats(html: str) -> tuple[Counter, Counter]:
    """Count tags and CSS classes in a rendered document."""
    soup = BeautifulSoup(html, "lxml")
    tags: Counter = Counter()
    classes: Counter = Counter()

    body = soup.body or soup
    for tag in body.find_all(True):
        tags[tag.name] += 1
        for cls in tag.get("class", []):
            classes[cls] += 1
    return tags, classes
