"""Custom exceptions for wiretext."""

from __future__ import annotations


class WiretextError(Exception):
    """Base exception for wiretext operations."""


class WiretextSyntaxError(WiretextError):
    """Error while parsing WireText source.

    Attributes:
        line: 1-based line number of the offending source line.
        message: Human readable description, without the line prefix.
    """

    def __init__(self, line: int, message: str) -> None:
        self.line = line
        self.message = message
        super().__init__(f"line {line}: {message}")


class UnmatchedCloseError(WiretextSyntaxError):
    """A ']' line with no open group on the stack."""


class InvalidNestingError(WiretextSyntaxError):
    """A child was attached under row content."""


class TreeLoadError(WiretextError):
    """Error while loading a serialized tree."""
