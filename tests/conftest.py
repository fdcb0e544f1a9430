"""Test setup for wiretext."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


FORM_SOURCE = """=main
  # Create Account
  ^first_name | ^last_name
  ^email
  ^password
  [] "I agree to terms"
  !Cancel | !!"Create account"
"""

TABLE_SOURCE = """=main
  # Contacts
  | Name | Email | Status |
  |------|-------|--------|
  | Jane | jane@example.com | `(Active)` |
  | Bob | bob@example.com | `(Pending)` |
"""

COLUMNS_SOURCE = """[
=left 1/2
  Hello
=right 1/2
  World
]
"""

NESTED_SOURCE = """[
=aside 1/6
  i:new "New thread"
  ---
  # Threads
  _Activate wiretext skill_ `(7m)`

=section 5/6
  [
  =threads 1/4
    =threads_header
      # Open | i:filter
  =chat 3/4
    =composer
      ^^ "Ask for follow-up changes"
      [] "Use plan mode" | [] "Run tools automatically"
      !Attach | !!Send
  ]
]
"""


@pytest.fixture
def form_source() -> str:
    """The account creation form."""
    return FORM_SOURCE


@pytest.fixture
def table_source() -> str:
    """A contacts table with a header separator row."""
    return TABLE_SOURCE


@pytest.fixture
def columns_source() -> str:
    """Two equally weighted columns."""
    return COLUMNS_SOURCE


@pytest.fixture
def nested_source() -> str:
    """A sidebar plus a nested group of ratioed columns."""
    return NESTED_SOURCE
