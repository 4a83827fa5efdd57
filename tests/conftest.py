"""Test setup for html_extractor."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def simple_hierarchy_html() -> str:
    """Three paragraphs under an h1 > h2 > h3 chain."""
    return """
    <h1>Foo</h1>
    <p>First paragraph</p>
    <h2>Bar</h2>
    <p>Second paragraph</p>
    <h3>Baz</h3>
    <p>Third paragraph</p>
    """


@pytest.fixture
def wrapped_hierarchy_html() -> str:
    """The same chain as simple_hierarchy_html, nested in structural wrappers."""
    return """
    <header>
      <h1 name="anchor">Foo</h1>
      <p>First paragraph</p>
    </header>
    <div>
      <div>
        <div>
          <h2>Bar</h2>
          <p>Second paragraph</p>
        </div>
      </div>
      <div>
        <h3 name="subanchor">Baz</h3>
        <p>Third paragraph</p>
      </div>
    </div>
    """
