"""Pytest fixtures for doxbook tests."""

import json
import logging

import pytest

from doxbook.book.host import BOOK_CONFIG_FILE, BOOK_STATE_FILE, Book
from schemas.book import Article, BookState, Chapter, NavigationSegment, Summary
from schemas.config import DoxConfig


VALID_SOURCE = """\
/**
 * Widget module.
 */

/**
 * Create a widget.
 *
 * Widgets render themselves into a target element.
 *
 * @param {String} name widget name
 * @param {Object} options settings
 * @return {Widget}
 * @api public
 */
function Widget(name, options) {
  this.name = name;
}

/**
 * Render the widget.
 *
 * @param {Element|String} target where to render
 * @return {Widget} this instance
 */
Widget.prototype.render = function(target) {
  return this;
};

/**
 * Internal helper.
 *
 * @api private
 */
function helper() {}
"""

UNTERMINATED_SOURCE = """\
var x = 1;

/**
 * Broken comment that never ends
 *
function broken() {}
"""

UNBALANCED_TYPE_SOURCE = """\
/**
 * Broken type expression.
 *
 * @param {String name the name
 */
function broken(name) {}
"""


@pytest.fixture
def valid_source():
    return VALID_SOURCE


@pytest.fixture
def unterminated_source():
    return UNTERMINATED_SOURCE


@pytest.fixture
def unbalanced_type_source():
    return UNBALANCED_TYPE_SOURCE


@pytest.fixture
def source_tree(tmp_path):
    """Create a src/ directory with one valid and one malformed source file."""
    src = tmp_path / "src"
    src.mkdir()
    (src / "a.js").write_text(VALID_SOURCE)
    (src / "b.js").write_text(UNTERMINATED_SOURCE)
    return src


@pytest.fixture
def sample_state():
    """Book state with two chapters and a five-segment navigation chain."""
    chapters = [
        Chapter(
            level="1",
            title="Introduction",
            path="README.md",
            articles=[Article(path="intro/setup.md", level="1.1", title="Setup")],
        ),
        Chapter(
            level="2",
            title="API",
            path="api/README.md",
            articles=[Article(path="api/old.md", level="2.1", title="old")],
        ),
    ]
    order = [
        ("README.md", "1", "Introduction"),
        ("intro/setup.md", "1.1", "Setup"),
        ("intro/usage.md", "1.2", "Usage"),
        ("api/README.md", "2", "API"),
        ("api/old.md", "2.1", "old"),
    ]
    navigation = {}
    for i, (path, level, title) in enumerate(order):
        navigation[path] = NavigationSegment(
            index=i + 1,
            level=level,
            title=title,
            path=path,
            introduction=(i == 0),
            prev=order[i - 1][0] if i > 0 else None,
            next=order[i + 1][0] if i + 1 < len(order) else None,
        )
    return BookState(summary=Summary(chapters=chapters), navigation=navigation)


@pytest.fixture
def book_root(tmp_path, source_tree, sample_state):
    """Create a book directory with book.json and a state file."""
    root = tmp_path / "book"
    root.mkdir()
    (root / BOOK_CONFIG_FILE).write_text(
        json.dumps({"pluginsConfig": {"doxme": {"src": str(source_tree / "*.js")}}})
    )
    (root / BOOK_STATE_FILE).write_text(sample_state.model_dump_json(indent=2))
    return root


@pytest.fixture
def make_book(tmp_path, sample_state):
    """Factory building an in-memory Book over a fresh copy of sample_state."""

    def _make(src: str, **options) -> Book:
        root = tmp_path / "book"
        root.mkdir(exist_ok=True)
        config = DoxConfig(src=src, **options)
        state = sample_state.model_copy(deep=True)
        return Book.from_state(root, config, state, log=logging.getLogger("doxbook.test"))

    return _make
