"""Book metadata: stores, summary appending and navigation linking."""

from .host import Book, load_config, load_state, parse_config, save_state
from .navigation import append_to_navigation, unlink
from .stores import (
    InMemoryNavigationStore,
    InMemorySummaryStore,
    NavigationStore,
    SummaryStore,
)
from .summary import ArticlesPolicy, append_to_summary, build_article

__all__ = [
    "ArticlesPolicy",
    "Book",
    "InMemoryNavigationStore",
    "InMemorySummaryStore",
    "NavigationStore",
    "SummaryStore",
    "append_to_navigation",
    "append_to_summary",
    "build_article",
    "load_config",
    "load_state",
    "parse_config",
    "save_state",
    "unlink",
]
