"""Schema definitions for doxbook."""

from .book import Article, BookState, Chapter, NavigationSegment, Summary
from .comment import CodeContext, CommentBlock, CommentTag, Description
from .config import DoxConfig
from .source import ExtractedDocument, SourceFile

__all__ = [
    "Article",
    "BookState",
    "Chapter",
    "CodeContext",
    "CommentBlock",
    "CommentTag",
    "Description",
    "DoxConfig",
    "ExtractedDocument",
    "NavigationSegment",
    "SourceFile",
    "Summary",
]
