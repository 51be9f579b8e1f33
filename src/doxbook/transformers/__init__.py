"""Transformers for rendering source comments as documents."""

from .extractor import extract
from .markdown_transformer import MarkdownTransformer
from .transformer import SourceTransformer

__all__ = [
    "SourceTransformer",
    "MarkdownTransformer",
    "extract",
]
