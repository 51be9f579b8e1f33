"""Parsers for structured source comments."""

from .comment_parser import parse_block, parse_comments, parse_context, parse_tag, parse_types

__all__ = ["parse_block", "parse_comments", "parse_context", "parse_tag", "parse_types"]
