"""Collectors for preparing the output directory and loading sources."""

from .directory import clean, ensure_dir
from .source_collector import collect, find_sources, read_source

__all__ = ["clean", "collect", "ensure_dir", "find_sources", "read_source"]
