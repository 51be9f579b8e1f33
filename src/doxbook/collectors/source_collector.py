"""Source discovery: glob expansion and file loading."""

import asyncio
import glob
import logging
from pathlib import Path

from doxbook.concurrency import run_bounded
from schemas.source import SourceFile

logger = logging.getLogger(__name__)


async def find_sources(pattern: str) -> list[str]:
    """Expand a glob pattern into matching file paths.

    ``**`` matches across directories. Directories matched by the pattern
    are skipped. The order is whatever the filesystem returns.
    """
    matches = await asyncio.to_thread(glob.glob, pattern, recursive=True)
    return [m for m in matches if Path(m).is_file()]


async def read_source(path: str) -> SourceFile:
    """Read one file fully into memory."""
    contents = await asyncio.to_thread(Path(path).read_bytes)
    return SourceFile(contents=contents, path=path)


async def collect(pattern: str, concurrency: int | None = None) -> list[SourceFile]:
    """Load every file matching a glob pattern.

    Args:
        pattern: Glob pattern (relative to the working directory or absolute)
        concurrency: Maximum number of reads in flight

    Returns:
        SourceFiles in glob match order

    Raises:
        OSError: If any matched file cannot be read
    """
    paths = await find_sources(pattern)
    logger.debug(f"Pattern {pattern} matched {len(paths)} files")
    return await run_bounded(read_source, paths, concurrency)
