"""Output directory preparation."""

import asyncio
import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


async def ensure_dir(path: Path) -> None:
    """Create a directory and any missing ancestors."""
    await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)


async def clean(path: Path) -> None:
    """Reset a directory so it exists and is empty.

    Removes everything at ``path`` if present, then creates it again.
    A missing directory is not an error.

    Args:
        path: Directory to reset

    Raises:
        NotADirectoryError: If ``path`` exists and is not a directory, or
            is a symbolic link (its target is never emptied)
        OSError: If the directory cannot be removed or created
    """
    path = Path(path)
    if path.is_symlink():
        raise NotADirectoryError(f"Output path is a symbolic link: {path}")
    if path.exists():
        if not path.is_dir():
            raise NotADirectoryError(f"Output path is not a directory: {path}")
        await asyncio.to_thread(shutil.rmtree, path)
        logger.debug(f"Removed {path}")
    await ensure_dir(path)
