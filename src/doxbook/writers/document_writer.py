"""Document persistence into the output directory."""

import asyncio
import logging
from pathlib import Path

from doxbook.concurrency import run_bounded
from doxbook.exceptions import OutputCollisionError
from schemas.source import ExtractedDocument

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".md"


def output_path(output_dir: Path, source_path: str, extension: str = DEFAULT_EXTENSION) -> Path:
    """Map a source path to its document path.

    The source's directories are dropped and its extension replaced:
    ``a/b/widget.foo`` becomes ``<output_dir>/widget.md``.

    Args:
        output_dir: Directory receiving the documents
        source_path: Path of the originating source file
        extension: Document extension, including the leading "."

    Returns:
        Path of the document inside ``output_dir``
    """
    return Path(output_dir) / f"{Path(source_path).stem}{extension}"


async def write_document(path: Path, contents: bytes) -> Path:
    """Write one document to disk and return its path."""
    await asyncio.to_thread(path.write_bytes, contents)
    logger.debug(f"Wrote {path}")
    return path


async def persist(
    output_dir: Path,
    documents: list[ExtractedDocument],
    extension: str = DEFAULT_EXTENSION,
    concurrency: int | None = None,
) -> list[Path]:
    """Write every document into ``output_dir``.

    Args:
        output_dir: Existing directory receiving the documents
        documents: Rendered documents
        extension: Document extension, including the leading "."
        concurrency: Maximum number of writes in flight

    Returns:
        Written paths, in the same order as ``documents``

    Raises:
        OutputCollisionError: If two documents map to the same output path;
            nothing is written in that case
        OSError: If any document cannot be written
    """
    targets: dict[Path, str] = {}
    for document in documents:
        path = output_path(output_dir, document.path, extension)
        if path in targets:
            raise OutputCollisionError(
                f"{targets[path]} and {document.path} both map to {path}",
                path=str(path),
                sources=[targets[path], document.path],
            )
        targets[path] = document.path

    async def write(item: tuple[Path, ExtractedDocument]) -> Path:
        path, document = item
        return await write_document(path, document.contents)

    return await run_bounded(write, list(zip(targets, documents)), concurrency)
