"""Record extraction with per-file failure isolation."""

import logging

from schemas.source import ExtractedDocument, SourceFile

from .markdown_transformer import MarkdownTransformer
from .transformer import SourceTransformer


def extract(
    logger: logging.Logger,
    files: list[SourceFile],
    transformer: SourceTransformer | None = None,
) -> list[ExtractedDocument]:
    """Turn loaded source files into rendered documents.

    A file that fails to parse or render is logged as a warning and left
    out of the result; the rest of the batch is still processed.

    Args:
        logger: Logger receiving one warning per failed file
        files: Loaded source files
        transformer: Transformer to apply (default: MarkdownTransformer)

    Returns:
        Documents for the files that succeeded, in input order
    """
    transformer = transformer or MarkdownTransformer()
    documents: list[ExtractedDocument] = []

    for source in files:
        try:
            documents.append(transformer.transform(source))
        except Exception as e:
            logger.warning(f"Unable to parse {source.path}: {e}")

    return documents
