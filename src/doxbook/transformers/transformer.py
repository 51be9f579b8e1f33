"""Base class for source transformers.

A transformer turns one loaded SourceFile into one ExtractedDocument. It
raises on failure; isolating failures per file is the extractor's job.
"""

from abc import ABC, abstractmethod

from schemas.source import ExtractedDocument, SourceFile


class SourceTransformer(ABC):
    """Abstract base class for source-to-document transformers."""

    @abstractmethod
    def transform(self, source: SourceFile) -> ExtractedDocument:
        """Transform a source file into a rendered document.

        Args:
            source: Loaded source file

        Returns:
            ExtractedDocument carrying the source path forward unchanged

        Raises:
            ExtractionError: If the source cannot be parsed or rendered
        """
        pass
