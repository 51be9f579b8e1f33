"""Writers for persisting rendered documents."""

from .document_writer import DEFAULT_EXTENSION, output_path, persist, write_document

__all__ = ["DEFAULT_EXTENSION", "output_path", "persist", "write_document"]
