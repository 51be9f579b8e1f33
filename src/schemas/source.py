"""Transient records that flow between pipeline stages.

Both records live only for the duration of a single run:

    SourceFile ──extract──▶ ExtractedDocument ──persist──▶ <output_dir>/<stem>.md
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceFile:
    """A source file loaded from disk.

    Attributes:
        contents: Raw bytes of the file
        path: Path the file was read from, as matched by the glob
    """

    contents: bytes
    path: str


@dataclass(frozen=True)
class ExtractedDocument:
    """Rendered documentation for one source file.

    Attributes:
        contents: Rendered Markdown, encoded as UTF-8
        path: Path of the originating source file (not the output path)
    """

    contents: bytes
    path: str
