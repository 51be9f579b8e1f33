"""Markdown Transformer for rendering doc comments as API documents.

Parses the doc comments of a source file and renders them through a
Jinja2 template into a Markdown page.
"""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateError

from doxbook.exceptions import ExtractionError, RenderError
from doxbook.parsers.comment_parser import parse_comments
from schemas.comment import CommentBlock
from schemas.source import ExtractedDocument, SourceFile

from .filters import FILTERS
from .transformer import SourceTransformer

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


class MarkdownTransformer(SourceTransformer):
    """Transform commented source files into Markdown API pages.

    The MarkdownTransformer:
    1. Decodes the source bytes as UTF-8
    2. Parses every ``/** ... */`` doc block
    3. Drops private and ignored blocks
    4. Renders the rest through a Jinja2 template, titled with the file stem

    Attributes:
        template_name: Name of the Jinja2 template file
        templates_dir: Directory containing templates
        include_title: Whether to render a top-level "# <stem>" heading
    """

    def __init__(
        self,
        template_name: str = "api.md.j2",
        templates_dir: Path | None = None,
        include_title: bool = True,
    ):
        """Initialize the Markdown transformer.

        Args:
            template_name: Name of the Jinja2 template file
            templates_dir: Directory containing templates (default: package templates)
            include_title: Whether to render a top-level heading
        """
        self.template_name = template_name
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.include_title = include_title

        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        for name, func in FILTERS.items():
            self._env.filters[name] = func

    def transform(self, source: SourceFile) -> ExtractedDocument:
        """Render the doc comments of one source file.

        Args:
            source: Loaded source file

        Returns:
            ExtractedDocument with UTF-8 Markdown contents

        Raises:
            ExtractionError: If the file is not UTF-8 text
            CommentSyntaxError: If a doc comment is malformed
            RenderError: If the template fails to render
        """
        try:
            text = source.contents.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ExtractionError(f"not valid UTF-8 text: {e}", path=source.path) from e

        comments = parse_comments(text)
        title = Path(source.path).stem if self.include_title else None
        markdown = self.render(comments, title=title)
        logger.debug(f"Rendered {len(comments)} comments from {source.path}")

        return ExtractedDocument(contents=markdown.encode("utf-8"), path=source.path)

    def render(self, comments: list[CommentBlock], title: str | None = None) -> str:
        """Render parsed comments to Markdown.

        Args:
            comments: Parsed doc blocks in file order
            title: Optional page title

        Returns:
            Markdown text ending in a single newline (empty if nothing to render)

        Raises:
            RenderError: If the template cannot be loaded or rendered
        """
        visible = [c for c in comments if not c.is_private and not c.ignore]
        try:
            template = self._env.get_template(self.template_name)
            markdown = template.render(title=title, comments=visible)
        except TemplateError as e:
            raise RenderError(f"template {self.template_name} failed: {e}") from e

        markdown = markdown.strip()
        return f"{markdown}\n" if markdown else ""
