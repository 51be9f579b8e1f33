"""Pipeline orchestrator for end-to-end documentation generation.

Runs the stages in strict sequence against a host book:

    clean → collect → extract → write → summarize → link

Only extraction tolerates per-file failures. Any other failure ends the
run in the FAILED state with a single logged error; nothing is re-raised
to the host, and stages that already completed are not rolled back.
"""

import inspect
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from doxbook.book.host import Book
from doxbook.book.navigation import append_to_navigation
from doxbook.book.summary import append_to_summary
from doxbook.collectors.directory import clean
from doxbook.collectors.source_collector import collect
from doxbook.exceptions import StageError
from doxbook.transformers.extractor import extract
from doxbook.transformers.markdown_transformer import MarkdownTransformer
from doxbook.transformers.transformer import SourceTransformer
from doxbook.writers.document_writer import persist
from schemas.book import Article, NavigationSegment

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    """Lifecycle of a single pipeline run."""

    IDLE = "idle"
    CLEANING = "cleaning"
    COLLECTING = "collecting"
    EXTRACTING = "extracting"
    WRITING = "writing"
    SUMMARIZING = "summarizing"
    LINKING = "linking"
    DONE = "done"
    FAILED = "failed"


@dataclass
class PipelineResult:
    """Outcome of a pipeline run.

    Attributes:
        state: Final state (DONE or FAILED)
        failed_stage: Stage that failed, if any
        error: Message of the failure, if any
        source_count: Number of source files collected
        documents: Paths of the written documents
        articles: Articles added to the summary
        segments: Segments added to the navigation
    """

    state: PipelineState = PipelineState.IDLE
    failed_stage: PipelineState | None = None
    error: str | None = None
    source_count: int = 0
    documents: list[Path] = field(default_factory=list)
    articles: list[Article] = field(default_factory=list)
    segments: list[NavigationSegment] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.state is PipelineState.DONE


class DocumentationPipeline:
    """Generate API documents for a book and register them in its metadata.

    Attributes:
        book: Host book providing config, stores and logger
        transformer: Transformer applied to each source file
        state: Current lifecycle state
    """

    def __init__(self, book: Book, transformer: SourceTransformer | None = None):
        self.book = book
        self.transformer = transformer or MarkdownTransformer(
            template_name=book.config.template_name
        )
        self.state = PipelineState.IDLE

    @property
    def log(self) -> logging.Logger:
        return self.book.log

    async def run(self) -> PipelineResult:
        """Run every stage once.

        Returns:
            PipelineResult describing what was produced; on failure the
            result carries the failed stage and error message
        """
        result = PipelineResult()
        config = self.book.config
        output_dir = self.book.output_dir

        try:
            await self._stage(
                PipelineState.CLEANING,
                f"Cleaning output directory {output_dir}",
                clean,
                output_dir,
            )

            sources = await self._stage(
                PipelineState.COLLECTING,
                f"Reading sources from {config.src}",
                collect,
                config.src,
                config.concurrency,
            )
            result.source_count = len(sources)

            documents = await self._stage(
                PipelineState.EXTRACTING,
                f"Parsing {len(sources)} files...",
                extract,
                self.log,
                sources,
                self.transformer,
            )

            result.documents = await self._stage(
                PipelineState.WRITING,
                f"Writing {len(documents)} files to {output_dir}",
                persist,
                output_dir,
                documents,
                config.extension,
                config.concurrency,
            )

            result.articles = await self._stage(
                PipelineState.SUMMARIZING,
                f"Adding {len(result.documents)} articles to the summary",
                append_to_summary,
                self.book.summary,
                result.documents,
                config.output_dir,
                config.articles_policy,
            )

            result.segments = await self._stage(
                PipelineState.LINKING,
                f"Linking {len(result.articles)} articles into the navigation",
                append_to_navigation,
                self.book.navigation,
                result.articles,
            )

        except StageError as e:
            self.state = PipelineState.FAILED
            result.state = PipelineState.FAILED
            result.failed_stage = PipelineState(e.stage)
            result.error = e.message
            self.log.error(f"{e.stage} failed: {e.message}")
            return result

        self.state = PipelineState.DONE
        result.state = PipelineState.DONE
        return result

    async def _stage(self, state: PipelineState, message: str, func, *args):
        """Run one stage, logging before and after.

        Raises:
            StageError: Wrapping any exception raised by the stage
        """
        self.state = state
        self.log.info(message)
        try:
            value = func(*args)
            if inspect.isawaitable(value):
                value = await value
        except Exception as e:
            raise StageError(state.value, str(e) or e.__class__.__name__) from e
        self.log.info(f"{state.value.capitalize()} ok")
        return value


async def on_init(book: Book) -> PipelineResult:
    """Book lifecycle hook: regenerate the API documents for ``book``."""
    logger.debug(f"Running documentation pipeline for {book!r}")
    return await DocumentationPipeline(book).run()
