"""Host book object and book file loading.

A host book directory looks like:

    <root>/
    ├── book.json          # {"pluginsConfig": {"doxme": {...}}}
    ├── book-state.json    # BookState: summary + navigation
    └── dox/               # generated documents (output_dir)
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from doxbook.exceptions import ConfigurationError
from schemas.book import BookState
from schemas.config import DoxConfig

from .stores import (
    InMemoryNavigationStore,
    InMemorySummaryStore,
    NavigationStore,
    SummaryStore,
)

logger = logging.getLogger(__name__)

BOOK_CONFIG_FILE = "book.json"
BOOK_STATE_FILE = "book-state.json"
PLUGIN_NAME = "doxme"


class Book:
    """The host book as seen by the documentation pipeline.

    Attributes:
        root: Book root directory
        config: Plugin configuration
        summary: Table-of-contents store
        navigation: Navigation-order store
        log: Logger for pipeline progress and failures
        state: Backing BookState when built with ``from_state``
    """

    def __init__(
        self,
        root: Path,
        config: DoxConfig,
        summary: SummaryStore,
        navigation: NavigationStore,
        log: logging.Logger | None = None,
    ):
        self.root = Path(root)
        self.config = config
        self.summary = summary
        self.navigation = navigation
        self.log = log or logging.getLogger("doxbook")
        self.state: BookState | None = None

    def __repr__(self) -> str:
        return f"Book('{self.root}')"

    @property
    def output_dir(self) -> Path:
        return self.root / self.config.output_dir

    @classmethod
    def from_state(
        cls,
        root: Path,
        config: DoxConfig,
        state: BookState,
        log: logging.Logger | None = None,
    ) -> "Book":
        """Build a book whose stores mutate ``state`` in place."""
        book = cls(
            root=root,
            config=config,
            summary=InMemorySummaryStore(state.summary),
            navigation=InMemoryNavigationStore(state.navigation),
            log=log,
        )
        book.state = state
        return book


def parse_config(options: dict) -> DoxConfig:
    """Validate the plugin's options mapping.

    Raises:
        ConfigurationError: If the options are invalid
    """
    try:
        return DoxConfig.model_validate(options)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(loc) for loc in err['loc']) or 'config'}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigurationError(
            f"Invalid {PLUGIN_NAME} configuration: {'; '.join(errors)}", errors=errors
        ) from e


def load_config(root: Path, overrides: dict | None = None) -> DoxConfig:
    """Load the plugin configuration from ``<root>/book.json``.

    Args:
        root: Book root directory
        overrides: Option values taking precedence over the file

    Raises:
        ConfigurationError: If the file is unreadable or the options invalid
    """
    config_path = Path(root) / BOOK_CONFIG_FILE
    options: dict = {}
    if config_path.exists():
        try:
            data = json.loads(config_path.read_text())
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Malformed {config_path}: {e}") from e
        options = dict((data.get("pluginsConfig") or {}).get(PLUGIN_NAME) or {})
    else:
        logger.debug(f"No {BOOK_CONFIG_FILE} in {root}")

    options.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return parse_config(options)


def load_state(state_path: Path) -> BookState:
    """Load book metadata from a JSON state file.

    The file is owned by the host book and must already exist: it holds
    the summary chapters that generated articles are appended to, which
    this package never creates.

    Raises:
        ConfigurationError: If the file is missing or does not validate
    """
    if not state_path.exists():
        raise ConfigurationError(
            f"Book state not found: {state_path} "
            "(it must already exist and list at least one summary chapter)"
        )
    try:
        return BookState.model_validate_json(state_path.read_text())
    except ValidationError as e:
        raise ConfigurationError(f"Invalid book state {state_path}: {e}") from e


def save_state(state: BookState, state_path: Path) -> None:
    """Write book metadata to a JSON state file."""
    state_path.write_text(state.model_dump_json(indent=2))
    logger.debug(f"Wrote book state to {state_path}")
