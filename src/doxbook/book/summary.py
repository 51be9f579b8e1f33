"""Summary appending: register written documents under the last chapter."""

import logging
import posixpath
from enum import Enum
from pathlib import Path

from schemas.book import Article

from .stores import SummaryStore

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "dox"


class ArticlesPolicy(str, Enum):
    """How new articles combine with a chapter's existing ones."""

    REPLACE = "replace"
    MERGE = "merge"


def build_article(written_path: str | Path, parent_level: str, index: int, prefix: str) -> Article:
    """Build the summary entry for one written document.

    Args:
        written_path: Path the document was written to
        parent_level: Level of the chapter receiving the article
        index: 0-based sibling position
        prefix: Book-relative directory of generated documents

    Returns:
        Article with level "<parent_level>.<index + 1>"
    """
    written = Path(written_path)
    return Article(
        path=posixpath.join(prefix, written.name),
        level=f"{parent_level}.{index + 1}",
        title=written.stem,
    )


def append_to_summary(
    store: SummaryStore,
    written_paths: list[Path],
    prefix: str = DEFAULT_PREFIX,
    policy: ArticlesPolicy | str = ArticlesPolicy.REPLACE,
) -> list[Article]:
    """Add written documents as articles of the book's last chapter.

    With ``REPLACE`` the chapter's articles become exactly the new ones.
    With ``MERGE`` existing articles are kept: one whose path matches a
    new document is updated in place and keeps its level, the others are
    appended after the existing children.

    Args:
        store: Summary store of the host book
        written_paths: Paths of the written documents, in order
        prefix: Book-relative directory of generated documents
        policy: Replace or merge with the chapter's existing articles

    Returns:
        The new articles, in the order of ``written_paths``

    Raises:
        SummaryError: If the summary has no chapters
    """
    policy = ArticlesPolicy(policy)
    target = store.last_chapter()

    if policy is ArticlesPolicy.REPLACE:
        articles = [
            build_article(path, target.level, i, prefix)
            for i, path in enumerate(written_paths)
        ]
        store.set_last_children(articles)
        logger.debug(f"Replaced articles of chapter {target.level} with {len(articles)} entries")
        return articles

    children = list(target.articles)
    positions = {article.path: pos for pos, article in enumerate(children)}
    next_index = _next_sibling_index(children, target.level)
    added: list[Article] = []

    for path in written_paths:
        article = build_article(path, target.level, next_index, prefix)
        if article.path in positions:
            pos = positions[article.path]
            article.level = children[pos].level
            children[pos] = article
        else:
            positions[article.path] = len(children)
            children.append(article)
            next_index += 1
        added.append(article)

    store.set_last_children(children)
    logger.debug(f"Merged {len(added)} articles into chapter {target.level}")
    return added


def _next_sibling_index(children: list[Article], parent_level: str) -> int:
    """0-based index for the next appended child."""
    highest = len(children)
    for child in children:
        head, _, tail = child.level.rpartition(".")
        if head == parent_level and tail.isdigit():
            highest = max(highest, int(tail))
    return highest
