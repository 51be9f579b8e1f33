"""Navigation linking: extend the book's prev/next chain with new articles."""

import logging

from schemas.book import Article, NavigationSegment

from .stores import NavigationStore

logger = logging.getLogger(__name__)


def append_to_navigation(
    store: NavigationStore, articles: list[Article]
) -> list[NavigationSegment]:
    """Append articles to the end of the book's navigation order.

    The new segments continue from the segment with the highest index,
    whatever chapter the articles belong to. An article whose path is
    already in the navigation, including one repeated earlier in the same
    batch, is first unlinked from its old position so the chain stays a
    single path.

    Args:
        store: Navigation store of the host book
        articles: Articles to append, in order

    Returns:
        The created segments, in order
    """
    anchor = store.last_segment()
    created: list[NavigationSegment] = []

    for article in articles:
        if article.path in store:
            removed = unlink(store, article.path)
            if anchor is not None and anchor.path == removed.path:
                anchor = store.get(removed.prev)
            created = [s for s in created if s.path != removed.path]

        segment = NavigationSegment(
            index=(anchor.index if anchor else 0) + 1,
            level=article.level,
            title=article.title,
            path=article.path,
            introduction=False,
            prev=anchor.path if anchor else None,
            next=None,
        )
        if anchor is not None:
            anchor.next = segment.path
            store.put(anchor)
        store.put(segment)
        created.append(segment)
        anchor = segment

    if created:
        logger.debug(
            f"Linked {len(created)} segments, indices {created[0].index}-{created[-1].index}"
        )
    return created


def unlink(store: NavigationStore, path: str) -> NavigationSegment | None:
    """Remove a segment and join its neighbours to each other.

    Returns:
        The removed segment, or None if ``path`` was not present
    """
    segment = store.get(path)
    if segment is None:
        return None

    prev_segment = store.resolve_prev(segment)
    next_segment = store.resolve_next(segment)
    if prev_segment is not None:
        prev_segment.next = next_segment.path if next_segment is not None else None
        store.put(prev_segment)
    if next_segment is not None:
        next_segment.prev = prev_segment.path if prev_segment is not None else None
        store.put(next_segment)

    store.remove(path)
    return segment
