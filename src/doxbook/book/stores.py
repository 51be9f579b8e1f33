"""Stores for host-owned book metadata.

The pipeline never touches the host's summary and navigation structures
directly. It goes through these narrow interfaces so a host can supply
its own backing store, and tests can use the in-memory ones.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from doxbook.exceptions import SummaryError
from schemas.book import Article, Chapter, NavigationSegment, Summary


class SummaryStore(ABC):
    """Abstract table-of-contents store."""

    @abstractmethod
    def chapters(self) -> list[Chapter]:
        """Return the chapters in table-of-contents order."""
        pass

    @abstractmethod
    def set_children(self, position: int, articles: list[Article]) -> None:
        """Replace the articles of the chapter at ``position`` in ``chapters()``."""
        pass

    def last_chapter(self) -> Chapter:
        """Return the last chapter.

        Raises:
            SummaryError: If the summary has no chapters
        """
        chapters = self.chapters()
        if not chapters:
            raise SummaryError("book summary has no chapters")
        return chapters[-1]

    def set_last_children(self, articles: list[Article]) -> None:
        """Replace the articles of the last chapter.

        The chapter is addressed by position, so chapters sharing a level
        cannot be confused with it.

        Raises:
            SummaryError: If the summary has no chapters
        """
        self.last_chapter()
        self.set_children(len(self.chapters()) - 1, articles)


class NavigationStore(ABC):
    """Abstract store for the book's linear navigation order."""

    @abstractmethod
    def items(self) -> Iterator[tuple[str, NavigationSegment]]:
        """Iterate (path, segment) pairs in store order."""
        pass

    @abstractmethod
    def get(self, path: str | None) -> NavigationSegment | None:
        """Return the segment stored under ``path``, if any."""
        pass

    @abstractmethod
    def put(self, segment: NavigationSegment) -> None:
        """Store ``segment`` under its path, replacing any existing entry."""
        pass

    @abstractmethod
    def remove(self, path: str) -> None:
        """Remove the segment stored under ``path``."""
        pass

    def __len__(self) -> int:
        return sum(1 for _ in self.items())

    def __contains__(self, path: str) -> bool:
        return self.get(path) is not None

    def last_segment(self) -> NavigationSegment | None:
        """Return the segment with the highest index.

        Ties go to the segment encountered last. Returns None when the
        navigation is empty.
        """
        last: NavigationSegment | None = None
        for path, segment in self.items():
            if last is None or segment.index >= last.index:
                last = segment
        return last

    def first_segment(self) -> NavigationSegment | None:
        """Return the segment with the lowest index, or None when empty."""
        first: NavigationSegment | None = None
        for path, segment in self.items():
            if first is None or segment.index < first.index:
                first = segment
        return first

    def resolve_prev(self, segment: NavigationSegment) -> NavigationSegment | None:
        return self.get(segment.prev)

    def resolve_next(self, segment: NavigationSegment) -> NavigationSegment | None:
        return self.get(segment.next)

    def walk(self) -> Iterator[NavigationSegment]:
        """Follow ``next`` links from the first segment.

        Stops at the tail, at a dangling link, or on revisiting a segment.
        """
        seen: set[str] = set()
        segment = self.first_segment()
        while segment is not None and segment.path not in seen:
            seen.add(segment.path)
            yield segment
            segment = self.resolve_next(segment)


class InMemorySummaryStore(SummaryStore):
    """SummaryStore over a Summary model, mutated in place."""

    def __init__(self, summary: Summary):
        self.summary = summary

    def chapters(self) -> list[Chapter]:
        return self.summary.chapters

    def set_children(self, position: int, articles: list[Article]) -> None:
        if not 0 <= position < len(self.summary.chapters):
            raise SummaryError(f"no chapter at position {position}")
        self.summary.chapters[position].articles = articles


class InMemoryNavigationStore(NavigationStore):
    """NavigationStore over a path-to-segment dict, mutated in place."""

    def __init__(self, navigation: dict[str, NavigationSegment] | None = None):
        self.navigation = navigation if navigation is not None else {}
        for path, segment in self.navigation.items():
            segment.path = path

    def items(self) -> Iterator[tuple[str, NavigationSegment]]:
        return iter(list(self.navigation.items()))

    def get(self, path: str | None) -> NavigationSegment | None:
        if path is None:
            return None
        return self.navigation.get(path)

    def put(self, segment: NavigationSegment) -> None:
        self.navigation[segment.path] = segment

    def remove(self, path: str) -> None:
        del self.navigation[path]
