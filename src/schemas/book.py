"""Book metadata schemas.

These mirror the parts of the host book's table of contents (summary) and
linear navigation that the documentation pipeline reads and writes:

    BookState
    ├── summary
    │   └── chapters[]            # Chapter
    │       └── articles[]        # Article (leaf)
    └── navigation{path: segment} # NavigationSegment, linked by prev/next

Navigation segments refer to their neighbours by navigation key (path)
rather than by object reference so the structure serializes as plain JSON.
"""

from pydantic import BaseModel, Field


class Article(BaseModel):
    """A leaf table-of-contents entry pointing at one document.

    Attributes:
        path: Book-relative path of the document (e.g., "dox/widget.md")
        level: Dotted hierarchical index (e.g., "2.3")
        title: Display title
        articles: Child articles (always empty for generated entries)
        exists: Whether the document exists on disk
        external: Whether the path points outside the book
        introduction: Whether this is the book's introduction page
    """

    path: str
    level: str
    title: str
    articles: list["Article"] = []
    exists: bool = True
    external: bool = False
    introduction: bool = False


class Chapter(BaseModel):
    """A top-level grouping node in the table of contents.

    Attributes:
        level: Dotted hierarchical index (e.g., "2")
        title: Display title
        path: Book-relative path of the chapter page, if any
        articles: Ordered child articles
    """

    level: str
    title: str = ""
    path: str | None = None
    articles: list[Article] = []

    model_config = {"extra": "allow"}


class Summary(BaseModel):
    """The book's table of contents."""

    chapters: list[Chapter] = []

    model_config = {"extra": "allow"}


class NavigationSegment(BaseModel):
    """One node in the book's linear prev/next traversal order.

    Attributes:
        index: Position in the traversal order
        level: Dotted hierarchical index of the matching summary entry
        title: Display title
        path: Navigation key of this segment
        introduction: Whether this is the book's introduction page
        prev: Navigation key of the previous segment, None at the head
        next: Navigation key of the following segment, None at the tail
    """

    index: int
    level: str
    title: str
    path: str
    introduction: bool = False
    prev: str | None = None
    next: str | None = None


class BookState(BaseModel):
    """Serialized book metadata: summary plus navigation mapping."""

    summary: Summary = Field(default_factory=Summary)
    navigation: dict[str, NavigationSegment] = {}
