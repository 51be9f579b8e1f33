"""Structured comment records produced by the comment parser.

A source file yields one CommentBlock per ``/** ... */`` doc block, in the
order the blocks appear in the file.
"""

from pydantic import BaseModel, Field


class CommentTag(BaseModel):
    """A single ``@tag`` line inside a doc block.

    Attributes:
        type: Tag name without the leading "@" (e.g., "param", "return")
        string: Raw text following the tag name
        name: Parameter or property name, for tags that carry one
        types: Type names parsed from a ``{A|B}`` expression
        description: Free text following the type and name
        visibility: "public" or "private" for ``@api`` tags
    """

    type: str
    string: str = ""
    name: str | None = None
    types: list[str] = []
    description: str = ""
    visibility: str | None = None


class Description(BaseModel):
    """Free-text description of a doc block.

    Attributes:
        full: Entire description text
        summary: First paragraph
        body: Remaining paragraphs
    """

    full: str = ""
    summary: str = ""
    body: str = ""


class CodeContext(BaseModel):
    """The declaration a doc block documents.

    Attributes:
        type: Declaration kind ("function", "method", "property", "class",
            "declaration")
        name: Declared name
        receiver: Owning object or class for methods and properties
        string: Display form, e.g. "Widget.prototype.render()"
    """

    type: str
    name: str
    receiver: str | None = None
    string: str = ""


class CommentBlock(BaseModel):
    """A parsed ``/** ... */`` doc block.

    Attributes:
        tags: Tags in declaration order
        description: Free-text description
        is_private: True when tagged ``@api private`` or ``@private``
        ignore: True when tagged ``@ignore``
        code: First line of code following the block
        ctx: Declaration context inferred from ``code``
        line: 1-based line number of the opening ``/**``
    """

    tags: list[CommentTag] = []
    description: Description = Field(default_factory=Description)
    is_private: bool = False
    ignore: bool = False
    code: str = ""
    ctx: CodeContext | None = None
    line: int = 1

    def tags_of(self, tag_type: str) -> list[CommentTag]:
        return [t for t in self.tags if t.type == tag_type]
