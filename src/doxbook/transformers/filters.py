"""Jinja2 filters for Markdown template rendering.

These filters are used in api.md.j2 to format parsed doc comments.
"""

from schemas.comment import CommentBlock


def heading_signature(comment: CommentBlock) -> str:
    """Build the heading text for a documented declaration.

    Functions and methods list their ``@param`` names inside the
    parentheses; other declarations use the context's display string.

    Args:
        comment: Parsed doc block with a code context

    Returns:
        Signature string such as "Widget.prototype.render(target, options)",
        or the description summary when there is no context
    """
    ctx = comment.ctx
    if ctx is None:
        return comment.description.summary

    if ctx.type in ("function", "method"):
        params = ", ".join(
            t.name for t in comment.tags_of("param") if t.name and "." not in t.name
        )
        base = ctx.string[:-2] if ctx.string.endswith("()") else ctx.string
        return f"{base}({params})"

    return ctx.string or ctx.name


def format_types(types: list) -> str:
    """Format type names as inline code joined by an escaped pipe.

    Examples:
        >>> format_types(["String", "Number"])
        '`String` \\\\| `Number`'
    """
    if not types:
        return ""
    return " \\| ".join(f"`{t}`" for t in types)


def escape_table_cell(text: str) -> str:
    """Make text safe to place inside a Markdown table cell.

    Pipes are escaped and line breaks collapsed to spaces.

    Examples:
        >>> escape_table_cell("a | b\\nc")
        'a \\\\| b c'
    """
    if not text:
        return ""
    return " ".join(text.replace("|", "\\|").split())


# Registry of all filters for easy registration with Jinja2
FILTERS = {
    "heading_signature": heading_signature,
    "format_types": format_types,
    "escape_table_cell": escape_table_cell,
}
