"""Doc comment parser.

Scans JavaScript-style source text for ``/** ... */`` blocks and turns each
into a CommentBlock:

    /**
     * Render the widget.
     *
     * @param {Element|String} target where to render
     * @return {Widget} this instance
     * @api public
     */
    Widget.prototype.render = function(target) {

The block above yields a description with summary "Render the widget.",
a ``param`` tag (types ["Element", "String"], name "target"), a ``return``
tag, a public ``api`` tag, and a method context for ``render`` on
``Widget``. Line comments, plain ``/* */`` comments and string literals
are skipped so ``/**`` inside them is not mistaken for a doc block.
"""

import logging
import re

from doxbook.exceptions import CommentSyntaxError
from schemas.comment import CodeContext, CommentBlock, CommentTag, Description

logger = logging.getLogger(__name__)

NAMED_TAGS = {"param", "arg", "argument", "property", "prop"}
TYPED_TAGS = {"return", "returns", "throws", "type"}

_LINE_PREFIX = re.compile(r"^\s*\*? ?")
_TAG_LINE = re.compile(r"@([\w.-]+)\s*(.*)", re.DOTALL)
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")

_IDENT = r"[\w$]+"
_CONTEXT_PATTERNS: list[tuple[str, re.Pattern]] = [
    (
        "prototype_method",
        re.compile(rf"^({_IDENT}(?:\.{_IDENT})*)\.prototype\.({_IDENT})\s*=\s*"),
    ),
    (
        "function",
        re.compile(
            rf"^(?:export\s+(?:default\s+)?)?(?:async\s+)?function\s*\*?\s*({_IDENT})\s*\("
        ),
    ),
    (
        "class",
        re.compile(rf"^(?:export\s+(?:default\s+)?)?class\s+({_IDENT})"),
    ),
    (
        "function_expression",
        re.compile(
            rf"^(?:export\s+)?(?:var|let|const)\s+({_IDENT})\s*=\s*"
            rf"(?:async\s+)?(?:function\b|\([^)]*\)\s*=>|{_IDENT}\s*=>)"
        ),
    ),
    (
        "assigned_method",
        re.compile(
            rf"^({_IDENT}(?:\.{_IDENT})*)\.({_IDENT})\s*=\s*(?:async\s+)?"
            rf"(?:function\b|\([^)]*\)\s*=>|{_IDENT}\s*=>)"
        ),
    ),
    (
        "property",
        re.compile(rf"^({_IDENT}(?:\.{_IDENT})*)\.({_IDENT})\s*=\s*"),
    ),
    (
        "declaration",
        re.compile(rf"^(?:export\s+)?(?:var|let|const)\s+({_IDENT})"),
    ),
    (
        "method_shorthand",
        re.compile(
            rf"^(?:static\s+)?(?:async\s+)?(?!(?:if|for|while|switch|catch|return|function)\b)"
            rf"({_IDENT})\s*\([^)]*\)\s*\{{"
        ),
    ),
]


def parse_comments(source: str) -> list[CommentBlock]:
    """Parse every doc block in a source file.

    Args:
        source: Source text

    Returns:
        CommentBlocks in file order (empty if the file has no doc blocks)

    Raises:
        CommentSyntaxError: If a doc block is unterminated or a tag type
            expression has an unbalanced brace
    """
    blocks: list[CommentBlock] = []
    i = 0
    n = len(source)

    while i < n:
        if source.startswith("//", i):
            newline = source.find("\n", i)
            i = n if newline == -1 else newline + 1
        elif source.startswith("/**", i) and not source.startswith("/**/", i):
            line = source.count("\n", 0, i) + 1
            end = source.find("*/", i + 3)
            if end == -1:
                raise CommentSyntaxError("unterminated doc comment", line=line)
            block = parse_block(source[i + 3 : end], line)
            block.code = _first_code_line(source[end + 2 :])
            block.ctx = parse_context(block.code)
            blocks.append(block)
            i = end + 2
        elif source.startswith("/*", i):
            end = source.find("*/", i + 2)
            i = n if end == -1 else end + 2
        elif source[i] in "'\"`":
            i = _skip_string(source, i)
        else:
            i += 1

    logger.debug(f"Parsed {len(blocks)} doc comments")
    return blocks


def parse_block(raw: str, line: int = 1) -> CommentBlock:
    """Parse the text between ``/**`` and ``*/``.

    Args:
        raw: Comment body without the delimiters
        line: 1-based line of the opening delimiter, used in errors

    Returns:
        CommentBlock with description and tags (no code context)
    """
    description_lines: list[str] = []
    tag_chunks: list[tuple[int, list[str]]] = []

    for offset, raw_line in enumerate(raw.split("\n")):
        text = _LINE_PREFIX.sub("", raw_line, count=1).rstrip()
        if text.lstrip().startswith("@"):
            tag_chunks.append((line + offset, [text.lstrip()]))
        elif tag_chunks:
            tag_chunks[-1][1].append(text)
        else:
            description_lines.append(text)

    tags = [
        parse_tag("\n".join(chunk).strip(), tag_line) for tag_line, chunk in tag_chunks
    ]
    block = CommentBlock(
        tags=tags,
        description=_parse_description("\n".join(description_lines)),
        line=line,
    )
    block.is_private = any(
        t.type == "private" or (t.type == "api" and t.visibility == "private")
        for t in tags
    )
    block.ignore = any(t.type == "ignore" for t in tags)
    return block


def parse_tag(text: str, line: int = 1) -> CommentTag:
    """Parse one ``@tag ...`` chunk, including its continuation lines."""
    match = _TAG_LINE.match(text)
    if not match:
        raise CommentSyntaxError(f"malformed tag: {text!r}", line=line)

    tag_type, string = match.group(1), match.group(2).strip()
    tag = CommentTag(type=tag_type, string=string)

    if tag_type in NAMED_TAGS:
        tag.types, rest = parse_types(string, line)
        parts = rest.split(None, 1)
        tag.name = parts[0] if parts else None
        description = parts[1] if len(parts) > 1 else ""
        tag.description = _squash_lines(description.lstrip("- "))
    elif tag_type in TYPED_TAGS:
        tag.types, rest = parse_types(string, line)
        tag.description = _squash_lines(rest)
    elif tag_type == "api":
        tag.visibility = string.split()[0] if string else None
    else:
        tag.description = string

    return tag


def parse_types(text: str, line: int = 1) -> tuple[list[str], str]:
    """Split a leading ``{A|B}`` type expression off ``text``.

    Returns:
        Tuple of (type names, remaining text). Type names are empty when
        ``text`` does not start with "{".
    """
    if not text.startswith("{"):
        return [], text

    depth = 0
    for pos, char in enumerate(text):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                inner = text[1:pos]
                types = [t.strip() for t in inner.split("|") if t.strip()]
                return types, text[pos + 1 :].strip()

    raise CommentSyntaxError("unbalanced '{' in type expression", line=line)


def parse_context(code: str) -> CodeContext | None:
    """Infer what declaration a line of code introduces.

    Args:
        code: First line of code following a doc block

    Returns:
        CodeContext, or None if the line is not a recognized declaration
    """
    code = code.strip()
    if not code:
        return None

    for kind, pattern in _CONTEXT_PATTERNS:
        match = pattern.match(code)
        if not match:
            continue

        if kind in ("prototype_method", "assigned_method"):
            receiver, name = match.group(1), match.group(2)
            if kind == "prototype_method" and not _is_function_value(code[match.end() :]):
                return CodeContext(
                    type="property",
                    name=name,
                    receiver=receiver,
                    string=f"{receiver}.prototype.{name}",
                )
            joiner = ".prototype." if kind == "prototype_method" else "."
            return CodeContext(
                type="method",
                name=name,
                receiver=receiver,
                string=f"{receiver}{joiner}{name}()",
            )
        if kind in ("function", "function_expression"):
            name = match.group(1)
            return CodeContext(type="function", name=name, string=f"{name}()")
        if kind == "class":
            name = match.group(1)
            return CodeContext(type="class", name=name, string=name)
        if kind == "property":
            receiver, name = match.group(1), match.group(2)
            return CodeContext(
                type="property", name=name, receiver=receiver, string=f"{receiver}.{name}"
            )
        if kind == "declaration":
            name = match.group(1)
            return CodeContext(type="declaration", name=name, string=name)
        if kind == "method_shorthand":
            name = match.group(1)
            return CodeContext(type="method", name=name, string=f"{name}()")

    return None


def _is_function_value(value: str) -> bool:
    value = value.lstrip()
    if value.startswith("async "):
        value = value[len("async ") :].lstrip()
    return value.startswith("function") or bool(
        re.match(rf"^(?:\([^)]*\)|{_IDENT})\s*=>", value)
    )


def _parse_description(text: str) -> Description:
    full = text.strip()
    if not full:
        return Description()
    parts = _PARAGRAPH_BREAK.split(full, maxsplit=1)
    summary = parts[0].strip()
    body = parts[1].strip() if len(parts) > 1 else ""
    return Description(full=full, summary=summary, body=body)


def _squash_lines(text: str) -> str:
    return "\n".join(line.strip() for line in text.strip().splitlines())


def _first_code_line(rest: str) -> str:
    for line in rest.split("\n"):
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith("/*") or stripped.startswith("//"):
            return ""
        return stripped
    return ""


def _skip_string(source: str, start: int) -> int:
    """Return the index just past the string literal opening at ``start``."""
    quote = source[start]
    i = start + 1
    n = len(source)
    while i < n:
        char = source[i]
        if char == "\\":
            i += 2
            continue
        if char == quote:
            return i + 1
        if char == "\n" and quote != "`":
            # Unterminated single-line string; resume scanning on the next line
            return i + 1
        i += 1
    return n
