"""Turn scanned chunks into text and tag nodes"""

import json
import re
from typing import Iterable, Optional

import structlog

from docblock.core.lexer import Chunk, scan
from docblock.core.models import HeadingTag, MalformedOptions, Node, ParsedOptions, TagNode, TagOptions, TextNode


logger = structlog.get_logger(__name__)

HEADING_TAG_RE = re.compile(r'#+')


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not valid JSON")


def parse_options(tag: str, raw: Optional[str]) -> TagOptions:
    """Parse a raw `{...}` options block as strict JSON; failures are logged, not raised."""
    if raw is None:
        return None
    try:
        return ParsedOptions(values=json.loads(raw, parse_constant=_reject_constant))
    except (ValueError, RecursionError) as e:
        logger.warning("tag_options_invalid", tag=tag, options=raw, error=str(e))
        return MalformedOptions(error=str(e))


def _tag_node(chunk: Chunk) -> Node:
    if HEADING_TAG_RE.fullmatch(chunk.name):
        # route needs the whole document; see assign_routes
        return HeadingTag(value=chunk.body, level=len(chunk.name), raw=chunk.text)
    return TagNode(
        tag=chunk.name,
        value=chunk.body,
        options=parse_options(chunk.name, chunk.options),
        raw=chunk.text,
    )


def parse_tags(content: str, reserved_tags: Iterable[str] = ()) -> list[Node]:
    """Split content on lines that open an `@tag`.

    Tags named in reserved_tags stay in the surrounding text verbatim, which
    keeps code samples such as `@Decorator` usages intact. Consecutive text
    chunks are merged so a code block is never broken across nodes.
    """
    reserved = frozenset(reserved_tags)
    nodes: list[Node] = []
    for chunk in scan(content):
        if chunk.is_tag and chunk.name not in reserved:
            nodes.append(_tag_node(chunk))
        elif nodes and isinstance(nodes[-1], TextNode):
            nodes[-1] = TextNode(text=nodes[-1].text + chunk.text)
        else:
            nodes.append(TextNode(text=chunk.text))
    return nodes


def source_text(nodes: Iterable[Node]) -> str:
    """Rebuild the source a node sequence was parsed from."""
    return ''.join(n.text if isinstance(n, TextNode) else n.raw for n in nodes)
