"""Block compiler: front matter, tag segmentation, and markdown rendering"""

from typing import Any, Callable, Iterable, Mapping, Optional, Sequence, TypeVar

from markdown_it import MarkdownIt

from docblock.config import Settings
from docblock.core.metadata import extract_metadata
from docblock.core.models import Block, RenderedNode, TextNode
from docblock.core.tags import parse_tags


T = TypeVar("T")


def _make_parser(preset: str, options: Optional[Mapping[str, Any]] = None) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name and option overrides."""
    try:
        return MarkdownIt(preset, options_update=dict(options or {}))
    except KeyError as e:
        raise ValueError(f"Unknown markdown preset: {preset!r}") from e


class Compiler:
    """Compiles raw documentation blocks into `Block` values.

    Holds only read-only configuration, so one instance can compile any
    number of blocks, including concurrently.
    """

    def __init__(
        self,
        reserved_tags: Iterable[str] = (),
        markdown_preset: str = "gfm-like",
        markdown_options: Optional[Mapping[str, Any]] = None,
        ):
        self.reserved_tags = frozenset(reserved_tags)
        self._md = _make_parser(markdown_preset, {"linkify": False, **(markdown_options or {})})

    @classmethod
    def from_settings(cls, settings: Settings) -> "Compiler":
        return cls(
            reserved_tags=settings.reserved_tags,
            markdown_preset=settings.markdown_preset,
            markdown_options=settings.markdown_options,
        )

    def render_markdown(self, markdown: str) -> str:
        return self._md.render(markdown)

    def render_block(self, block_content: str, reserved_tags: Optional[Iterable[str]] = None) -> Block:
        """Compile one block. reserved_tags replaces the instance default for this call only."""
        reserved = self.reserved_tags if reserved_tags is None else frozenset(reserved_tags)
        extracted = extract_metadata(block_content.strip())
        return Block(
            contents=tuple(self.render_contents(extracted.contents_raw, reserved)),
            contents_raw=extracted.contents_raw,
            metadata=extracted.metadata,
        )

    def render_contents(self, content: str, reserved_tags: Optional[Iterable[str]] = None) -> list[RenderedNode]:
        """Segment content and render its text nodes; empty renderings are dropped."""
        if reserved_tags is None:
            reserved_tags = self.reserved_tags
        rendered = (
            self.render_markdown(node.text) if isinstance(node, TextNode) else node
            for node in parse_tags(content, reserved_tags)
        )
        return [node for node in rendered if node != ""]

    @staticmethod
    def objectify(items: Sequence[T], get_key: Callable[[T], str]) -> dict[str, T]:
        """Index items by get_key(item); later items win on duplicate keys."""
        return {get_key(item): item for item in items}
