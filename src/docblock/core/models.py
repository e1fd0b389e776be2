"""Value objects produced by the block compiler"""

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ParsedOptions(BaseModel):
    """Options block that parsed as JSON."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["parsed"] = "parsed"
    values: dict[str, Any]


class MalformedOptions(BaseModel):
    """Options block that failed to parse; carries the parser's message."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["malformed"] = "malformed"
    error: str


# None means the tag had no options block at all
TagOptions = Optional[Union[ParsedOptions, MalformedOptions]]


class TextNode(BaseModel):
    """Contiguous span of literal markdown, rendered to HTML by the compiler."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str


class TagNode(BaseModel):
    """An `@tag` annotation extracted from the block."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["tag"] = "tag"
    tag: str
    value: Optional[str] = None     # None when an options block had no body after it
    options: TagOptions = None
    raw: str = Field(default="", exclude=True, repr=False)  # exact source span


class HeadingTag(BaseModel):
    """An `@#`..`@######` heading; `route` is filled later by assign_routes."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["heading"] = "heading"
    tag: Literal["heading"] = "heading"
    value: Optional[str] = None
    level: int = Field(..., ge=1)
    route: str = ""
    raw: str = Field(default="", exclude=True, repr=False)


Node = Union[TextNode, TagNode, HeadingTag]
RenderedNode = Union[str, TagNode, HeadingTag]


class Block(BaseModel):
    """Compiled documentation block: rendered contents plus front-matter metadata."""
    model_config = ConfigDict(frozen=True)

    contents: tuple[RenderedNode, ...] = ()
    contents_raw: str
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def tags(self) -> list[Union[TagNode, HeadingTag]]:
        return [node for node in self.contents if not isinstance(node, str)]


class CompiledDoc(BaseModel):
    """A compiled file, as written by the pipeline."""
    slug: str
    path: str
    block: Block
