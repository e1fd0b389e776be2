"""Forward scanner that cuts a block into literal and `@tag` chunks.

A tag opens at the start of a line:

    @tagname {options (opt)} value

or, with a body spanning several lines:

    @tagname {options (opt)} ...
    value
    ...

Every line is looked at once: a line starting with `@` may open a tag, a
line of three or more dots fences a multi-line body, anything else is plain
text. Chunks are contiguous and cover the input exactly, so joining their
`text` gives back the original string.
"""

import re
from dataclasses import dataclass
from typing import Iterator, Optional


TAG_OPEN_RE = re.compile(r'@([^\s{]+)[ \t]*')
DOT_FENCE_RE = re.compile(r'\.{3,}')
BLANKS_RE = re.compile(r'[ \t]*')
WORD_RE = re.compile(r'\w', re.ASCII)


@dataclass(frozen=True)
class Chunk:
    """A span of source text. Tag fields stay None for literal chunks."""
    text: str
    start: int
    name: Optional[str] = None
    options: Optional[str] = None   # raw `{...}` text, braces included
    body: Optional[str] = None
    multiline: bool = False

    @property
    def is_tag(self) -> bool:
        return self.name is not None

    @property
    def end(self) -> int:
        return self.start + len(self.text)


@dataclass(frozen=True)
class _Body:
    end: int
    value: Optional[str]
    multiline: bool = False


def _line_end(text: str, pos: int) -> int:
    """Index of the newline ending the line at pos, or len(text)."""
    nl = text.find('\n', pos)
    return len(text) if nl == -1 else nl


def _fenced_body(text: str, fence_eol: int) -> Optional[_Body]:
    """Body between the fence line ending at fence_eol and the next dot-fence line."""
    if fence_eol >= len(text):
        return None
    pos = fence_eol + 1
    while True:
        closing = DOT_FENCE_RE.match(text, pos)
        if closing:
            return _Body(end=closing.end(), value=text[fence_eol + 1:pos - 1], multiline=True)
        eol = _line_end(text, pos)
        if eol == len(text):
            break
        pos = eol + 1
    return None


def _body(text: str, pos: int, allow_empty: bool = False) -> Optional[_Body]:
    """Match a tag body starting at pos: a dot-fenced block or the rest of the line."""
    pos = BLANKS_RE.match(text, pos).end()
    eol = _line_end(text, pos)
    rest = text[pos:eol]
    if DOT_FENCE_RE.fullmatch(rest):
        return _fenced_body(text, eol)
    if WORD_RE.match(rest):
        return _Body(end=eol, value=rest)
    if not rest and allow_empty:
        return _Body(end=pos, value=None)
    return None


def _options(text: str, brace: int) -> Optional[tuple[str, _Body]]:
    """Close the options block at the first `}` that leaves a valid body behind it.

    Braces are not balanced; nested objects only survive when their inner
    closing braces are not followed by something that looks like a body.
    """
    close = text.find('}', brace + 1)
    while close != -1:
        body = _body(text, close + 1, allow_empty=True)
        if body is not None:
            return text[brace:close + 1], body
        close = text.find('}', close + 1)
    return None


def match_tag(text: str, start: int) -> Optional[Chunk]:
    """Try to read a tag at start, which must be the first column of a line."""
    m = TAG_OPEN_RE.match(text, start)
    if m is None:
        return None

    options = None
    body = None
    if text.startswith('{', m.end()):
        found = _options(text, m.end())
        if found is not None:
            options, body = found
    if body is None:
        body = _body(text, m.end())
    if body is None:
        return None

    return Chunk(
        text=text[start:body.end],
        start=start,
        name=m.group(1),
        options=options,
        body=body.value,
        multiline=body.multiline,
    )


def scan(text: str) -> Iterator[Chunk]:
    """Yield literal and tag chunks in source order."""
    literal_start = 0
    line_start = 0
    while line_start < len(text):
        tag = match_tag(text, line_start) if text.startswith('@', line_start) else None
        if tag is None:
            line_start = _line_end(text, line_start) + 1
            continue
        if literal_start < tag.start:
            yield Chunk(text=text[literal_start:tag.start], start=literal_start)
        yield tag
        literal_start = tag.end
        line_start = _line_end(text, tag.end) + 1
    if literal_start < len(text):
        yield Chunk(text=text[literal_start:], start=literal_start)
