"""Front-matter detection and YAML extraction"""

import re
from dataclasses import dataclass, field
from typing import Any

import yaml


# Opening `---` line, optional YAML body, closing `---` line; anchored at the start.
FRONTMATTER_RE = re.compile(r'^---[ \t]*\n(?:(.*?)\n)?---[ \t]*(?:\n|\Z)', re.DOTALL)


@dataclass(frozen=True)
class ExtractedMetadata:
    contents_raw: str
    metadata: dict[str, Any] = field(default_factory=dict)


def extract_metadata(text: str) -> ExtractedMetadata:
    """Strip a leading front-matter block and parse it with YAML.

    Text without front matter comes back unchanged with empty metadata.
    Invalid YAML, or YAML that is not a mapping, raises ValueError.
    """
    m = FRONTMATTER_RE.match(text)
    if m is None:
        return ExtractedMetadata(contents_raw=text)

    try:
        data = yaml.safe_load(m.group(1) or '') or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML frontmatter: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(data).__name__}")
    return ExtractedMetadata(contents_raw=text[m.end():], metadata=data)
