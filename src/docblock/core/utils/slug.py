"""Slug generation for document names and heading routes"""

import re
import unicodedata


def slugify(text: str, fallback: str = "") -> str:
    """Convert text to a lowercase, hyphen-separated URL-safe slug.

    Accents are folded to ASCII; returns fallback when nothing survives.
    """
    text = unicodedata.normalize('NFKD', text).encode('ascii', 'ignore').decode('ascii')
    text = re.sub(r'[^\w\s-]', '', text.lower())
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-') or fallback
