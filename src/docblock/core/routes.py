"""Route assignment for heading tags across a whole document"""

from typing import Iterable

from docblock.core.models import HeadingTag
from docblock.core.utils.slug import slugify


def assign_routes(contents: Iterable, prefix: str = "") -> list:
    """Return contents with each HeadingTag's route filled in.

    A route joins the slugs of the enclosing headings, e.g. `usage/options`
    for a level-2 "Options" heading under a level-1 "Usage". Repeated routes
    get `-1`, `-2`, ... suffixes. Nodes are copied, never mutated.
    """
    stack: list[tuple[int, str]] = []     # (level, slug) of open headings
    taken: set[str] = set()
    next_suffix: dict[str, int] = {}     # base route -> next suffix to try
    routed = []

    for node in contents:
        if not isinstance(node, HeadingTag):
            routed.append(node)
            continue

        while stack and stack[-1][0] >= node.level:
            stack.pop()
        parts = [prefix] if prefix else []
        parts += [slug for _, slug in stack]
        slug = slugify(node.value or "", fallback="section")
        base = "/".join(parts + [slug])

        route = base
        suffix = next_suffix.get(base, 1)
        while route in taken:
            route = f"{base}-{suffix}"
            suffix += 1
        next_suffix[base] = suffix
        taken.add(route)
        slug = route.rsplit("/", 1)[-1]

        stack.append((node.level, slug))
        routed.append(node.model_copy(update={"route": route}))

    return routed
