"""
Rule Matcher

Selects elements by a conjunction of element-type tags. The last tag names
the kind of element wanted; every other tag must be satisfied by the element
or one of its ancestors, so match(Slide, HeadLine) finds headlines inside
slides and leaves a title slide's headline alone.
"""

import logging
from typing import Any, List, Optional

from .elements import Document, Element, resolve_tags

logger = logging.getLogger(__name__)


class ElementContainer(list):
    """The elements one match produced, in document order.

    Property and delete calls fan out to every member.
    """

    def prop_set(self, key: str, value: str) -> None:
        for element in self:
            element.prop_set(key, value)

    def prop_get(self, key: str, default: Optional[str] = None) -> List[Optional[str]]:
        return [element.prop_get(key, default) for element in self]

    def delete(self) -> None:
        for element in self:
            element.delete()


def matches(element: Element, classification, tags) -> bool:
    """Check one element against already-resolved tags."""
    *context, target = tags
    if element.type_tag is not target:
        return False
    return all(tag in classification for tag in context)


def match(document: Document, *type_tags: Any) -> ElementContainer:
    """Collect every live element matching all of the given tags.

    Args:
        document: Document to search
        *type_tags: ElementType members or their names, outermost first

    Returns:
        ElementContainer, empty when nothing matches

    Raises:
        UnknownElementTypeError: If a tag is not a known element kind
        ValueError: If no tags are given
    """
    if not type_tags:
        raise ValueError("match() needs at least one element type")

    tags = resolve_tags(type_tags)
    found = ElementContainer(
        element
        for element, classification in document.walk_with_context()
        if matches(element, classification, tags)
    )
    logger.debug("match(%s): %d element(s)", ", ".join(t.value for t in tags), len(found))
    return found
