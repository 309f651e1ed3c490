"""
Slide Element Model

The closed set of element kinds a theme can match on, the element nodes
themselves, and the document that owns them. Slide sources are parsed
elsewhere; this module only holds the tree long enough to theme it.
"""

from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import UnknownElementTypeError


class ElementType(str, Enum):
    """Supported slide element kinds."""

    DOCUMENT = "Document"
    TITLE_SLIDE = "TitleSlide"
    SLIDE = "Slide"
    TITLE = "Title"
    HEADLINE = "HeadLine"
    BODY = "Body"
    PARAGRAPH = "Paragraph"
    TEXT = "Text"
    HORIZONTAL_RULE = "HorizontalRule"
    IMAGE = "Image"
    ITEM_LIST = "ItemList"
    LIST_ITEM = "ListItem"
    CODE_BLOCK = "CodeBlock"
    TABLE = "Table"

    @classmethod
    def from_name(cls, name: Any) -> "ElementType":
        """Resolve a tag from its name.

        Accepts the member itself, its value ("HeadLine"), or its member
        name in any case ("HEADLINE", "horizontal_rule").

        Raises:
            UnknownElementTypeError: If no element kind has that name
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            wanted = name.replace('_', '').replace('-', '').lower()
            for member in cls:
                if wanted in (member.value.lower(), member.name.replace('_', '').lower()):
                    return member
        raise UnknownElementTypeError(
            f"Unknown element type: {name!r}",
            context={'known': [m.value for m in cls]}
        )


def resolve_tags(tags: Iterable[Any]) -> Tuple[ElementType, ...]:
    """Resolve a sequence of tag names, failing on the first unknown one."""
    return tuple(ElementType.from_name(tag) for tag in tags)



def stringify_properties(properties: Any) -> Any:
    """Coerce property keys and values to strings.

    YAML reads `font-size: 12` as an int and `align: ~` as None; numbers are
    kept as their text, a missing value is refused.
    """
    if not isinstance(properties, dict):
        return properties
    result = {}
    for key, value in properties.items():
        if value is None:
            raise ValueError(f"Property {key!r} has no value")
        result[str(key)] = str(value)
    return result


class Element(BaseModel):
    """A typed node in the slide content tree."""

    model_config = ConfigDict(populate_by_name=True)

    type_tag: ElementType = Field(alias="type")
    text: Optional[str] = None
    properties: Dict[str, str] = Field(default_factory=dict)
    deleted: bool = False
    children: List["Element"] = Field(default_factory=list)

    @field_validator('type_tag', mode='before')
    @classmethod
    def normalize_type_tag(cls, v):
        return ElementType.from_name(v)

    @field_validator('text', mode='before')
    @classmethod
    def stringify_text(cls, v):
        """`text: 2024` in YAML is still a headline."""
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator('properties', mode='before')
    @classmethod
    def normalize_properties(cls, v):
        return stringify_properties(v)

    @classmethod
    def of(cls, type_tag: Any, *children: "Element", text: Optional[str] = None) -> "Element":
        """Shorthand constructor used when building trees in code."""
        return cls(type_tag=ElementType.from_name(type_tag), text=text, children=list(children))

    def classification(self, ancestors: Iterable[ElementType] = ()) -> FrozenSet[ElementType]:
        """Tags this element satisfies: its own kind plus its ancestors' kinds."""
        return frozenset(ancestors) | {self.type_tag}

    def prop_set(self, key: str, value: str) -> None:
        self.properties[key] = value

    def prop_get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.properties.get(key, default)

    def delete(self) -> None:
        """Remove this element (and so its subtree) from the render tree."""
        self.deleted = True

    def walk(self) -> Iterator["Element"]:
        """Yield live elements depth-first, skipping deleted subtrees."""
        for element, _ in self.walk_with_context():
            yield element

    def walk_with_context(
        self,
        ancestors: Tuple[ElementType, ...] = ()
    ) -> Iterator[Tuple["Element", FrozenSet[ElementType]]]:
        """Yield (element, classification) pairs in document order."""
        if self.deleted:
            return
        yield self, self.classification(ancestors)
        inner = ancestors + (self.type_tag,)
        for child in self.children:
            yield from child.walk_with_context(inner)

    def render(self, include_deleted: bool = False) -> Optional[Dict[str, Any]]:
        """Plain-data view of the subtree.

        Deleted elements are dropped (None for this one) unless
        include_deleted is set, in which case they carry `deleted: true`.
        """
        if self.deleted and not include_deleted:
            return None
        data: Dict[str, Any] = {'type': self.type_tag.value}
        if self.text is not None:
            data['text'] = self.text
        if self.properties:
            data['properties'] = dict(self.properties)
        if self.deleted:
            data['deleted'] = True
        children = [c for c in (child.render(include_deleted) for child in self.children) if c is not None]
        if children:
            data['children'] = children
        return data


class Document(BaseModel):
    """The presentation being themed: an ordered list of slides."""

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    slides: List[Element] = Field(default_factory=list)

    def walk_with_context(self) -> Iterator[Tuple[Element, FrozenSet[ElementType]]]:
        root = (ElementType.DOCUMENT,)
        for slide in self.slides:
            yield from slide.walk_with_context(root)

    def walk(self) -> Iterator[Element]:
        for element, _ in self.walk_with_context():
            yield element

    def render_tree(self, include_deleted: bool = False) -> Dict[str, Any]:
        """The tree as the renderer consumes it: deleted elements pruned."""
        data: Dict[str, Any] = {}
        if self.title is not None:
            data['title'] = self.title
        data['slides'] = [s for s in (slide.render(include_deleted) for slide in self.slides) if s is not None]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Document":
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Full dump, deleted elements included, suitable for reloading."""
        return self.render_tree(include_deleted=True)
