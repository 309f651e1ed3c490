"""
Theme Application

A theme is a named list of rules plus the names of themes it builds on.
Applying it is a single sequential pass over a document: included themes
first, in the order given, then the theme's own rules in declaration order.
A later rule wins over an earlier one for the same property on the same
element. Deleted elements never match again.
"""

import logging
from typing import Any, Callable, Dict, List, Literal, Optional, Set, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .elements import Document, ElementType, resolve_tags, stringify_properties
from .exceptions import ThemeCycleError
from .matcher import ElementContainer, match

logger = logging.getLogger(__name__)


class Rule(BaseModel):
    """One selector and what to do with the elements it selects."""

    tags: List[ElementType] = Field(description="Element types to match, outermost first")
    action: Literal["set", "delete"] = "set"
    properties: Dict[str, str] = Field(default_factory=dict, description="Properties for 'set'")

    @field_validator('tags', mode='before')
    @classmethod
    def resolve_tag_names(cls, v):
        if isinstance(v, (str, ElementType)):
            v = [v]
        if not isinstance(v, (list, tuple)):
            raise ValueError(f"Rule tags must be a list of element types, got {type(v).__name__}")
        return list(resolve_tags(v))

    @field_validator('properties', mode='before')
    @classmethod
    def stringify_values(cls, v):
        return stringify_properties(v)

    @model_validator(mode='after')
    def check_action(self):
        if not self.tags:
            raise ValueError("A rule needs at least one element type")
        if self.action == "set" and not self.properties:
            raise ValueError("A 'set' rule needs at least one property")
        return self

    def apply(self, context: "ThemeContext") -> ElementContainer:
        elements = context.match(*self.tags)
        if self.action == "delete":
            elements.delete()
        else:
            for key, value in self.properties.items():
                elements.prop_set(key, value)
        return elements

    def describe(self) -> str:
        selector = ", ".join(t.value for t in self.tags)
        if self.action == "delete":
            return f"match({selector}) -> delete"
        props = ", ".join(f"{k}={v}" for k, v in self.properties.items())
        return f"match({selector}) -> {props}"


class Theme(BaseModel):
    """A named, composable bundle of styling rules."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    description: Optional[str] = None
    includes: List[str] = Field(default_factory=list)
    rules: List[Rule] = Field(default_factory=list)
    apply_fn: Optional[Callable[..., None]] = Field(
        default=None,
        exclude=True,
        description="Procedural rules run after the declarative ones"
    )


class ThemeContext:
    """What a theme runs against: one document and the themes it may include.

    Keeps track of which themes have been applied during this pass so a theme
    reached twice through includes is applied only once, and of the include
    chain so a cycle is reported rather than recursed into.
    """

    def __init__(self, document: Document, registry=None):
        if registry is None:
            from .registry import default_registry
            registry = default_registry()
        self.document = document
        self.registry = registry
        self._applied: Set[str] = set()
        self._stack: List[str] = []

    def match(
        self,
        *type_tags: Any,
        handler: Optional[Callable[[ElementContainer], None]] = None
    ) -> ElementContainer:
        """Select elements; call handler once with them if any matched."""
        elements = match(self.document, *type_tags)
        if handler is not None and elements:
            handler(elements)
        return elements

    def on(self, *type_tags: Any):
        """Decorator form of match(..., handler=fn)."""
        def decorator(fn):
            self.match(*type_tags, handler=fn)
            return fn
        return decorator

    def include_theme(self, name: str) -> None:
        if name in self._stack:
            chain = " -> ".join(self._stack + [name])
            raise ThemeCycleError(f"Theme include cycle: {chain}")
        if name in self._applied:
            logger.debug("Theme %r already applied in this pass", name)
            return
        self.run(self.registry.get(name))

    def run(self, theme: Theme) -> None:
        logger.info("Applying theme %r", theme.name)
        self._stack.append(theme.name)
        try:
            for name in theme.includes:
                self.include_theme(name)
            for rule in theme.rules:
                elements = rule.apply(self)
                logger.debug("%s [%d]", rule.describe(), len(elements))
            if theme.apply_fn is not None:
                theme.apply_fn(self)
        finally:
            self._stack.pop()
        self._applied.add(theme.name)


def apply_theme(document: Document, theme: Union[Theme, str], registry=None) -> Document:
    """Apply a theme (or a registered theme's name) to a document in place.

    Args:
        document: Document to mutate
        theme: Theme instance or registered theme name
        registry: ThemeRegistry used to resolve names; built-ins if omitted

    Returns:
        The same document, for chaining

    Raises:
        ThemeNotFoundError: If a theme name cannot be resolved
        ThemeCycleError: If themes include each other in a loop
    """
    context = ThemeContext(document, registry)
    if isinstance(theme, str):
        context.include_theme(theme)
    else:
        context.run(theme)
    return document
