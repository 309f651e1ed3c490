"""
Theme File Schema for Slide Theme

Pydantic models describing a theme as it is written in a YAML or JSON file.
A rule entry either sets properties or deletes what it matches:

    name: slide-center
    include: default
    rules:
      - match: TitleSlide
        set: {vertical-align: middle, align: center, font-size: x-large}
      - match: [Slide, HorizontalRule]
        delete: true
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..elements import stringify_properties


class RuleConfig(BaseModel):
    """A single match rule as written in a theme file."""

    model_config = ConfigDict(populate_by_name=True)

    match: List[str] = Field(description="Element types to match, outermost first")
    set_properties: Dict[str, str] = Field(
        default_factory=dict,
        alias="set",
        description="Properties to assign to every matched element"
    )
    delete: bool = Field(False, description="Remove matched elements from the render tree")

    @field_validator('match', mode='before')
    @classmethod
    def listify_match(cls, v):
        """Allow `match: TitleSlide` as well as `match: [Slide, HeadLine]`."""
        if isinstance(v, str):
            return [v]
        return v

    @field_validator('set_properties', mode='before')
    @classmethod
    def stringify_values(cls, v):
        """Property values are strings; YAML may read `font-size: 12` as an int."""
        return stringify_properties(v)

    @model_validator(mode='after')
    def check_one_action(self):
        if not self.match:
            raise ValueError("Rule 'match' must name at least one element type")
        if self.delete and self.set_properties:
            raise ValueError(f"Rule for {self.match} cannot both set and delete")
        if not self.delete and not self.set_properties:
            raise ValueError(f"Rule for {self.match} needs 'set' or 'delete: true'")
        return self


class ThemeConfig(BaseModel):
    """Complete theme definition as loaded from disk."""

    version: str = Field("1.0", description="Theme file schema version")
    name: str = Field(description="Name other themes include this one by")
    description: Optional[str] = Field(None, description="What the theme does")

    include: List[str] = Field(
        default_factory=list,
        description="Themes applied before this one's rules, in order"
    )

    rules: List[RuleConfig] = Field(
        default_factory=list,
        description="Rules applied in declaration order"
    )

    @field_validator('include', mode='before')
    @classmethod
    def listify_include(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v
