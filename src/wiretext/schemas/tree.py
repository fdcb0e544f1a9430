"""WireText tree models.

The tree is a closed tagged union discriminated on ``type``. Every model is
frozen and keeps its children in a tuple, so a parsed tree never changes.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Ratio(BaseModel):
    """Relative share of a section among its ratioed siblings."""

    model_config = ConfigDict(frozen=True)

    n: int = Field(..., gt=0)
    d: int = Field(..., gt=0)

    @property
    def value(self) -> Fraction:
        return Fraction(self.n, self.d)


class RowNode(BaseModel):
    """One leaf line of inline markup."""

    model_config = ConfigDict(frozen=True)

    type: Literal["row"] = "row"
    text: str


class SectionNode(BaseModel):
    """A named block that stacks its children vertically."""

    model_config = ConfigDict(frozen=True)

    type: Literal["section"] = "section"
    name: str
    ratio: Ratio | None = None
    children: tuple[Node, ...] = ()


class GroupNode(BaseModel):
    """An unnamed block whose children are laid out as columns."""

    model_config = ConfigDict(frozen=True)

    type: Literal["group"] = "group"
    children: tuple[Node, ...] = ()


class RootNode(BaseModel):
    """Document root."""

    model_config = ConfigDict(frozen=True)

    type: Literal["root"] = "root"
    children: tuple[Node, ...] = ()


Node = Annotated[Union[SectionNode, GroupNode, RowNode], Field(discriminator="type")]

SectionNode.model_rebuild()
GroupNode.model_rebuild()
RootNode.model_rebuild()
