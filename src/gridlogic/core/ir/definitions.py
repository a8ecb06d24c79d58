"""
Type definition and declaration types for GRIDLOGIC IR.

This module contains domains (named label lists), structs (record schemas),
and variable declarations.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DomainSpec(BaseModel):
    """
    A named, ordered list of distinct labels.

    Example:
        Color = {red, green, blue}
    """

    name: str
    values: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def index_of(self, label: str) -> int:
        """Position of a label in the domain, or -1 if absent."""
        try:
            return self.values.index(label)
        except ValueError:
            return -1


class EntrySpec(BaseModel):
    """
    One entry of a struct schema.

    Attributes:
        type_name: Name of the domain the entry ranges over
        name: Field name
        unique: Whether peers across one record array must differ
    """

    type_name: str
    name: str
    unique: bool = False

    model_config = ConfigDict(frozen=True)


class StructSpec(BaseModel):
    """
    A named record schema.

    Example:
        Party = [unique Name b, Color c]
    """

    name: str
    entries: list[EntrySpec] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def field_names(self) -> list[str]:
        return [entry.name for entry in self.entries]

    @property
    def unique_entries(self) -> list[EntrySpec]:
        return [entry for entry in self.entries if entry.unique]


class VariableSpec(BaseModel):
    """
    A declared variable array.

    Example:
        var Birds : Bird[6]
    """

    name: str
    type_name: str
    size: int | None = None  # Defaults to 1 when absent
    line: int = 0
    column: int = 0

    model_config = ConfigDict(frozen=True)

    @property
    def effective_size(self) -> int:
        return 1 if self.size is None else self.size
