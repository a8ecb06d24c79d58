"""
Puzzle-level IR types for GRIDLOGIC.

A PuzzleSpec is the parser output for a single puzzle file.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .definitions import DomainSpec, StructSpec, VariableSpec
from .rules import RuleSpec


class PuzzleSpec(BaseModel):
    """
    Parsed contents of one puzzle file.

    Attributes:
        file: Source file the puzzle was parsed from
        domains: Domain definitions, in source order
        structs: Struct definitions, in source order
        variables: Variable declarations, in source order
        rules: Rules, in source order
    """

    file: Path | None = None
    domains: list[DomainSpec] = Field(default_factory=list)
    structs: list[StructSpec] = Field(default_factory=list)
    variables: list[VariableSpec] = Field(default_factory=list)
    rules: list[RuleSpec] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def name(self) -> str:
        return self.file.stem if self.file else "<string>"
