"""
GRIDLOGIC Intermediate Representation (IR) types.

This package contains the AST produced by the puzzle parser.
All types are re-exported from this package.
"""

# Definitions
from .definitions import (
    DomainSpec,
    EntrySpec,
    StructSpec,
    VariableSpec,
)

# Puzzle
from .puzzle import PuzzleSpec

# Rules
from .rules import (
    ComparisonOperator,
    Expression,
    FieldModifier,
    IndexModifier,
    Modifier,
    RuleSpec,
    VariableRef,
)

__all__ = [
    # Definitions
    "DomainSpec",
    "EntrySpec",
    "StructSpec",
    "VariableSpec",
    # Rules
    "ComparisonOperator",
    "Expression",
    "FieldModifier",
    "IndexModifier",
    "Modifier",
    "RuleSpec",
    "VariableRef",
    # Puzzle
    "PuzzleSpec",
]
