"""
Rule and expression types for GRIDLOGIC IR.

Variable references keep their full modifier chain for display, but the index
and field that evaluation uses are resolved once, when the reference is built.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class ComparisonOperator(str, Enum):
    """Operators for rule expressions."""

    EQUALS = "="
    NOT_EQUALS = "!="


class IndexModifier(BaseModel):
    """An element selector: `[3]`."""

    kind: Literal["index"] = "index"
    index: int

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"[{self.index}]"


class FieldModifier(BaseModel):
    """A field accessor: `.color`."""

    kind: Literal["field"] = "field"
    name: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f".{self.name}"


Modifier = Annotated[IndexModifier | FieldModifier, Field(discriminator="kind")]


class VariableRef(BaseModel):
    """
    A reference to a declared variable, or a bare domain label.

    Examples:
        - Parties[2].color: VariableRef(name="Parties", index=2, field="color")
        - Parties.color: VariableRef(name="Parties", field="color")
        - red: VariableRef(name="red")

    Only one index and one field matter for evaluation; when a chain carries
    several, the last of each kind wins.
    """

    name: str
    modifiers: list[Modifier] = Field(default_factory=list)
    index: int | None = None
    field: str | None = None
    line: int = 0
    column: int = 0

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_chain(
        cls,
        name: str,
        modifiers: list[IndexModifier | FieldModifier],
        line: int = 0,
        column: int = 0,
    ) -> VariableRef:
        """Build a reference and resolve its index/field from the chain."""
        index: int | None = None
        field: str | None = None
        for modifier in modifiers:
            if isinstance(modifier, IndexModifier):
                index = modifier.index
            else:
                field = modifier.name
        return cls(
            name=name,
            modifiers=modifiers,
            index=index,
            field=field,
            line=line,
            column=column,
        )

    def __str__(self) -> str:
        return self.name + "".join(str(m) for m in self.modifiers)


class Expression(BaseModel):
    """
    A binary comparison between two references.

    Examples:
        - Parties[0].color = Parties[1].color
        - Parties.name != alice
    """

    left: VariableRef
    operator: ComparisonOperator
    right: VariableRef

    model_config = ConfigDict(frozen=True)

    @property
    def negated(self) -> bool:
        return self.operator == ComparisonOperator.NOT_EQUALS

    def __str__(self) -> str:
        return f"{self.left} {self.operator.value} {self.right}"


class RuleSpec(BaseModel):
    """
    A guard expression with optional consequents.

    Without consequents the guard must hold over the whole assignment.
    With consequents the rule is quantified over the record array named by the
    guard's left operand:

        Parties.color = red =>
            Parties.name = alice
    """

    guard: Expression
    consequents: list[Expression] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def is_quantified(self) -> bool:
        return bool(self.consequents)

    def __str__(self) -> str:
        if not self.consequents:
            return str(self.guard)
        thens = "; ".join(str(c) for c in self.consequents)
        return f"{self.guard} => {thens}"
