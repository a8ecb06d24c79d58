"""
Exhaustive solver for GRIDLOGIC puzzles.

Enumerates every assignment of the model's flat variable list in odometer
order (the first variable turns fastest) and stops at the first assignment
that satisfies all uniqueness constraints and rules. There is no pruning: an
unsolvable puzzle costs the full product of domain sizes.

check() and advance() are exposed separately so callers can drive the search
step by step, or cap it with solve(max_iterations=...).
"""

import logging
from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, Field

from . import ir
from .errors import ModelError, make_model_error
from .model import PuzzleModel, RuntimeVariable

logger = logging.getLogger(__name__)


class Binding(NamedTuple):
    """The record element a quantified rule is currently checking."""

    array: str
    index: int


class SolveStatus(str, Enum):
    """Outcome of a search."""

    SOLVED = "solved"
    NO_SOLUTION = "no_solution"
    ABORTED = "aborted"


class SolveResult(BaseModel):
    """
    Structured outcome of solving one puzzle.

    Attributes:
        puzzle: Puzzle name (source file stem)
        status: solved, no_solution, or aborted (iteration cap reached)
        iterations: Number of assignments tested
        search_space: Total number of assignments
        records: Record array name -> per element field -> label (solved only)
        scalars: Scalar array name -> per element label (solved only)
    """

    puzzle: str
    status: SolveStatus
    iterations: int
    search_space: int
    records: dict[str, list[dict[str, str]]] = Field(default_factory=dict)
    scalars: dict[str, list[str]] = Field(default_factory=dict)

    @property
    def solved(self) -> bool:
        return self.status == SolveStatus.SOLVED


class Solver:
    """Odometer search over a PuzzleModel."""

    def __init__(self, model: PuzzleModel):
        self.model = model
        self.iterations = 0

        for rule in model.rules:
            if rule.is_quantified and rule.guard.left.name not in model.record_arrays:
                logger.warning(
                    "Rule '%s' does not quantify over a record array; only its guard is checked",
                    rule,
                )

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Put every variable back at index 0."""
        for variable in self.model.variables:
            variable.index = 0
        self.iterations = 0

    def advance(self) -> bool:
        """
        Move to the next assignment with a ripple-carry increment.

        Returns:
            False once every assignment has been visited (all indices are
            back at 0), True otherwise
        """
        for variable in self.model.variables:
            variable.index += 1
            if variable.index < variable.size:
                return True
            variable.index = 0
        return False

    def check(self) -> bool:
        """Test the current assignment: uniqueness first, then rules."""
        return self.check_uniqueness() and self.check_rules()

    # ------------------------------------------------------------------
    # Constraint tests
    # ------------------------------------------------------------------

    def check_uniqueness(self) -> bool:
        for variable in self.model.variables:
            if variable.conflicts():
                return False
        return True

    def check_rules(self) -> bool:
        for rule in self.model.rules:
            if not self.check_rule(rule):
                return False
        return True

    def check_rule(self, rule: ir.RuleSpec) -> bool:
        """
        Check one rule against the current assignment.

        A quantified rule is checked for every element of the record array its
        guard's left operand names: wherever the guard holds, every consequent
        must hold for the same element.
        """
        if not rule.is_quantified:
            return self.evaluate(rule.guard)

        array_name = rule.guard.left.name
        records = self.model.record_arrays.get(array_name)
        if records is None:
            return self.evaluate(rule.guard)

        for i in range(len(records)):
            binding = Binding(array_name, i)
            if not self.evaluate(rule.guard, binding):
                continue
            for consequent in rule.consequents:
                if not self.evaluate(consequent, binding):
                    return False
        return True

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def evaluate(self, expr: ir.Expression, binding: Binding | None = None) -> bool:
        """
        Evaluate a comparison.

        If the right operand does not resolve to a variable it is read as a
        label of the left operand's domain.

        Raises:
            ModelError: If the left operand cannot be resolved
        """
        left = self.resolve(expr.left, binding)

        try:
            right: RuntimeVariable | None = self.resolve(expr.right, binding)
        except ModelError:
            right = None

        if right is not None:
            equal = left.index == right.index
        else:
            equal = left.index == left.domain.index_of(expr.right.name)

        return not equal if expr.negated else equal

    def resolve(self, ref: ir.VariableRef, binding: Binding | None = None) -> RuntimeVariable:
        """
        Find the runtime variable a reference points at.

        Raises:
            ModelError: Unknown variable, missing or out-of-range index,
                missing or unknown field
        """
        records = self.model.record_arrays.get(ref.name)
        if records is not None:
            index = ref.index
            if index is None:
                if binding is not None and binding.array == ref.name:
                    index = binding.index
                else:
                    raise self._error(f"Missing index for struct {ref.name}", ref)

            if index < 0 or index >= len(records):
                raise self._error(f"Bad index {index} for struct {ref.name}", ref)

            if ref.field is None:
                raise self._error(f"Missing field for struct {ref.name}", ref)

            variable = records.elements[index].get(ref.field)
            if variable is None:
                raise self._error(f"Unknown field '{ref.field}' for struct {ref.name}", ref)
            return variable

        scalars = self.model.scalar_arrays.get(ref.name)
        if scalars is not None:
            if ref.index is None:
                raise self._error(f"Missing index for simple variable {ref.name}", ref)
            if ref.index >= len(scalars):
                raise self._error(f"Bad index {ref.index} for variable {ref.name}", ref)
            return scalars.elements[ref.index]

        raise self._error(f"Unknown variable: {ref.name}", ref)

    def _error(self, message: str, ref: ir.VariableRef) -> ModelError:
        return make_model_error(message, self.model.file, ref.line, ref.column)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def solve(self, max_iterations: int | None = None) -> SolveResult:
        """
        Search for the first satisfying assignment.

        Args:
            max_iterations: Stop with status ABORTED after testing this many
                assignments. None, 0 or a negative value means no limit.

        Returns:
            SolveResult; records and scalars are filled in only when solved
        """
        self.reset()
        logger.info(
            "Solving %s: %d variables, search space %d",
            self._puzzle_name(),
            len(self.model.variables),
            self.model.search_space,
        )
        limit = max_iterations if max_iterations and max_iterations > 0 else None

        while True:
            if limit is not None and self.iterations >= limit:
                status = SolveStatus.ABORTED
                break
            self.iterations += 1
            if self.check():
                status = SolveStatus.SOLVED
                break
            if not self.advance():
                status = SolveStatus.NO_SOLUTION
                break

        logger.info(
            "%s: %s after %d iterations", self._puzzle_name(), status.value, self.iterations
        )
        return self.snapshot(status)

    def snapshot(self, status: SolveStatus) -> SolveResult:
        """Build a SolveResult from the current assignment."""
        result = SolveResult(
            puzzle=self._puzzle_name(),
            status=status,
            iterations=self.iterations,
            search_space=self.model.search_space,
        )
        if status != SolveStatus.SOLVED:
            return result

        for name, records in self.model.record_arrays.items():
            result.records[name] = [record.labels() for record in records.elements]
        for name, scalars in self.model.scalar_arrays.items():
            result.scalars[name] = [var.value_as_string() for var in scalars.elements]
        return result

    def _puzzle_name(self) -> str:
        return self.model.file.stem if self.model.file else "<string>"


def solve(model: PuzzleModel, max_iterations: int | None = None) -> SolveResult:
    """Convenience function: run a fresh Solver over a model."""
    return Solver(model).solve(max_iterations=max_iterations)
