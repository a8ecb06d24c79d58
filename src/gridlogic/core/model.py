"""
Runtime model for GRIDLOGIC puzzles.

Turns a parsed PuzzleSpec into the mutable state the solver searches over:
one RuntimeVariable per scalar array element and per struct field of every
record, with uniqueness peers wired between same-field variables of a record
array. Each call to build_model() returns a fresh, independent PuzzleModel.
"""

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path

from . import ir
from .errors import ModelError, make_model_error

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class RuntimeVariable:
    """
    One domain-indexed cell of search state.

    Attributes:
        type_name: Name of the domain this variable ranges over
        domain: The domain itself
        index: Current position in the domain (0-based)
        peers: Variables that must never hold the same index as this one
    """

    type_name: str
    domain: ir.DomainSpec
    index: int = 0
    peers: list["RuntimeVariable"] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.domain.values)

    def value_as_string(self) -> str:
        """Label at the current index, clamped into the domain."""
        idx = max(0, min(self.index, self.size - 1))
        return self.domain.values[idx]

    def connect_peer(self, other: "RuntimeVariable") -> None:
        """Link two variables as mutual uniqueness peers."""
        if other is self:
            return
        if other not in self.peers:
            self.peers.append(other)
        if self not in other.peers:
            other.peers.append(self)

    def conflicts(self) -> bool:
        """True if any peer currently holds the same index."""
        return any(peer.index == self.index for peer in self.peers)

    def __repr__(self) -> str:
        return f"RuntimeVariable({self.type_name}, {self.index}/{self.size})"


class RecordInstance:
    """One element of a record array: an ordered field name -> variable mapping."""

    def __init__(self) -> None:
        self._fields: dict[str, RuntimeVariable] = {}

    def put(self, name: str, variable: RuntimeVariable) -> None:
        self._fields[name] = variable

    def get(self, name: str) -> RuntimeVariable | None:
        return self._fields.get(name)

    @property
    def field_names(self) -> list[str]:
        return list(self._fields)

    def items(self) -> list[tuple[str, RuntimeVariable]]:
        return list(self._fields.items())

    def labels(self) -> dict[str, str]:
        """Current label of every field, in field order."""
        return {name: var.value_as_string() for name, var in self._fields.items()}


@dataclass
class ScalarArray:
    """A declared array of independent variables sharing one domain."""

    spec: ir.VariableSpec
    domain: ir.DomainSpec
    elements: list[RuntimeVariable] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.spec.name

    def __len__(self) -> int:
        return len(self.elements)


@dataclass
class RecordArray:
    """A declared array of records sharing one struct schema."""

    spec: ir.VariableSpec
    struct: ir.StructSpec
    elements: list[RecordInstance] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.spec.name

    def __len__(self) -> int:
        return len(self.elements)


@dataclass
class PuzzleModel:
    """
    Per-run interpreter context.

    Holds the type tables, the declared arrays, the rules, and the flat
    variable list whose order is the solver's enumeration order.
    """

    file: Path | None = None
    domains: dict[str, ir.DomainSpec] = field(default_factory=dict)
    structs: dict[str, ir.StructSpec] = field(default_factory=dict)
    scalar_arrays: dict[str, ScalarArray] = field(default_factory=dict)
    record_arrays: dict[str, RecordArray] = field(default_factory=dict)
    rules: list[ir.RuleSpec] = field(default_factory=list)
    variables: list[RuntimeVariable] = field(default_factory=list)

    def add_domain(self, domain: ir.DomainSpec) -> None:
        """Register a domain, checking for duplicate type names."""
        if domain.name in self.domains or domain.name in self.structs:
            raise ModelError(f"Duplicate type '{domain.name}'")
        self.domains[domain.name] = domain

    def add_struct(self, struct: ir.StructSpec) -> None:
        """Register a struct schema, checking for duplicate type names."""
        if struct.name in self.domains or struct.name in self.structs:
            raise ModelError(f"Duplicate type '{struct.name}'")
        self.structs[struct.name] = struct

    def declare(self, spec: ir.VariableSpec) -> None:
        """Instantiate the runtime variables of one declaration."""
        if spec.name in self.scalar_arrays or spec.name in self.record_arrays:
            raise make_model_error(
                f"Duplicate variable '{spec.name}'", self.file, spec.line, spec.column
            )

        size = spec.effective_size

        if spec.type_name in self.structs:
            struct = self.structs[spec.type_name]
            domains = [self._entry_domain(struct, entry) for entry in struct.entries]
            array = RecordArray(spec=spec, struct=struct)
            for _ in range(size):
                record = RecordInstance()
                for entry, domain in zip(struct.entries, domains):
                    record.put(entry.name, RuntimeVariable(entry.type_name, domain))
                array.elements.append(record)

            for entry in struct.unique_entries:
                for i in range(size):
                    first = array.elements[i].get(entry.name)
                    for j in range(i + 1, size):
                        first.connect_peer(array.elements[j].get(entry.name))

            self.record_arrays[spec.name] = array

        elif spec.type_name in self.domains:
            domain = self.domains[spec.type_name]
            array = ScalarArray(
                spec=spec,
                domain=domain,
                elements=[RuntimeVariable(spec.type_name, domain) for _ in range(size)],
            )
            self.scalar_arrays[spec.name] = array

        else:
            raise make_model_error(
                f"Unknown type: {spec.type_name}", self.file, spec.line, spec.column
            )

    def _entry_domain(self, struct: ir.StructSpec, entry: ir.EntrySpec) -> ir.DomainSpec:
        domain = self.domains.get(entry.type_name)
        if domain is None:
            raise ModelError(
                f"Unknown type '{entry.type_name}' for field '{entry.name}' "
                f"of struct '{struct.name}'"
            )
        return domain

    def collect_variables(self) -> None:
        """Build the flat enumeration list: scalar arrays first, then record fields."""
        self.variables = []
        for scalars in self.scalar_arrays.values():
            self.variables.extend(scalars.elements)
        for records in self.record_arrays.values():
            for record in records.elements:
                for _, variable in record.items():
                    self.variables.append(variable)

    @property
    def search_space(self) -> int:
        """Number of complete assignments: the product of all domain sizes."""
        return math.prod(variable.size for variable in self.variables)


def build_model(puzzle: ir.PuzzleSpec) -> PuzzleModel:
    """
    Build the runtime model for a parsed puzzle.

    Type definitions are registered first, then variables are instantiated in
    declaration order.

    Args:
        puzzle: Parsed puzzle

    Returns:
        A fresh PuzzleModel

    Raises:
        ModelError: On unknown or duplicate types and duplicate variables
    """
    model = PuzzleModel(file=puzzle.file, rules=list(puzzle.rules))

    for domain in puzzle.domains:
        if not domain.values:
            raise ModelError(f"Domain '{domain.name}' has no labels")
        model.add_domain(domain)
    for struct in puzzle.structs:
        model.add_struct(struct)

    for spec in puzzle.variables:
        model.declare(spec)

    model.collect_variables()

    logger.debug(
        "Built model for %s: %d variables, search space %d",
        puzzle.name,
        len(model.variables),
        model.search_space,
    )
    return model
