"""Shared pytest fixtures for GRIDLOGIC tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from gridlogic.core import ir
from gridlogic.core.dsl_parser_impl import parse_dsl
from gridlogic.core.model import PuzzleModel, build_model

PAIR_PUZZLE = """\
Color = {red, blue}
Pair = [unique Color a, Color b]
var P : Pair[2]
P[0].a != P[1].a
"""

GUESTS_PUZZLE = """\
Name = {alice, bob, carol}
Color = {red, green, blue}
Snack = {cake, chips, fruit}

Guest = [unique Name name, unique Color color, unique Snack snack]

var Guests : Guest[3]

Guests[0].name = alice
Guests[1].name = bob
Guests[2].name = carol

Guests.name = alice =>
    Guests.color = green

Guests.color = blue =>
    Guests.snack = chips

Guests.name = bob =>
    Guests.color != red
    Guests.snack != cake

Guests[2].snack != fruit
"""


@pytest.fixture
def examples_dir() -> Path:
    """Return path to the example project."""
    return Path(__file__).parent.parent / "examples" / "guests"


@pytest.fixture
def pair_puzzle() -> ir.PuzzleSpec:
    """Two records whose unique field must differ."""
    return parse_dsl(PAIR_PUZZLE, Path("pair.grid"))


@pytest.fixture
def guests_puzzle() -> ir.PuzzleSpec:
    """Three guests with names, colors, and snacks; one solution."""
    return parse_dsl(GUESTS_PUZZLE, Path("guests.grid"))


@pytest.fixture
def build() -> Callable[[str], PuzzleModel]:
    """Parse puzzle text and build its model."""

    def _build(text: str) -> PuzzleModel:
        return build_model(parse_dsl(text, Path("test.grid")))

    return _build


@pytest.fixture
def write_puzzle(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write puzzle text into tmp_path and return the file."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def pair_file(write_puzzle: Callable[[str, str], Path]) -> Path:
    """The pair puzzle written to pair.grid."""
    return write_puzzle("pair.grid", PAIR_PUZZLE)
