from pathlib import Path

from . import ir
from .dsl_parser_impl import parse_dsl


def parse_puzzle_file(path: Path) -> ir.PuzzleSpec:
    """
    Read and parse one puzzle file.

    Args:
        path: Path to a .grid file

    Returns:
        PuzzleSpec for the file

    Raises:
        ParseError: If the file does not parse
    """
    text = path.read_text(encoding="utf-8")
    return parse_dsl(text, path)
