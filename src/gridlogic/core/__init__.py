"""Core GRIDLOGIC functionality: lexer, parser, IR, runtime model, solver, reporting."""

from . import ir
from .dsl_parser_impl import parse_dsl
from .errors import (
    ErrorContext,
    GridLogicError,
    ManifestError,
    ModelError,
    ParseError,
)
from .lexer import Token, TokenType, tokenize
from .manifest import ProjectManifest, load_manifest
from .model import PuzzleModel, build_model
from .parser import parse_puzzle_file
from .report import format_report
from .solver import SolveResult, Solver, SolveStatus, solve

__all__ = [
    "ir",
    "ErrorContext",
    "GridLogicError",
    "ManifestError",
    "ModelError",
    "ParseError",
    "Token",
    "TokenType",
    "tokenize",
    "parse_dsl",
    "parse_puzzle_file",
    "ProjectManifest",
    "load_manifest",
    "PuzzleModel",
    "build_model",
    "SolveResult",
    "SolveStatus",
    "Solver",
    "solve",
    "format_report",
]
