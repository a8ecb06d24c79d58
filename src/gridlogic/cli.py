"""
GRIDLOGIC CLI.

Commands:
- solve: parse, build, and solve puzzles, printing each result
- check: parse and build puzzles without searching
- tokens: dump the token stream of a puzzle file
"""

import json
import logging
from pathlib import Path

import typer

from gridlogic._version import get_version
from gridlogic.core.errors import GridLogicError, ParseError
from gridlogic.core.fileset import discover_puzzle_files
from gridlogic.core.lexer import tokenize
from gridlogic.core.manifest import MANIFEST_NAME, ProjectManifest, load_manifest
from gridlogic.core.model import build_model
from gridlogic.core.parser import parse_puzzle_file
from gridlogic.core.report import format_report
from gridlogic.core.solver import SolveResult, Solver

app = typer.Typer(
    help="GRIDLOGIC – logic-grid puzzle DSL and exhaustive solver",
    no_args_is_help=True,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gridlogic {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
) -> None:
    """GRIDLOGIC CLI main callback for global options."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def _load_manifest(manifest: str) -> tuple[Path, ProjectManifest]:
    manifest_path = Path(manifest).resolve()
    try:
        return manifest_path.parent, load_manifest(manifest_path)
    except GridLogicError as e:
        typer.echo(f"Error loading manifest: {e}", err=True)
        raise typer.Exit(code=1)


def _resolve_files(paths: list[Path] | None, root: Path, mf: ProjectManifest) -> list[Path]:
    files = list(paths) if paths else discover_puzzle_files(root, mf)
    if not files:
        typer.echo(f"No puzzle files found (see {MANIFEST_NAME} [project] puzzles)", err=True)
        raise typer.Exit(code=1)
    return files


@app.command(name="solve")
def solve_command(
    paths: list[Path] | None = typer.Argument(  # noqa: B008
        None, help="Puzzle files (default: puzzles listed in the manifest)"
    ),
    manifest: str = typer.Option(
        MANIFEST_NAME, "--manifest", "-m", help=f"Path to {MANIFEST_NAME}"
    ),
    format: str | None = typer.Option(
        None, "--format", "-f", help="Output format: 'text' or 'json'"
    ),
    max_iterations: int | None = typer.Option(
        None,
        "--max-iterations",
        "-n",
        min=0,
        help="Give up after testing this many assignments (0: no limit)",
    ),
) -> None:
    """
    Solve puzzles and print each result.

    Exits with code 2 if any puzzle has no solution or hits the iteration cap.
    """
    root, mf = _load_manifest(manifest)
    files = _resolve_files(paths, root, mf)

    output_format = format or mf.report.format
    if output_format not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format}", err=True)
        raise typer.Exit(code=1)

    limit = mf.solver.max_iterations if max_iterations is None else max_iterations

    results: list[SolveResult] = []
    for f in files:
        try:
            puzzle = parse_puzzle_file(f)
            model = build_model(puzzle)
            results.append(Solver(model).solve(max_iterations=limit))
        except ParseError as e:
            typer.echo(f"Parse error: {e}", err=True)
            raise typer.Exit(code=1)
        except GridLogicError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        except OSError as e:
            typer.echo(f"Cannot read {f}: {e}", err=True)
            raise typer.Exit(code=1)

    if output_format == "json":
        typer.echo(json.dumps([r.model_dump(mode="json") for r in results], indent=2))
    else:
        for result in results:
            if len(results) > 1:
                typer.echo(f"== {result.puzzle}")
            typer.echo(format_report(result, mf.report.field_order), nl=False)

    if not all(r.solved for r in results):
        raise typer.Exit(code=2)


@app.command(name="check")
def check_command(
    paths: list[Path] | None = typer.Argument(  # noqa: B008
        None, help="Puzzle files (default: puzzles listed in the manifest)"
    ),
    manifest: str = typer.Option(
        MANIFEST_NAME, "--manifest", "-m", help=f"Path to {MANIFEST_NAME}"
    ),
) -> None:
    """Parse puzzles and build their models without searching."""
    root, mf = _load_manifest(manifest)
    files = _resolve_files(paths, root, mf)

    for f in files:
        try:
            puzzle = parse_puzzle_file(f)
            model = build_model(puzzle)
        except ParseError as e:
            typer.echo(f"Parse error: {e}", err=True)
            raise typer.Exit(code=1)
        except GridLogicError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        except OSError as e:
            typer.echo(f"Cannot read {f}: {e}", err=True)
            raise typer.Exit(code=1)

        typer.echo(
            f"{puzzle.name}: {len(puzzle.domains)} domains, {len(puzzle.structs)} structs, "
            f"{len(puzzle.variables)} variables ({len(model.variables)} cells), "
            f"{len(puzzle.rules)} rules, search space {model.search_space}"
        )


@app.command(name="tokens")
def tokens_command(
    path: Path = typer.Argument(..., help="Puzzle file"),  # noqa: B008
) -> None:
    """Print the token stream of a puzzle file."""
    try:
        text = path.read_text(encoding="utf-8")
        for token in tokenize(text, path):
            typer.echo(repr(token))
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"Cannot read {path}: {e}", err=True)
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
