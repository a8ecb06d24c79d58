import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ManifestError

MANIFEST_NAME = "gridlogic.toml"

REPORT_FORMATS = ("text", "json")


@dataclass
class SolverConfig:
    """Search limits."""

    max_iterations: int = 0  # 0 = no limit


@dataclass
class ReportConfig:
    """How solutions are printed."""

    format: str = "text"  # "text" | "json"
    # Record array name -> fields to print, in order
    field_order: dict[str, list[str]] = field(default_factory=dict)


@dataclass
class ProjectManifest:
    """
    Project manifest loaded from gridlogic.toml.

    Contains the project name, where puzzle files live, and solver and
    report configuration.
    """

    name: str = "puzzles"
    puzzle_paths: list[str] = field(default_factory=lambda: ["."])
    solver: SolverConfig = field(default_factory=SolverConfig)
    report: ReportConfig = field(default_factory=ReportConfig)


def load_manifest(path: Path) -> ProjectManifest:
    """
    Load gridlogic.toml.

    A missing file yields the defaults.

    Raises:
        ManifestError: If the file is not valid TOML or has invalid values
    """
    if not path.exists():
        return ProjectManifest()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML in {path}: {e}") from e

    project = data.get("project", {})
    solver_data = data.get("solver", {})
    report_data = data.get("report", {})

    puzzle_paths = project.get("puzzles", ["."])
    if not isinstance(puzzle_paths, list) or not all(isinstance(p, str) for p in puzzle_paths):
        raise ManifestError(f"project.puzzles must be a list of paths, got {puzzle_paths!r}")

    max_iterations = solver_data.get("max_iterations", 0)
    if not isinstance(max_iterations, int) or max_iterations < 0:
        raise ManifestError(
            f"solver.max_iterations must be a non-negative integer, got {max_iterations!r}"
        )

    report_format = report_data.get("format", "text")
    if report_format not in REPORT_FORMATS:
        raise ManifestError(
            f"report.format must be one of {', '.join(REPORT_FORMATS)}, got {report_format!r}"
        )

    field_order: dict[str, list[str]] = {}
    for name, fields in report_data.get("field_order", {}).items():
        if not isinstance(fields, list) or not all(isinstance(f, str) for f in fields):
            raise ManifestError(f"report.field_order.{name} must be a list of field names")
        field_order[name] = list(fields)

    return ProjectManifest(
        name=project.get("name", "puzzles"),
        puzzle_paths=puzzle_paths,
        solver=SolverConfig(max_iterations=max_iterations),
        report=ReportConfig(format=report_format, field_order=field_order),
    )
