"""Version lookup for GRIDLOGIC."""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DIST_NAME = "gridlogic"

# Repository root when running from a source checkout
PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """
    Version of the running code.

    A source checkout reports the version in its own pyproject.toml; otherwise
    the installed distribution's metadata is used.
    """
    if PYPROJECT.is_file():
        with PYPROJECT.open("rb") as f:
            project = tomllib.load(f).get("project", {})
        if project.get("name") == DIST_NAME and "version" in project:
            return str(project["version"])
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return "0+unknown"
