from pathlib import Path

from .manifest import ProjectManifest

PUZZLE_SUFFIX = ".grid"


def discover_puzzle_files(root: Path, manifest: ProjectManifest) -> list[Path]:
    files: list[Path] = []
    for rel in manifest.puzzle_paths:
        base = (root / rel).resolve()
        if not base.exists():
            continue
        if base.is_file():
            files.append(base)
            continue
        for p in base.rglob(f"*{PUZZLE_SUFFIX}"):
            files.append(p)
    return sorted(set(files))
