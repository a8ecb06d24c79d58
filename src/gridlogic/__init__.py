"""
GRIDLOGIC - a small DSL and exhaustive solver for logic-grid puzzles.

Puzzles declare named domains, record-like structs, sized variable arrays, and
implication rules; the solver enumerates assignments until every rule holds.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import GridLogicError, ManifestError, ModelError, ParseError

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "GridLogicError",
    "ManifestError",
    "ModelError",
    "ParseError",
]
