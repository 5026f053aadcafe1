"""Parsing mixins for the wsmark parser.

- `RunScannerMixin`: text line decomposition into modifier runs
"""

from wsmark.parsing.runs import MODIFIER_TOGGLES, RunScannerMixin

__all__ = ["MODIFIER_TOGGLES", "RunScannerMixin"]
