"""Generic table-driven CRC engine.

This module provides table generation, the lazily built per-family table
context, and the byte-at-a-time update primitive every algorithm reduces to.
"""

from __future__ import annotations

from .table import CRCTable, Reflection, byte_view, fold, generate_table

__all__ = [
    "CRCTable",
    "Reflection",
    "byte_view",
    "fold",
    "generate_table",
]
