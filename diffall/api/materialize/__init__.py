"""Materialize API module: write one side's changed files into a directory."""

from .materialize_side import materialize_side
from .MaterializeOutcome import MaterializeOutcome, MaterializeStatus

__all__ = ["MaterializeOutcome", "MaterializeStatus", "materialize_side"]
