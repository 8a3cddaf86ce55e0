"""Diffall API layer.

Each domain lives in its own subpackage; command functions return a
:class:`~diffall.api.StageResult.StageResult` that the CLI drives.
"""
