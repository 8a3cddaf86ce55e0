"""Diffall command output model."""

from pydantic import BaseModel, ConfigDict, Field


class DiffallOutput(BaseModel):
    """Structured summary of one diffall run."""

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    left: str
    right: str
    mode: str
    prefix: str = ""
    changed: list[str] = Field(default_factory=list)
    left_dir: str | None = None
    right_dir: str | None = None
    base_dir: str | None = None
    materialized: dict[str, list[str]] = Field(default_factory=dict)
    tool: str | None = None
    exit_code: int = 0
    copied_back: list[str] = Field(default_factory=list)
    workspace_removed: bool = True
