"""Top-level diffall configuration."""

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .LogConfig import LogConfig


class DiffallConfig(BaseModel):
    """Optional user configuration read from ``$DIFFALL_HOME/config.json``.

    Every field has a default, so a missing file means "use git's own
    diff tool settings and the system temp directory".
    """

    model_config = ConfigDict(extra="forbid")

    tool: str | None = Field(None, description="Diff tool name, overrides git's diff.tool")
    extcmd: str | None = Field(None, description="Custom diff command, called as '<extcmd> LEFT RIGHT'")
    tmp_dir: str | None = Field(None, description="Parent directory for session workspaces")
    log: LogConfig = Field(default_factory=LogConfig)

    @field_validator("tool", "extcmd")
    @classmethod
    def _non_blank(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("must be a non-empty string when set")
        return v

    @field_validator("tmp_dir")
    @classmethod
    def _expand_tmp_dir(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return str(Path(v).expanduser().absolute())

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get diffall home directory based on DIFFALL_HOME or default to ~/.diffall."""
        home_env = os.environ.get("DIFFALL_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".diffall"

    @classmethod
    def get_config_path(cls) -> Path:
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "DiffallConfig":
        """Load and validate config from file, or defaults if there is none.

        Raises:
            ValueError: If the file is not valid JSON or fails validation
        """
        path = cls.get_config_path()
        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object (found: {type(raw).__name__})")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
