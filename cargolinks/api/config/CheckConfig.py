"""Link check configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..link.Dispatcher import DEFAULT_CONCURRENCY
from ..link.verify_link import DEFAULT_TIMEOUT
from ..walk.walk_files import DEFAULT_INCLUDE_GLOBS
from .ConfigError import ConfigError


class CheckConfig(BaseModel):
    """Settings for one link-check run."""

    model_config = ConfigDict(extra="forbid")

    root: Path = Field(Path("."), description="Root of the tree to scan")
    concurrency: int = Field(DEFAULT_CONCURRENCY, gt=0, description="Maximum concurrent verification jobs")
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Per-request timeout in seconds")
    include_globs: list[str] = Field(
        default_factory=lambda: list(DEFAULT_INCLUDE_GLOBS),
        min_length=1,
        description="Glob patterns selecting the files to scan",
    )
    user_agent: str | None = Field(None, description="User-Agent header; defaults to cargo-links/<version>")
    verbose: int = Field(0, ge=0, description="Log detail level")
    color: bool = Field(True, description="Colored output")

    @field_validator("include_globs")
    @classmethod
    def _non_empty_globs(cls, value: list[str]) -> list[str]:
        globs = [g.strip() for g in value if g and g.strip()]
        if not globs:
            raise ValueError("must contain at least one non-empty pattern")
        return globs

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "CheckConfig":
        """Validate a raw mapping.

        Raises:
            ConfigError: Naming the first field that failed validation
        """
        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ConfigError(f"Configuration validation error: {detail}") from e

    @classmethod
    def load(cls, path: Path, **overrides: Any) -> "CheckConfig":
        """Load config from a JSON file, then apply ``overrides`` on top.

        Raises:
            ConfigError: If the file is missing, not valid JSON, not an
                object, or fails validation
        """
        if not path.exists():
            raise ConfigError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")

        raw.update(overrides)
        return cls.from_dict(raw)
