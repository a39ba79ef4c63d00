"""Configuration management.

Loads from an optional TOML config file + environment variables.
Uses pydantic-settings for validation and env var overriding.

This is the tool's own configuration; the repository's ``.git/config``
is only ever created empty and is never read here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from .errors import ConfigError

DEFAULT_BRANCH = "main"
DEFAULT_DESCRIPTION = (
    "Unnamed repository; edit this file 'description' to name the repository.\n"
)


_FORBIDDEN_REF_CHARS = frozenset(" ~^:?*[\\")


def branch_name_problem(name: str) -> str | None:
    """Check ``name`` against the ``git check-ref-format --branch`` rules.

    Returns a short reason when the name is rejected, ``None`` otherwise.
    """
    if not name:
        return "empty"
    if name == "@":
        return "'@' alone is reserved"
    if name.startswith("-"):
        return "starts with '-'"
    if name.startswith("/") or name.endswith("/"):
        return "starts or ends with '/'"
    if name.endswith("."):
        return "ends with '.'"
    if "//" in name:
        return "contains '//'"
    if ".." in name:
        return "contains '..'"
    if "@{" in name:
        return "contains '@{'"
    for ch in name:
        if ord(ch) < 0x20 or ord(ch) == 0x7F or ch.isspace():
            return "contains whitespace or a control character"
        if ch in _FORBIDDEN_REF_CHARS:
            return f"contains {ch!r}"
    for component in name.split("/"):
        if component.startswith("."):
            return "a component starts with '.'"
        if component.endswith(".lock"):
            return "a component ends with '.lock'"
    return None


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class InitConfig(BaseModel):
    initial_branch: str = DEFAULT_BRANCH  # Branch HEAD points at in a new repo
    description: str = DEFAULT_DESCRIPTION

    @field_validator("initial_branch")
    @classmethod
    def branch_name_must_be_valid(cls, value: str) -> str:
        problem = branch_name_problem(value)
        if problem:
            raise ValueError(f"invalid branch name {value!r}: {problem}")
        return value

    @property
    def head_contents(self) -> bytes:
        """Symbolic ref written to a fresh HEAD (no trailing newline)."""
        return f"ref: refs/heads/{self.initial_branch}".encode()


class ObservabilityConfig(BaseModel):
    log_level: str = "WARNING"
    log_format: str = "console"  # "json" or "console"

    @field_validator("log_format")
    @classmethod
    def format_must_be_known(cls, value: str) -> str:
        if value not in ("json", "console"):
            raise ValueError("log_format must be 'json' or 'console'")
        return value


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Top-level application settings.

    Loaded from a TOML config file, overridden by environment variables
    (``MINIGIT_INIT__INITIAL_BRANCH`` and so on).
    """

    init: InitConfig = Field(default_factory=InitConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    model_config = {"env_prefix": "MINIGIT_", "env_nested_delimiter": "__"}


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional, skipped if missing).
        overrides: Dict of overrides to apply on top.

    Raises:
        ConfigError: the file is not valid TOML or a value fails validation.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            import tomli

            try:
                with open(path, "rb") as f:
                    data = tomli.load(f)
            except (OSError, tomli.TOMLDecodeError) as exc:
                raise ConfigError(f"Cannot read config {path}: {exc}") from exc

    if overrides:
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(data.get(key), dict):
                data[key] = {**data[key], **value}
            else:
                data[key] = value

    try:
        return Settings(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
