"""Runtime settings for the command-line front end.

Values come from the environment first; command-line options override
them.  Nothing here is persisted.
"""
from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_PROMPT = "tourreg> "


@dataclass(frozen=True)
class Settings:
    """Front-end settings.

    Parameters
    ----------
    log_level:
        Threshold for log records written to stderr.
    prompt:
        Prompt shown by the interactive shell.
    color:
        Whether output lines are styled.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    prompt: str = DEFAULT_PROMPT
    color: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from ``TOURREG_*`` variables and ``NO_COLOR``."""
        env = os.environ if environ is None else environ
        level = env.get("TOURREG_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if level not in LOG_LEVELS:
            level = DEFAULT_LOG_LEVEL
        return cls(
            log_level=level,
            prompt=env.get("TOURREG_PROMPT", DEFAULT_PROMPT),
            color="NO_COLOR" not in env,
        )

    def override(self, log_level: str | None = None, color: bool | None = None) -> "Settings":
        """Return a copy with any non-``None`` argument applied."""
        changes: dict[str, object] = {}
        if log_level is not None:
            changes["log_level"] = log_level.upper()
        if color is not None:
            changes["color"] = color
        return replace(self, **changes)
