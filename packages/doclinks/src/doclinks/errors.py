from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .exit_codes import ERR_CONFIG


@dataclass
class ScriptError(Exception):
    message: str
    code: int
    kind: str = "generic_error"
    source: str = ""

    def __str__(self) -> str:
        return f"{self.source}: {self.message}" if self.source else self.message


class ConfigError(ScriptError):
    """Bad site root or doclinks config; ``source`` names the offending path."""

    def __init__(self, message: str, source: str | Path = "") -> None:
        super().__init__(message, ERR_CONFIG, kind="config_error", source=str(source))
