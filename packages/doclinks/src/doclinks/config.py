"""Link rule configuration.

Defaults describe the generated site layout the checker was written for. A
site may override them with a YAML file (``doclinks.yaml`` in the site root or
the path named by ``DOCLINKS_CONFIG``); the file is validated against the
packaged JSON schema before any value is used.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from .errors import ConfigError

CONFIG_FILENAME = "doclinks.yaml"
SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "doclinks-config.schema.json"


@dataclass(frozen=True)
class LinkRules:
    language: str = "en"
    page_extension: str = ".html"
    docs_subdir: str = "docs"
    route_markers: tuple[str, ...] = ("getting-started", "packages")
    skip_prefixes: tuple[str, ...] = ("/css", "/assets")

    @property
    def docs_prefix(self) -> str:
        return f"/{self.language}/{self.docs_subdir.strip('/')}"

    def needs_extension(self, path: str) -> bool:
        if path.endswith(self.page_extension):
            return False
        return any(marker in path for marker in self.route_markers)

    def with_extension(self, path: str) -> str:
        return path + self.page_extension if self.needs_extension(path) else path


def _load_schema() -> dict[str, Any]:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def parse_rules(payload: object, source: str = "<config>") -> LinkRules:
    if payload is None:
        return LinkRules()
    try:
        jsonschema.validate(payload, _load_schema())
    except jsonschema.ValidationError as exc:
        raise ConfigError(f"invalid doclinks config: {exc.message}", source) from exc
    if not isinstance(payload, dict):
        raise ConfigError("doclinks config must be a mapping", source)
    overrides: dict[str, Any] = {}
    for key, value in payload.items():
        overrides[key] = tuple(value) if isinstance(value, list) else value
    return replace(LinkRules(), **overrides)


def load_rules(site_root: Path, explicit: str | None = None) -> LinkRules:
    path = Path(explicit) if explicit else site_root / CONFIG_FILENAME
    if not path.exists():
        if explicit:
            raise ConfigError("config file not found", path)
        return LinkRules()
    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"failed to parse YAML: {exc}", path) from exc
    return parse_rules(payload, source=str(path))
