from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from .config import LinkRules, load_rules
from .errors import ConfigError
from .run_id import make_run_id

_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(env: Mapping[str, str], name: str) -> bool:
    return env.get(name, "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class RunContext:
    run_id: str
    site_root: Path
    only_docs: bool = False
    log_json: bool = False
    rules: LinkRules = field(default_factory=LinkRules)

    @property
    def docs_root(self) -> Path:
        return self.site_root / self.rules.language

    def in_scope(self, page: str) -> bool:
        if not self.only_docs:
            return True
        return page.startswith(self.rules.docs_prefix)

    def page_path(self, path: Path) -> str:
        return "/" + path.relative_to(self.site_root).as_posix()

    @classmethod
    def from_env(cls, default_site_root: Path | None = None, env: Mapping[str, str] | None = None) -> "RunContext":
        environ = os.environ if env is None else env
        raw_root = environ.get("DOCLINKS_SITE_ROOT") or default_site_root or Path.cwd()
        site_root = Path(raw_root).resolve()
        if not site_root.is_dir():
            raise ConfigError("site root is not a directory", site_root)
        rules = load_rules(site_root, environ.get("DOCLINKS_CONFIG") or None)
        return cls(
            run_id=environ.get("RUN_ID") or make_run_id(cwd=site_root),
            site_root=site_root,
            only_docs=env_flag(environ, "DOCLINKS_ONLY_DOCS"),
            log_json=env_flag(environ, "DOCLINKS_LOG_JSON"),
            rules=rules,
        )
