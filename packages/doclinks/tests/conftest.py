from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import settings
from hypothesis.database import DirectoryBasedExampleDatabase

_ALLOWED_MARKERS = {"unit", "integration", "slow"}

_ROOT = Path(__file__).resolve().parents[3]
_HYPOTHESIS_DB = _ROOT / "artifacts/doclinks/.hypothesis/examples"
_HYPOTHESIS_DB.parent.mkdir(parents=True, exist_ok=True)
settings.register_profile("doclinks", database=DirectoryBasedExampleDatabase(_HYPOTHESIS_DB))
settings.load_profile("doclinks")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def clean_doclinks_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DOCLINKS_SITE_ROOT", "DOCLINKS_ONLY_DOCS", "DOCLINKS_CONFIG", "DOCLINKS_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("RUN_ID", "pytest-run")


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    root = tmp_path / "site"
    (root / "en").mkdir(parents=True)
    return root
