# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path

import pytest

from csv_crossref.logging.init import reset_logging
from csv_crossref.models.upload import UploadedFile


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "uploads").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("CROSSREF_CONFIG", raising=False)
        yield p


@pytest.fixture(autouse=True)
def _fresh_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def sample_config_yaml() -> str:
    return """key_column: number
header_label: In Files
separator: ","
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "crossref.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def scenario_uploads() -> list[UploadedFile]:
    """fileA has key 1, fileB has keys 2 and 1."""
    return [
        UploadedFile("fileA.csv", "number,x\n1,a\n"),
        UploadedFile("fileB.csv", "number,y\n2,b\n1,c\n"),
    ]


@pytest.fixture()
def upload_dir(temp_workdir: Path, scenario_uploads: list[UploadedFile]) -> list[Path]:
    paths = []
    for u in scenario_uploads:
        p = temp_workdir / "uploads" / u.filename
        p.write_text(u.contents, encoding="utf-8")
        paths.append(p)
    return paths
