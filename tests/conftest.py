from pathlib import Path
from typing import Callable, Optional

import pytest

from config_loader import CONFIG_ENV_VAR
from helpers import build_page


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    path = tmp_path / "html"
    path.mkdir()
    return path


@pytest.fixture
def write_page(source_dir: Path) -> Callable[..., Path]:
    """Write a legacy page into ``source_dir`` and return its path."""

    def _write(filename: str, html: Optional[str] = None, **kwargs) -> Path:
        path = source_dir / filename
        path.write_text(
            html if html is not None else build_page(**kwargs),
            encoding="utf-8",
        )
        return path

    return _write


@pytest.fixture(autouse=True)
def isolated_config_env(monkeypatch, tmp_path):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
