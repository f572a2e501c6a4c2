from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from eda_toolkit.config import EdaToolkitSettings, get_settings


@pytest.fixture
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[EdaToolkitSettings]:
    monkeypatch.setenv("EDA_TOOLKIT_PROJECT_ROOT", str(tmp_path))
    monkeypatch.delenv("EDA_TOOLKIT_REPORTS_DIR", raising=False)
    monkeypatch.delenv("EDA_TOOLKIT_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()
