"""Fixtures compartidos."""

import sys
from pathlib import Path

import pytest

# src/ y tests/ en el path: `import core`, `import adapters`, `import helpers`.
_root = Path(__file__).resolve().parent.parent
for _path in (_root / "src", _root / "tests"):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))


@pytest.fixture
def settings():
    from core.config import AppSettings
    from helpers import BASE_URL

    return AppSettings(base_url=BASE_URL, http_timeout_seconds=5.0)
