import contextlib
import sys
from pathlib import Path

import pytest

ENV_VARS = {
    "MDVIEW_ESCAPE_HTML",
    "MDVIEW_PROTECT_CODE",
    "MDVIEW_THEME",
    "MDVIEW_HIGHLIGHT_CODE",
    "MDVIEW_COMPACT",
}


def pytest_configure(config):
    # Ensure repository root is importable (so 'mdview' and 'main' work)
    with contextlib.suppress(Exception):
        root = Path(__file__).resolve().parents[1]
        sys.path.insert(0, str(root))


@pytest.fixture(autouse=True)
def _clear_mdview_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
